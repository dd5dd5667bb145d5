"""
Cursor visibility, movement and position reporting.

Coordinates are 0-based: ``cursor_to(0, 0)`` is the top left cell.
"""

from __future__ import annotations

from typing import Optional

from ansi_escapes.core.constants import BACKWARD, DOWN, FORWARD, UP
from ansi_escapes.core.sequence import csi, repeat

CURSOR_TOP_LEFT = csi("H", 1, 1)
CURSOR_LEFT = csi(BACKWARD, 1000)
CURSOR_SAVE_POSITION = csi("s")
CURSOR_RESTORE_POSITION = csi("u")
CURSOR_GET_POSITION = csi("n", 6)
CURSOR_NEXT_LINE = csi("E")
CURSOR_PREV_LINE = csi("F")
CURSOR_HIDE = csi("l", "?25")
CURSOR_SHOW = csi("h", "?25")


def cursor_to(x: int, y: Optional[int] = None) -> str:
    """
    Move the cursor to an absolute position.

    With only ``x`` the cursor moves to that column on the current row.
    Negative coordinates are clamped to 0.
    """
    x = max(x, 0)
    if y is None:
        return csi("G", x + 1)
    return csi("H", max(y, 0) + 1, x + 1)


def cursor_move(x: int = 0, y: int = 0) -> str:
    """
    Move the cursor relative to its current position.

    Positive ``x`` moves right and positive ``y`` moves down. A zero
    component emits nothing.
    """
    parts: list[str] = []

    if x > 0:
        parts.append(repeat(FORWARD, x))
    elif x < 0:
        parts.append(repeat(BACKWARD, -x))

    if y > 0:
        parts.append(repeat(DOWN, y))
    elif y < 0:
        parts.append(repeat(UP, -y))

    return "".join(parts)


def cursor_up(count: int = 1) -> str:
    """Move cursor up ``count`` rows."""
    return repeat(UP, count)


def cursor_down(count: int = 1) -> str:
    """Move cursor down ``count`` rows."""
    return repeat(DOWN, count)


def cursor_forward(count: int = 1) -> str:
    """Move cursor right ``count`` columns."""
    return repeat(FORWARD, count)


def cursor_backward(count: int = 1) -> str:
    """Move cursor left ``count`` columns."""
    return repeat(BACKWARD, count)
