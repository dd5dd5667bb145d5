"""Template builders for CSI and OSC sequences."""

from __future__ import annotations

from ansi_escapes.core.constants import BEL, CSI, OSC


def csi(final: str, *params: int | str) -> str:
    """
    Build a CSI sequence: ``ESC [`` params joined by ``;`` then ``final``.

    Parameters are emitted verbatim, so callers convert 0-based
    coordinates before passing them in.
    """
    return f"{CSI}{';'.join(str(p) for p in params)}{final}"


def osc(*fields: int | str, terminator: str = BEL) -> str:
    """Build an OSC sequence: ``ESC ]`` fields joined by ``;`` then the terminator."""
    return f"{OSC}{';'.join(str(f) for f in fields)}{terminator}"


def repeat(final: str, count: int) -> str:
    """CSI sequence repeating ``final`` ``count`` times, or ``""`` if count <= 0."""
    if count <= 0:
        return ""
    return csi(final, count)
