"""Scrolling, scroll margins, alternative screen, clearing and beep."""

from ansi_escapes.core.constants import BEL, ESC
from ansi_escapes.core.sequence import csi
from ansi_escapes.erase import ERASE_SCREEN

SCROLL_UP = csi("S")
SCROLL_DOWN = csi("T")

RESET_SCROLL_REGION = csi("r")

# https://terminalguide.namepad.de/mode/p47/
ENTER_ALTERNATIVE_SCREEN = csi("h", "?1049")
EXIT_ALTERNATIVE_SCREEN = csi("l", "?1049")

# RIS: full reset, clears the screen and resets modes
CLEAR_SCREEN = f"{ESC}c"
CLEAR_VIEWPORT = ERASE_SCREEN + csi("H")
CLEAR_TERMINAL = ERASE_SCREEN + csi("J", 3) + csi("H")

BEEP = BEL


def set_scroll_region(top: int, bottom: int) -> str:
    """
    Limit scrolling to rows ``top`` through ``bottom`` (0-based, inclusive).

    Negative rows clamp to 0 and ``bottom`` is raised to ``top`` when it
    lies above it.
    """
    top = max(top, 0)
    bottom = max(bottom, top)
    return csi("r", top + 1, bottom + 1)
