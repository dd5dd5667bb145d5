"""Line and screen erasure."""

from ansi_escapes.core.sequence import csi
from ansi_escapes.cursor import CURSOR_LEFT, cursor_up

# Erase in line (EL)
ERASE_END_LINE = csi("K")
ERASE_START_LINE = csi("K", 1)
ERASE_LINE = csi("K", 2)

# Erase in display (ED)
ERASE_DOWN = csi("J")
ERASE_UP = csi("J", 1)
ERASE_SCREEN = csi("J", 2)


def erase_lines(count: int) -> str:
    """
    Erase ``count`` lines, starting at the current one and moving up.

    Each line is cleared from column 0; the cursor ends on the topmost
    erased line. ``count <= 0`` returns an empty string.
    """
    if count <= 0:
        return ""
    return cursor_up(1).join([CURSOR_LEFT + ERASE_END_LINE] * count)
