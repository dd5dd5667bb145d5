"""
ansi-escapes: ANSI escape sequences for manipulating the terminal

Every operation returns a plain ``str``; writing it is up to the caller.

Quick Start:
    >>> import ansi_escapes as ansi
    >>> print(ansi.CURSOR_HIDE + "Hello, World!", end="")
    >>> print(ansi.erase_lines(1) + "Hello, Terminal!" + ansi.CURSOR_SHOW)

Features:
    - Cursor visibility, absolute and relative movement
    - Line and screen erasure, including multi-line erase
    - Scrolling, scroll margins and the alternative screen
    - OSC 8 hyperlinks, window title, clipboard
    - iTerm2 inline images (Pillow optional)
"""

__version__ = "0.1.0"

# Cursor
from ansi_escapes.cursor import (
    CURSOR_GET_POSITION,
    CURSOR_HIDE,
    CURSOR_LEFT,
    CURSOR_NEXT_LINE,
    CURSOR_PREV_LINE,
    CURSOR_RESTORE_POSITION,
    CURSOR_SAVE_POSITION,
    CURSOR_SHOW,
    CURSOR_TOP_LEFT,
    cursor_backward,
    cursor_down,
    cursor_forward,
    cursor_move,
    cursor_to,
    cursor_up,
)

# Erase
from ansi_escapes.erase import (
    ERASE_DOWN,
    ERASE_END_LINE,
    ERASE_LINE,
    ERASE_SCREEN,
    ERASE_START_LINE,
    ERASE_UP,
    erase_lines,
)

# Screen
from ansi_escapes.screen import (
    BEEP,
    CLEAR_SCREEN,
    CLEAR_TERMINAL,
    CLEAR_VIEWPORT,
    ENTER_ALTERNATIVE_SCREEN,
    EXIT_ALTERNATIVE_SCREEN,
    RESET_SCROLL_REGION,
    SCROLL_DOWN,
    SCROLL_UP,
    set_scroll_region,
)

# OSC
from ansi_escapes.osc import link, set_clipboard, set_cwd, set_title
from ansi_escapes.image import image, image_from_file, image_from_pil

# Lookup by name
from ansi_escapes.catalog import SEQUENCES, lookup

__all__ = [
    # Version
    "__version__",
    # Cursor
    "CURSOR_GET_POSITION",
    "CURSOR_HIDE",
    "CURSOR_LEFT",
    "CURSOR_NEXT_LINE",
    "CURSOR_PREV_LINE",
    "CURSOR_RESTORE_POSITION",
    "CURSOR_SAVE_POSITION",
    "CURSOR_SHOW",
    "CURSOR_TOP_LEFT",
    "cursor_backward",
    "cursor_down",
    "cursor_forward",
    "cursor_move",
    "cursor_to",
    "cursor_up",
    # Erase
    "ERASE_DOWN",
    "ERASE_END_LINE",
    "ERASE_LINE",
    "ERASE_SCREEN",
    "ERASE_START_LINE",
    "ERASE_UP",
    "erase_lines",
    # Screen
    "BEEP",
    "CLEAR_SCREEN",
    "CLEAR_TERMINAL",
    "CLEAR_VIEWPORT",
    "ENTER_ALTERNATIVE_SCREEN",
    "EXIT_ALTERNATIVE_SCREEN",
    "RESET_SCROLL_REGION",
    "SCROLL_DOWN",
    "SCROLL_UP",
    "set_scroll_region",
    # OSC
    "link",
    "set_clipboard",
    "set_cwd",
    "set_title",
    "image",
    "image_from_file",
    "image_from_pil",
    # Lookup
    "SEQUENCES",
    "lookup",
]
