"""Name lookup for every parameterless sequence."""

from ansi_escapes import cursor, erase, screen

SEQUENCES: dict[str, str] = {
    # Cursor
    "cursor_top_left": cursor.CURSOR_TOP_LEFT,
    "cursor_left": cursor.CURSOR_LEFT,
    "cursor_save_position": cursor.CURSOR_SAVE_POSITION,
    "cursor_restore_position": cursor.CURSOR_RESTORE_POSITION,
    "cursor_get_position": cursor.CURSOR_GET_POSITION,
    "cursor_next_line": cursor.CURSOR_NEXT_LINE,
    "cursor_prev_line": cursor.CURSOR_PREV_LINE,
    "cursor_hide": cursor.CURSOR_HIDE,
    "cursor_show": cursor.CURSOR_SHOW,
    # Erase
    "erase_end_line": erase.ERASE_END_LINE,
    "erase_start_line": erase.ERASE_START_LINE,
    "erase_line": erase.ERASE_LINE,
    "erase_down": erase.ERASE_DOWN,
    "erase_up": erase.ERASE_UP,
    "erase_screen": erase.ERASE_SCREEN,
    # Screen
    "scroll_up": screen.SCROLL_UP,
    "scroll_down": screen.SCROLL_DOWN,
    "reset_scroll_region": screen.RESET_SCROLL_REGION,
    "enter_alternative_screen": screen.ENTER_ALTERNATIVE_SCREEN,
    "exit_alternative_screen": screen.EXIT_ALTERNATIVE_SCREEN,
    "clear_screen": screen.CLEAR_SCREEN,
    "clear_viewport": screen.CLEAR_VIEWPORT,
    "clear_terminal": screen.CLEAR_TERMINAL,
    "beep": screen.BEEP,
}


def lookup(name: str) -> str:
    """Return the sequence registered as ``name`` (case and dashes ignored)."""
    key = name.strip().lower().replace("-", "_")
    try:
        return SEQUENCES[key]
    except KeyError:
        raise KeyError(f"Unknown sequence: {name!r}") from None
