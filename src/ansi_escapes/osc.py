"""
Operating System Command sequences: hyperlinks, title, cwd, clipboard.

Payloads are inserted verbatim. Stripping control characters out of
URLs or titles is left to the caller.

See https://iterm2.com/documentation-escape-codes.html and
https://gist.github.com/egmontkob/eb114294efbcd5adb1944c9f3cb5feda
"""

from __future__ import annotations

import base64
from typing import Mapping, Optional

from ansi_escapes.core.constants import BEL
from ansi_escapes.core.sequence import osc


def link(
    url: str,
    text: str,
    params: Optional[Mapping[str, str]] = None,
    *,
    terminator: str = BEL,
) -> str:
    """
    Wrap ``text`` in an OSC 8 hyperlink pointing at ``url``.

    ``params`` become the ``key=value`` list between the ``8`` and the URL,
    e.g. ``{"id": "docs"}`` so split links highlight together.
    """
    params_str = ":".join(f"{key}={value}" for key, value in (params or {}).items())
    opening = osc(8, params_str, url, terminator=terminator)
    closing = osc(8, "", "", terminator=terminator)
    return f"{opening}{text}{closing}"


def set_title(title: str, *, terminator: str = BEL) -> str:
    """Set the window title and icon name."""
    return osc(0, title, terminator=terminator)


def set_cwd(path: str, *, terminator: str = BEL) -> str:
    """Report the shell's working directory to iTerm2."""
    return osc(50, f"CurrentDir={path}", terminator=terminator)


def set_clipboard(text: str, target: str = "c", *, terminator: str = BEL) -> str:
    """Copy ``text`` to the clipboard selection ``target`` via OSC 52."""
    payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return osc(52, target, payload, terminator=terminator)
