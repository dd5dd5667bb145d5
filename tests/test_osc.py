"""Tests for OSC sequences."""

import base64

import ansi_escapes as ansi
from ansi_escapes.core.constants import ST


class TestLink:
    """Tests for OSC 8 hyperlinks."""

    def test_exact(self) -> None:
        assert ansi.link("http://example.com", "text") == (
            "\x1b]8;;http://example.com\x07text\x1b]8;;\x07"
        )

    def test_text_between_open_and_close(self) -> None:
        seq = ansi.link("http://example.com", "text")
        opening = seq.index("]8;;http://example.com")
        closing = seq.rindex("]8;;")
        assert opening < seq.index("text") < closing

    def test_payload_not_escaped(self) -> None:
        seq = ansi.link("http://example.com/?q=a;b", "\x1b[1mbold\x1b[0m")
        assert "http://example.com/?q=a;b" in seq
        assert "\x1b[1mbold\x1b[0m" in seq

    def test_params(self) -> None:
        seq = ansi.link("https://a.b", "x", {"id": "docs"})
        assert seq.startswith("\x1b]8;id=docs;https://a.b\x07")

    def test_multiple_params_colon_separated(self) -> None:
        seq = ansi.link("https://a.b", "x", {"id": "1", "foo": "bar"})
        assert seq.startswith("\x1b]8;id=1:foo=bar;https://a.b\x07")

    def test_string_terminator(self) -> None:
        seq = ansi.link("https://a.b", "x", terminator=ST)
        assert seq == "\x1b]8;;https://a.b\x1b\\x\x1b]8;;\x1b\\"


class TestTitleAndCwd:
    """Tests for window title and working directory."""

    def test_title(self) -> None:
        assert ansi.set_title("build: ok") == "\x1b]0;build: ok\x07"

    def test_title_st(self) -> None:
        assert ansi.set_title("t", terminator=ST) == "\x1b]0;t\x1b\\"

    def test_cwd(self) -> None:
        assert ansi.set_cwd("/home/user") == "\x1b]50;CurrentDir=/home/user\x07"

    def test_cwd_st(self) -> None:
        assert ansi.set_cwd("/tmp", terminator=ST) == "\x1b]50;CurrentDir=/tmp\x1b\\"


class TestClipboard:
    """Tests for OSC 52."""

    def test_default_target(self) -> None:
        expected = base64.b64encode(b"hello").decode("ascii")
        assert ansi.set_clipboard("hello") == f"\x1b]52;c;{expected}\x07"

    def test_primary_selection(self) -> None:
        assert ansi.set_clipboard("", target="p") == "\x1b]52;p;\x07"

    def test_utf8(self) -> None:
        seq = ansi.set_clipboard("▀▄")
        payload = seq[len("\x1b]52;c;"):-1]
        assert base64.b64decode(payload).decode("utf-8") == "▀▄"

    def test_string_terminator(self) -> None:
        expected = base64.b64encode(b"hi").decode("ascii")
        assert ansi.set_clipboard("hi", terminator=ST) == f"\x1b]52;c;{expected}\x1b\\"
