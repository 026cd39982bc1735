"""Tests for the Rich console factory."""

from rich.text import Text

from weblinker.output.console import WL_THEME, create_console, get_output


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_theme_styles_available(self) -> None:
        for name in ("wl.ok", "wl.error", "wl.op", "wl.key", "wl.page"):
            assert name in WL_THEME.styles

    def test_no_ansi_when_not_a_terminal(self) -> None:
        console = create_console()
        console.print(Text("ERROR", style="wl.error"))
        assert "\x1b[" not in get_output(console)

    def test_fixed_width(self) -> None:
        assert create_console().width == 120
