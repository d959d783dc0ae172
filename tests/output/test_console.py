"""Tests for Rich Console factory and theme."""

from io import StringIO

import pytest

from tzctl.output.console import TZ_THEME, create_console, get_output, style_for_offset


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        console.print("[tz.zone]Asia/Tokyo[/tz.zone] [tz.offset.ahead]UTC +09:00[/]")
        assert "Asia/Tokyo UTC +09:00" in get_output(console)


class TestStyleForOffset:
    @pytest.mark.parametrize(
        ("minutes", "style"),
        [(330, "tz.offset.ahead"), (-240, "tz.offset.behind"), (0, "tz.offset.utc"), (None, "tz.error")],
    )
    def test_styles(self, minutes: int | None, style: str) -> None:
        assert style_for_offset(minutes) == style
        assert style in TZ_THEME.styles
