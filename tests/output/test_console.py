"""Tests for Rich Console factory, theme and markup decorator."""

from io import StringIO

import pytest

from numview.domain.decoration import Role
from numview.domain.integers import bit_string_32
from numview.output.console import (
    NUMVIEW_THEME,
    create_console,
    get_output,
    markup_decorator,
    style_for_role,
)


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[nv.error]hello[/nv.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_force_terminal_emits_ansi(self) -> None:
        console = create_console(force_terminal=True)
        console.print("[nv.error]hello[/nv.error]")
        assert "\x1b[" in get_output(console)

    def test_custom_width(self) -> None:
        console = create_console(width=80)
        assert console.width == 80

    def test_default_width(self) -> None:
        console = create_console()
        assert console.width == 120


class TestGetOutput:
    def test_extracts_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("hello world")
        assert "hello world" in get_output(console)

    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""


class TestRoleStyles:
    @pytest.mark.parametrize("role", list(Role))
    def test_every_role_has_a_theme_style(self, role: Role) -> None:
        assert style_for_role(role) in NUMVIEW_THEME.styles

    def test_style_name(self) -> None:
        assert style_for_role(Role.METER_POINTER) == "nv.meter.pointer"


class TestMarkupDecorator:
    def test_wraps_in_role_markup(self) -> None:
        assert markup_decorator("#", Role.BIT_SET) == "[nv.bit.set]#[/nv.bit.set]"

    def test_escapes_brackets(self) -> None:
        console = create_console(no_color=True)
        console.print(markup_decorator("[x]", Role.BANNER))
        assert get_output(console) == "[x]\n"

    def test_decorated_bits_render_to_plain_text(self) -> None:
        console = create_console(no_color=True)
        console.print(bit_string_32(5, markup_decorator), soft_wrap=True)
        assert get_output(console).rstrip("\n") == bit_string_32(5)
