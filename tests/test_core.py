"""Tests for the span data model and color tables."""

import pytest

from ansi_spans.core.color import (
    color_code,
    color_name,
    is_bg_color_code,
    is_bright_name,
    is_fg_color_code,
)
from ansi_spans.core.constants import ATTRIBUTE_CODES, COLOR_NAMES
from ansi_spans.core.span import Span, SpanType
from ansi_spans.errors import AnsiSpansError, InvalidColorName


class TestSpan:
    """Tests for Span."""

    def test_factories(self) -> None:
        assert Span.text("hi") == Span(SpanType.VALUE, "hi")
        assert Span.reset() == Span(SpanType.RESET, None)
        assert Span.color("red") == Span(SpanType.COLOR, "red")
        assert Span.bg_color(None) == Span(SpanType.BG_COLOR, None)
        assert Span.attribute("strike", True) == Span(SpanType.STRIKE, True)

    def test_attribute_rejects_non_attributes(self) -> None:
        with pytest.raises(ValueError):
            Span.attribute("color", True)
        with pytest.raises(ValueError):
            Span.attribute("sparkle", True)

    def test_spans_are_immutable(self) -> None:
        span = Span.text("hi")
        with pytest.raises(AttributeError):
            span.value = "bye"  # type: ignore[misc]

    def test_is_style(self) -> None:
        assert Span.text("x").is_text is True
        assert Span.text("x").is_style is False
        assert Span.reset().is_style is True
        assert Span.attribute("bold", False).is_style is True

    def test_tag_values(self) -> None:
        assert SpanType.BG_COLOR.value == "bgColor"
        assert SpanType("value") is SpanType.VALUE
        assert len(SpanType) == 11

    def test_attribute_types_match_table(self) -> None:
        attribute_names = {t.value for t in SpanType if t.is_attribute}
        assert attribute_names == set(ATTRIBUTE_CODES)

    def test_repr(self) -> None:
        assert repr(Span.color("red")) == "Span(color='red')"


class TestColorName:
    """Tests for SGR code -> name lookups."""

    def test_foreground(self) -> None:
        for i, name in enumerate(COLOR_NAMES):
            assert color_name(30 + i) == name

    def test_background(self) -> None:
        for i, name in enumerate(COLOR_NAMES):
            assert color_name(40 + i) == name

    def test_bright(self) -> None:
        assert color_name(90) == "brightBlack"
        assert color_name(91) == "brightRed"
        assert color_name(97) == "brightWhite"
        assert color_name(103) == "brightYellow"

    def test_invalid_code(self) -> None:
        for code in (29, 38, 39, 48, 98, 108):
            with pytest.raises(ValueError):
                color_name(code)

    def test_range_guards(self) -> None:
        assert is_fg_color_code(30) and is_fg_color_code(97)
        assert not is_fg_color_code(38)
        assert is_bg_color_code(47) and is_bg_color_code(100)
        assert not is_bg_color_code(49)


class TestColorCode:
    """Tests for name -> SGR code lookups."""

    def test_foreground(self) -> None:
        assert color_code("black") == 30
        assert color_code("red") == 31
        assert color_code("white") == 37

    def test_background(self) -> None:
        assert color_code("red", background=True) == 41
        assert color_code("cyan", background=True) == 46

    def test_bright(self) -> None:
        assert color_code("brightRed") == 91
        assert color_code("brightWhite", background=True) == 107

    def test_inverse_of_color_name(self) -> None:
        for code in list(range(30, 38)) + list(range(90, 98)):
            assert color_code(color_name(code)) == code
        for code in list(range(40, 48)) + list(range(100, 108)):
            assert color_code(color_name(code), background=True) == code

    def test_invalid_name(self) -> None:
        for name in ("purple", "Red", "brightred", "bright", ""):
            with pytest.raises(InvalidColorName) as exc_info:
                color_code(name)
            assert exc_info.value.name == name

    def test_invalid_name_is_codec_error(self) -> None:
        with pytest.raises(AnsiSpansError):
            color_code("purple")
        with pytest.raises(ValueError):
            color_code("purple")

    def test_is_bright_name(self) -> None:
        assert is_bright_name("brightGreen") is True
        assert is_bright_name("green") is False
        assert is_bright_name("brightgreen") is False
