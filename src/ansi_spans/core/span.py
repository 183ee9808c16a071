"""Span - one event in a decoded stream of styled terminal text."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

# A color name, a numeric palette index (parser output only), or None
# for the channel default.
ColorValue = Union[str, int, None]
SpanValue = Union[str, bool, int, None]


class SpanType(Enum):
    """Closed set of span tags."""
    VALUE = "value"
    RESET = "reset"
    COLOR = "color"
    BG_COLOR = "bgColor"
    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    INVERSE = "inverse"
    STRIKE = "strike"

    @property
    def is_attribute(self) -> bool:
        return self in ATTRIBUTE_TYPES

    @property
    def is_color(self) -> bool:
        return self in (SpanType.COLOR, SpanType.BG_COLOR)


ATTRIBUTE_TYPES = frozenset({
    SpanType.BOLD,
    SpanType.DIM,
    SpanType.ITALIC,
    SpanType.UNDERLINE,
    SpanType.BLINK,
    SpanType.INVERSE,
    SpanType.STRIKE,
})


@dataclass(frozen=True, slots=True)
class Span:
    """
    A literal text run or a single style-state delta.

    Spans carry no cumulative state: a ``bold`` span switches bold on or
    off from that point on and says nothing about color. Sequences of
    spans are replayed in order, the way a terminal would apply them.
    """
    type: SpanType
    value: SpanValue = None

    @classmethod
    def text(cls, value: str) -> "Span":
        return cls(SpanType.VALUE, value)

    @classmethod
    def reset(cls) -> "Span":
        return cls(SpanType.RESET, None)

    @classmethod
    def color(cls, value: ColorValue) -> "Span":
        return cls(SpanType.COLOR, value)

    @classmethod
    def bg_color(cls, value: ColorValue) -> "Span":
        return cls(SpanType.BG_COLOR, value)

    @classmethod
    def attribute(cls, name: str, on: bool) -> "Span":
        """Create an attribute span from its name ("bold", "dim", ...)."""
        span_type = SpanType(name)
        if not span_type.is_attribute:
            raise ValueError(f"Not an attribute: {name}")
        return cls(span_type, on)

    @property
    def is_text(self) -> bool:
        return self.type is SpanType.VALUE

    @property
    def is_style(self) -> bool:
        """True for every span that changes style state rather than adding text."""
        return self.type is not SpanType.VALUE

    def __repr__(self) -> str:
        return f"Span({self.type.value}={self.value!r})"
