"""Serialize span sequences back to escape-coded text."""

from typing import Iterable, Optional

from ansi_spans.core.color import color_code
from ansi_spans.core.constants import (
    ATTRIBUTE_CODES,
    CSI,
    PARAM_SEPARATOR,
    SGR_DEFAULT_BG,
    SGR_DEFAULT_FG,
    SGR_RESET,
    SGR_TERMINATOR,
)
from ansi_spans.core.span import ColorValue, Span, SpanType
from ansi_spans.errors import UnsupportedColorValue


def _color_codes(value: ColorValue, background: bool) -> list[int]:
    if value is None:
        return [SGR_DEFAULT_BG if background else SGR_DEFAULT_FG]
    if isinstance(value, int):
        raise UnsupportedColorValue(value)
    return [color_code(value, background=background)]


def span_codes(span: Span) -> list[int]:
    """
    Return the SGR codes a style span contributes.

    Raises:
        UnsupportedColorValue: for numeric color values
        InvalidColorName: for names outside the color table
    """
    if span.type is SpanType.RESET:
        return [SGR_RESET]
    if span.type is SpanType.COLOR:
        return _color_codes(span.value, background=False)
    if span.type is SpanType.BG_COLOR:
        return _color_codes(span.value, background=True)
    if span.type.is_attribute:
        on, off = ATTRIBUTE_CODES[span.type.value]
        return [on if span.value else off]
    raise ValueError(f"Span carries no SGR codes: {span!r}")


def sgr_sequence(codes: Iterable[int]) -> str:
    """Build ``ESC[c1;c2;...m`` from a list of codes."""
    return f"{CSI}{PARAM_SEPARATOR.join(str(c) for c in codes)}{SGR_TERMINATOR}"


class SpanEmitter:
    """
    Fold spans into output chunks, one per text span.

    Style spans accumulate as pending SGR codes and are written as a
    single combined sequence in front of the next text. The accumulator
    starts with a reset so the first chunk always sets a known baseline.
    """

    def __init__(self) -> None:
        self._codes: list[int] = [SGR_RESET]

    @property
    def pending(self) -> tuple[int, ...]:
        """SGR codes waiting for the next text span."""
        return tuple(self._codes)

    def push(self, span: Span) -> Optional[str]:
        """Consume one span; return an output chunk for text spans."""
        if span.type is SpanType.VALUE:
            text = span.value or ""
            if not self._codes:
                return text
            chunk = sgr_sequence(self._codes) + text
            self._codes = []
            return chunk

        self._codes.extend(span_codes(span))
        return None

    def extend(self, spans: Iterable[Span]) -> list[str]:
        """Consume spans in order and return the chunks they produce."""
        chunks: list[str] = []
        for span in spans:
            chunk = self.push(span)
            if chunk is not None:
                chunks.append(chunk)
        return chunks


def emit(spans: Iterable[Span]) -> list[str]:
    """
    Serialize spans to escape-coded text chunks.

    Each text span yields exactly one chunk, prefixed by the codes of the
    style spans before it. Style spans after the last text span are
    dropped.

    Raises:
        UnsupportedColorValue: a color span carries a numeric value
        InvalidColorName: a color span names an unknown color
    """
    return SpanEmitter().extend(spans)


def emit_string(spans: Iterable[Span]) -> str:
    """Serialize spans to a single escape-coded string."""
    return "".join(emit(spans))
