"""Core data structures and color tables."""

from ansi_spans.core.color import color_code, color_name
from ansi_spans.core.span import Span, SpanType

__all__ = ["Span", "SpanType", "color_code", "color_name"]
