r"""
ansi-spans: terminal escape codes <-> structured style spans

Turn colored terminal output into data and back again.

Quick Start:
    >>> import ansi_spans
    >>> ansi_spans.parse("\x1b[31mred")
    [Span(color='red'), Span(value='red')]
    >>> ansi_spans.emit([ansi_spans.Span.color("red"), ansi_spans.Span.text("text")])
    ['\x1b[0;31mtext']

Features:
    - Parse SGR color and style codes into an ordered list of spans
    - Optional word splitting for measurement and line wrapping
    - Emit spans as minimal combined SGR sequences
    - Incremental parsing of streamed output
    - JSON form of span sequences
"""

__version__ = "0.1.0"

# Core types
from ansi_spans.core.span import Span, SpanType

# Codec
from ansi_spans.codec.parser import SpanParser, parse
from ansi_spans.codec.emitter import SpanEmitter, emit, emit_string

# Errors
from ansi_spans.errors import AnsiSpansError, InvalidColorName, UnsupportedColorValue

__all__ = [
    # Version
    "__version__",
    # Core types
    "Span",
    "SpanType",
    # Codec
    "SpanParser",
    "SpanEmitter",
    "parse",
    "emit",
    "emit_string",
    # Errors
    "AnsiSpansError",
    "InvalidColorName",
    "UnsupportedColorValue",
]
