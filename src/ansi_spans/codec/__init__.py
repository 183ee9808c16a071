"""Encoding/decoding between escape-coded text and spans."""

from ansi_spans.codec.emitter import SpanEmitter, emit, emit_string
from ansi_spans.codec.parser import SpanParser, parse

__all__ = ["SpanEmitter", "SpanParser", "emit", "emit_string", "parse"]
