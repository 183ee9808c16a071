"""Span sequences as JSON.

A span is an object with a ``type`` tag and a ``value`` payload, ``null``
for resets and for the channel-default colors:

[
  {"type": "color", "value": "red"},
  {"type": "bold", "value": true},
  {"type": "value", "value": "hello "},
  {"type": "reset", "value": null},
  {"type": "value", "value": "world"}
]
"""

import json
from typing import Any, Iterable

from ansi_spans.core.span import Span, SpanType
from ansi_spans.errors import AnsiSpansError


def span_to_dict(span: Span) -> dict[str, Any]:
    return {"type": span.type.value, "value": span.value}


def span_from_dict(data: Any) -> Span:
    """Build a Span from its dict form, checking the payload type."""
    if not isinstance(data, dict) or "type" not in data:
        raise AnsiSpansError(f"Span must be an object with a 'type' key, got {data!r}")

    try:
        span_type = SpanType(data["type"])
    except ValueError:
        raise AnsiSpansError(f"Unknown span type: {data['type']!r}") from None

    value = data.get("value")

    if span_type is SpanType.VALUE:
        valid = isinstance(value, str)
    elif span_type is SpanType.RESET:
        valid = value is None
    elif span_type.is_color:
        valid = value is None or (isinstance(value, (str, int)) and not isinstance(value, bool))
    else:
        valid = isinstance(value, bool)

    if not valid:
        raise AnsiSpansError(f"Invalid value for {span_type.value} span: {value!r}")
    return Span(span_type, value)


def dump_spans(spans: Iterable[Span], indent: int | None = 2) -> str:
    """Serialize spans to a JSON array."""
    return json.dumps([span_to_dict(span) for span in spans], indent=indent, ensure_ascii=False)


def load_spans(text: str) -> list[Span]:
    """Parse a JSON array of spans."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AnsiSpansError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise AnsiSpansError("Span document must be a JSON array")
    return [span_from_dict(item) for item in data]
