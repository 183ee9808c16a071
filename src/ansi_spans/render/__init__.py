"""Plain-text and JSON views of span sequences."""

from ansi_spans.render.json_format import dump_spans, load_spans
from ansi_spans.render.text import plain_text, strip_ansi, truncate, visible_len, words

__all__ = [
    "dump_spans",
    "load_spans",
    "plain_text",
    "strip_ansi",
    "truncate",
    "visible_len",
    "words",
]
