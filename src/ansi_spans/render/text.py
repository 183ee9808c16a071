"""Plain-text views of styled terminal text - measuring, splitting, truncating."""

from __future__ import annotations

from typing import Iterable

from ansi_spans.codec.parser import parse
from ansi_spans.core.span import Span


def plain_text(spans: Iterable[Span]) -> str:
    """Concatenate the text of all value spans."""
    return "".join(span.value or "" for span in spans if span.is_text)


def strip_ansi(text: str) -> str:
    """Remove SGR sequences (and anything the parser drops) from text."""
    return plain_text(parse(text))


def visible_len(text: str) -> int:
    """Get visible length of a string (excluding escape codes)."""
    return len(strip_ansi(text))


def words(text: str) -> list[list[Span]]:
    """
    Split styled text into words for line wrapping.

    Each word is the run of style spans leading up to it plus its value
    span (trailing whitespace included). Style spans after the last word
    form a final group of their own.
    """
    groups: list[list[Span]] = []
    current: list[Span] = []

    for span in parse(text, split_on_word=True):
        current.append(span)
        if span.is_text:
            groups.append(current)
            current = []

    if current:
        groups.append(current)
    return groups


def truncate(spans: Iterable[Span], max_width: int) -> list[Span]:
    """
    Cut a span sequence to at most max_width visible characters.

    Style spans are kept up to the cut point so the truncated text keeps
    its styling. Nothing after the cut is kept.
    """
    if max_width <= 0:
        return []

    result: list[Span] = []
    remaining = max_width

    for span in spans:
        if not span.is_text:
            result.append(span)
            continue
        text = span.value or ""
        if len(text) >= remaining:
            result.append(Span.text(text[:remaining]))
            break
        result.append(span)
        remaining -= len(text)

    return result
