"""Shared pytest fixtures."""

from typing import Callable

import pytest

from ansi_spans.core.span import Span


def esc(text: str) -> str:
    """Replace readable ESC markers with the escape character."""
    return text.replace("ESC", "\x1b")


@pytest.fixture
def ansi() -> Callable[[str], str]:
    """Fixture turning "ESC[31mred" into "\\x1b[31mred"."""
    return esc


@pytest.fixture
def styled_spans() -> list[Span]:
    """A span sequence using every variant except numeric colors."""
    return [
        Span.color("red"),
        Span.bg_color("brightBlue"),
        Span.attribute("bold", True),
        Span.text("hello "),
        Span.reset(),
        Span.attribute("italic", True),
        Span.attribute("underline", True),
        Span.text("world"),
        Span.attribute("dim", True),
        Span.attribute("blink", True),
        Span.attribute("inverse", True),
        Span.attribute("strike", True),
        Span.color(None),
        Span.bg_color(None),
        Span.text("!"),
        Span.attribute("italic", False),
        Span.attribute("underline", False),
        Span.attribute("blink", False),
        Span.attribute("inverse", False),
        Span.attribute("strike", False),
        Span.text("done"),
    ]
