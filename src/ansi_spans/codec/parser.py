"""SGR escape sequence parser producing span sequences."""

import logging
from enum import Enum, auto

from ansi_spans.core.color import color_name, is_bg_color_code, is_fg_color_code
from ansi_spans.core.constants import (
    ESC,
    PARAM_SEPARATOR,
    SGR_ATTRIBUTE_OFF,
    SGR_ATTRIBUTE_ON,
    SGR_DEFAULT_BG,
    SGR_DEFAULT_FG,
    SGR_EXTENDED_BG,
    SGR_EXTENDED_FG,
    SGR_EXTENDED_INDEXED,
    SGR_RESET,
    SGR_TERMINATOR,
)
from ansi_spans.core.span import Span

logger = logging.getLogger(__name__)

# Longer SGR parameters are treated as unknown codes
MAX_PARAM_DIGITS = 10


class EscapeState(Enum):
    """Where the scanner is relative to an escape sequence."""
    TEXT = auto()
    BRACKET = auto()   # seen ESC, expecting '['
    CODE = auto()      # inside ESC[ ... m


class SgrState(Enum):
    """Sub-state for extended color codes (38;5;n and 48;5;n)."""
    SGR = auto()
    FG_PREFIX = auto()
    FG = auto()
    BG_PREFIX = auto()
    BG = auto()


def is_word_space(char: str) -> bool:
    """Whitespace that ends a word. CR and LF stay attached to their run."""
    return char.isspace() and char not in "\r\n"


def apply_code(state: SgrState, code: str) -> tuple[SgrState, list[Span]]:
    """
    Apply one SGR parameter.

    Returns the next SGR sub-state and the spans the parameter produces.
    An empty parameter (bare ``ESC[m``) is a reset. Unknown codes
    produce no spans.
    """
    if not code:
        return SgrState.SGR, [Span.reset()]

    if len(code) > MAX_PARAM_DIGITS:
        logger.debug("Ignoring oversized SGR parameter (%d digits)", len(code))
        return SgrState.SGR, []

    n = int(code)

    if state is SgrState.FG_PREFIX or state is SgrState.BG_PREFIX:
        if n == SGR_EXTENDED_INDEXED:
            return (SgrState.FG if state is SgrState.FG_PREFIX else SgrState.BG), []
        logger.debug("Dropping unsupported extended color mode %d", n)
        return SgrState.SGR, []
    if state is SgrState.FG:
        return SgrState.SGR, [Span.color(n)]
    if state is SgrState.BG:
        return SgrState.SGR, [Span.bg_color(n)]

    if n == SGR_RESET:
        return state, [Span.reset()]
    elif n in SGR_ATTRIBUTE_ON:
        return state, [Span.attribute(SGR_ATTRIBUTE_ON[n], True)]
    elif n in SGR_ATTRIBUTE_OFF:
        return state, [Span.attribute(name, False) for name in SGR_ATTRIBUTE_OFF[n]]
    elif is_fg_color_code(n):
        return state, [Span.color(color_name(n))]
    elif is_bg_color_code(n):
        return state, [Span.bg_color(color_name(n))]
    elif n == SGR_DEFAULT_FG:
        return state, [Span.color(None)]
    elif n == SGR_DEFAULT_BG:
        return state, [Span.bg_color(None)]
    elif n == SGR_EXTENDED_FG:
        return SgrState.FG_PREFIX, []
    elif n == SGR_EXTENDED_BG:
        return SgrState.BG_PREFIX, []

    logger.debug("Ignoring unsupported SGR code %d", n)
    return state, []


class SpanParser:
    """
    Incremental parser turning escape-coded text into spans.

    All scan state lives on the instance and can be read, so the state
    machine can be driven one character at a time with :meth:`step` and
    inspected between steps. Text may arrive in chunks through
    :meth:`feed`; chunk boundaries do not change the result.
    """

    def __init__(self, split_on_word: bool = False):
        self.split_on_word = split_on_word
        self.escape_state = EscapeState.TEXT
        self.sgr_state = SgrState.SGR
        self.in_whitespace = False
        self._code: list[str] = []
        self._literal: list[str] = []

    @property
    def code(self) -> str:
        """The SGR parameter buffered so far."""
        return "".join(self._code)

    @property
    def literal(self) -> str:
        """Text not yet emitted as a span."""
        return "".join(self._literal)

    def step(self, char: str) -> list[Span]:
        """Advance the state machine by one character."""
        if self.escape_state is EscapeState.TEXT:
            return self._step_text(char)

        if self.escape_state is EscapeState.BRACKET:
            if char == "[":
                self.escape_state = EscapeState.CODE
                self.sgr_state = SgrState.SGR
                self._code = []
            else:
                logger.debug("Dropping escape not followed by '[': %r", char)
                self.escape_state = EscapeState.TEXT
            return []

        # EscapeState.CODE
        if "0" <= char <= "9":
            if len(self._code) <= MAX_PARAM_DIGITS:
                self._code.append(char)
            return []
        if char == PARAM_SEPARATOR:
            return self._apply_code()
        if char == SGR_TERMINATOR:
            spans = self._apply_code()
            self.escape_state = EscapeState.TEXT
            return spans
        return []

    def feed(self, text: str) -> list[Span]:
        """Process a chunk of text, returning the spans completed so far."""
        spans: list[Span] = []
        for char in text:
            spans.extend(self.step(char))
        return spans

    def finish(self) -> list[Span]:
        """
        Flush end-of-input state and reset the parser.

        A parameter still buffered in an unterminated sequence is applied,
        then any pending literal text is emitted.
        """
        spans: list[Span] = []
        if self._code:
            spans.extend(self._apply_code())
        spans.extend(self._flush_literal())
        self.escape_state = EscapeState.TEXT
        self.sgr_state = SgrState.SGR
        return spans

    def _step_text(self, char: str) -> list[Span]:
        if char == ESC:
            spans = self._flush_literal()
            self.escape_state = EscapeState.BRACKET
            return spans

        if not self.split_on_word:
            self._literal.append(char)
            return []

        if is_word_space(char):
            self._literal.append(char)
            self.in_whitespace = True
            return []

        spans = self._flush_literal() if self.in_whitespace else []
        self._literal.append(char)
        return spans

    def _apply_code(self) -> list[Span]:
        self.sgr_state, spans = apply_code(self.sgr_state, "".join(self._code))
        self._code = []
        return spans

    def _flush_literal(self) -> list[Span]:
        self.in_whitespace = False
        if not self._literal:
            return []
        span = Span.text("".join(self._literal))
        self._literal = []
        return [span]


def parse(text: str, split_on_word: bool = False) -> list[Span]:
    """
    Parse escape-coded text into an ordered list of spans.

    Never fails: escapes not followed by ``[``, unknown SGR codes and
    unsupported extended-color modes are dropped.

    Args:
        text: Text containing zero or more ``ESC[n;...m`` sequences
        split_on_word: Also split text at each whitespace-to-word
            boundary, keeping the whitespace on the preceding span
    """
    parser = SpanParser(split_on_word=split_on_word)
    spans = parser.feed(text)
    spans.extend(parser.finish())
    return spans
