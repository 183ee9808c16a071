"""Color name <-> SGR code lookups."""

from ansi_spans.core.constants import (
    BG_RANGE,
    BRIGHT_BG_RANGE,
    BRIGHT_FG_RANGE,
    BRIGHT_PREFIX,
    COLOR_NAMES,
    FG_RANGE,
)
from ansi_spans.errors import InvalidColorName


def _in_range(code: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= code <= bounds[1]


def is_fg_color_code(code: int) -> bool:
    """True for named foreground codes (30-37, 90-97)."""
    return _in_range(code, FG_RANGE) or _in_range(code, BRIGHT_FG_RANGE)


def is_bg_color_code(code: int) -> bool:
    """True for named background codes (40-47, 100-107)."""
    return _in_range(code, BG_RANGE) or _in_range(code, BRIGHT_BG_RANGE)


def is_bright_name(name: str) -> bool:
    """True for camel-case bright names such as "brightRed"."""
    return name.startswith(BRIGHT_PREFIX) and bright_name(base_name(name)) == name


def bright_name(base: str) -> str:
    """Return the bright variant of a base color name ("red" -> "brightRed")."""
    return BRIGHT_PREFIX + base.capitalize()


def base_name(name: str) -> str:
    """Strip the bright prefix from a color name ("brightRed" -> "red")."""
    if name.startswith(BRIGHT_PREFIX) and len(name) > len(BRIGHT_PREFIX):
        return name[len(BRIGHT_PREFIX):].lower()
    return name


def color_name(code: int) -> str:
    """
    Map an SGR color code to its color name.

    The base name is picked by ``code % 10``; codes in the bright ranges
    (90-97, 100-107) get the ``bright`` prefix.
    """
    if _in_range(code, FG_RANGE) or _in_range(code, BG_RANGE):
        return COLOR_NAMES[code % 10]
    elif _in_range(code, BRIGHT_FG_RANGE) or _in_range(code, BRIGHT_BG_RANGE):
        return bright_name(COLOR_NAMES[code % 10])
    raise ValueError(f"Invalid SGR color code: {code}")


def color_code(name: str, background: bool = False) -> int:
    """
    Map a color name to its SGR code.

    Base names map to 30-37 (40-47 for background), bright names to
    90-97 (100-107 for background).
    """
    bright = is_bright_name(name)
    base = base_name(name) if bright else name
    try:
        index = COLOR_NAMES.index(base)
    except ValueError:
        raise InvalidColorName(name) from None

    if bright:
        start = BRIGHT_BG_RANGE[0] if background else BRIGHT_FG_RANGE[0]
    else:
        start = BG_RANGE[0] if background else FG_RANGE[0]
    return start + index
