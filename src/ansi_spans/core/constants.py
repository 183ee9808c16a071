"""Shared constants for SGR color and attribute codes."""

from types import MappingProxyType

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
SGR_TERMINATOR = "m"
PARAM_SEPARATOR = ";"
RESET = f"{CSI}0{SGR_TERMINATOR}"

# Base color names, indexed by SGR code % 10
COLOR_NAMES: tuple[str, ...] = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
)
BRIGHT_PREFIX = "bright"

# SGR color code ranges (inclusive)
FG_RANGE = (30, 37)
BG_RANGE = (40, 47)
BRIGHT_FG_RANGE = (90, 97)
BRIGHT_BG_RANGE = (100, 107)

# Special SGR codes
SGR_RESET = 0
SGR_DEFAULT_FG = 39
SGR_DEFAULT_BG = 49
SGR_EXTENDED_FG = 38
SGR_EXTENDED_BG = 48
SGR_EXTENDED_INDEXED = 5

# Boolean style attributes: name -> (on code, off code)
ATTRIBUTE_CODES = MappingProxyType({
    "bold": (1, 22),
    "dim": (2, 22),
    "italic": (3, 23),
    "underline": (4, 24),
    "blink": (5, 25),
    "inverse": (7, 27),
    "strike": (9, 29),
})

# SGR code -> attribute switched on (6 is rapid blink, treated as blink)
SGR_ATTRIBUTE_ON = MappingProxyType({
    1: "bold",
    2: "dim",
    3: "italic",
    4: "underline",
    5: "blink",
    6: "blink",
    7: "inverse",
    9: "strike",
})

# SGR code -> attributes switched off (22 is "normal intensity")
SGR_ATTRIBUTE_OFF = MappingProxyType({
    22: ("bold", "dim"),
    23: ("italic",),
    24: ("underline",),
    25: ("blink",),
    27: ("inverse",),
    29: ("strike",),
})
