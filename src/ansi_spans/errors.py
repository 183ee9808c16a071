"""Errors raised when serializing spans back to escape-coded text."""


class AnsiSpansError(ValueError):
    """Base class for codec errors."""


class UnsupportedColorValue(AnsiSpansError):
    """A numeric (palette or true-color) color was passed to the emitter."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Numeric color values are not supported: {value!r}")


class InvalidColorName(AnsiSpansError):
    """A color name outside the standard table was passed to the emitter."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid color name: {name!r}")
