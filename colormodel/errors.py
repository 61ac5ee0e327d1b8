"""Exceptions raised by colormodel."""


class ColorError(Exception):
    """Base class for every error raised by this package."""


class ColorRangeError(ColorError, ValueError):
    """A channel value, hex length or hex digit is outside its valid domain."""


class ColorDomainError(ColorError):
    """A request the color model cannot satisfy (bad field, unparseable input)."""


class ColorFieldError(ColorDomainError, AttributeError):
    """Unknown field key, or an attempt to delete a field."""


class ColorParseError(ColorDomainError, ValueError):
    """A string could not be read as a color or a numeric value."""
