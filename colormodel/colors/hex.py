from __future__ import annotations
from string import hexdigits
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Tuple

from ..conversions import expand_hex_digits, hex_to_rgb, split_hex
from ..errors import ColorRangeError
from ..types.color_types import ColorSpace
from ..types.format_type import FormatLike, RenderFormat, resolve_format
from .color_base import ColorBase

if TYPE_CHECKING:
    from .rgb import Rgb

HEX_DIGITS = frozenset(hexdigits.lower())


def is_hex(text: str) -> bool:
    return bool(text) and set(text) <= HEX_DIGITS


def normalize_hex(value: str) -> str:
    """
    Lowercase ``value``, drop one leading ``#`` and validate it.

    Raises:
        ColorRangeError: if the length is not 3 or 6, or a digit is not hex.
    """
    if not isinstance(value, str):
        raise ColorRangeError(f"The hex value must be a string, got {type(value).__name__}.")
    hex_string = value.lower()
    if hex_string.startswith("#"):
        hex_string = hex_string[1:]
    if len(hex_string) not in (3, 6):
        raise ColorRangeError("The hex string was not the correct length.")
    if not is_hex(hex_string):
        raise ColorRangeError("The hex string was out of range.")
    return hex_string


class Hex(ColorBase):
    """
    Hexadecimal RGB color in short (``#fff``) or long (``#ffffff``) form.

    ``r``, ``g`` and ``b`` hold one or two lowercase hex digits each; ``hex``
    is the whole string without ``#``. Setting a single component keeps
    ``hex`` in step: mixed widths switch to the long form.
    """
    __slots__ = ("_r", "_g", "_b")

    mode:   ClassVar[ColorSpace] = "hex"
    fields: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "hex")

    def __init__(self, hex: str) -> None:
        self.hex = hex

    @staticmethod
    def _component(name: str, value: str) -> str:
        digits = value.lower() if isinstance(value, str) else ""
        if len(digits) not in (1, 2) or not is_hex(digits):
            raise ColorRangeError(f"The {name} hex string was out of range.")
        return digits

    @property
    def hex(self) -> str:
        parts = (self._r, self._g, self._b)
        if all(len(p) == 1 for p in parts):
            return "".join(parts)
        return "".join(expand_hex_digits(p) for p in parts)

    @hex.setter
    def hex(self, value: str) -> None:
        self._r, self._g, self._b = split_hex(normalize_hex(value))

    @property
    def r(self) -> str:
        return self._r

    @r.setter
    def r(self, value: str) -> None:
        self._r = self._component("r", value)

    @property
    def g(self) -> str:
        return self._g

    @g.setter
    def g(self, value: str) -> None:
        self._g = self._component("g", value)

    @property
    def b(self) -> str:
        return self._b

    @b.setter
    def b(self, value: str) -> None:
        self._b = self._component("b", value)

    @property
    def value(self) -> Tuple[str, str, str]:
        return self._r, self._g, self._b

    def to_dict(self) -> Dict[str, Any]:
        return {"hex": f"#{self.hex}", "r": self._r, "g": self._g, "b": self._b}

    def __repr__(self) -> str:
        return f"Hex({self.hex!r})"

    def to_rgb(self) -> Rgb:
        from .rgb import Rgb
        return Rgb(*hex_to_rgb(self._r, self._g, self._b))

    def to_hex(self) -> Hex:
        return Hex(self.hex)

    def render(self, format: FormatLike = None) -> str:
        """COMMA and PERCENT render the RGB equivalent; anything else is ``#hex``."""
        fmt = resolve_format(format)
        if fmt in (RenderFormat.COMMA, RenderFormat.PERCENT):
            return self.to_rgb().render(fmt)
        return f"#{self.hex}"
