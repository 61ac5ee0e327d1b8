from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from ..conversions import rgb_to_cmyk, rgb_to_gray, rgb_to_hex, rgb_to_hsl
from ..types.color_types import ColorSpace, NumericInput, RGB_MAX
from ..types.format_type import FormatLike, RenderFormat, resolve_format
from ..utils.num_utils import format_number, round_half_up
from .color_base import ColorBase, WithAlpha, int_channel

if TYPE_CHECKING:
    from .cmyk import Cmyk
    from .gray import Grayscale
    from .hex import Hex
    from .hsl import Hsl


class Rgb(WithAlpha, ColorBase):
    """
    RGB color with integer channels in [0, 255] and an optional alpha in [0, 1].

    Rgb is the hub of the conversion graph: every model converts to and from it.

    >>> color = Rgb(240, 180, 60, 0.5)
    >>> color.to_hsl().render()
    'hsla(40, 75%, 94%, 0.5)'
    >>> color.render(RenderFormat.COMMA)
    '240, 180, 60, 0.5'
    """
    __slots__ = ("_r", "_g", "_b", "_a")

    mode:   ClassVar[ColorSpace] = "rgb"
    fields: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")

    def __init__(
        self,
        r: NumericInput,
        g: NumericInput,
        b: NumericInput,
        a: Optional[NumericInput] = None,
    ) -> None:
        self.r = r
        self.g = g
        self.b = b
        self._a = None
        if a is not None:
            self.a = a

    @property
    def r(self) -> int:
        return self._r

    @r.setter
    def r(self, value: NumericInput) -> None:
        self._r = int_channel("r", value, RGB_MAX)

    @property
    def g(self) -> int:
        return self._g

    @g.setter
    def g(self, value: NumericInput) -> None:
        self._g = int_channel("g", value, RGB_MAX)

    @property
    def b(self) -> int:
        return self._b

    @b.setter
    def b(self, value: NumericInput) -> None:
        self._b = int_channel("b", value, RGB_MAX)

    # ------------------ CONVERSIONS ------------------
    def to_rgb(self) -> Rgb:
        return Rgb(self._r, self._g, self._b, self._a)

    def to_cmyk(self) -> Cmyk:
        from .cmyk import Cmyk
        return Cmyk(*rgb_to_cmyk(self._r, self._g, self._b))

    def to_gray(self) -> Grayscale:
        from .gray import Grayscale
        return Grayscale(rgb_to_gray(self._r, self._g, self._b))

    def to_hsl(self) -> Hsl:
        from .hsl import Hsl
        return Hsl(*rgb_to_hsl(self._r, self._g, self._b), self._a)

    def to_hex(self) -> Hex:
        """Hex carries no alpha, so it is dropped."""
        from .hex import Hex
        return Hex(rgb_to_hex(self._r, self._g, self._b))

    # ------------------ RENDERING ------------------
    def render(self, format: FormatLike = None) -> str:
        """
        Render as text.

        - COMMA: ``"r, g, b[, a]"``
        - CSS: ``"rgb(r, g, b)"``, or ``"rgba(r, g, b, a)"`` when alpha is set
        - PERCENT: each channel / 255 to 2 decimals, alpha left out
        - default: ``"r g b[ a]"``

        COMMA and the default only append alpha when it is non-zero.
        """
        fmt = resolve_format(format)
        channels = [str(self._r), str(self._g), str(self._b)]

        if fmt == RenderFormat.CSS:
            if self._a is None:
                return f"rgb({', '.join(channels)})"
            return f"rgba({', '.join(channels + [format_number(self._a)])})"

        if fmt == RenderFormat.PERCENT:
            return " ".join(format_number(round_half_up(c / RGB_MAX, 2)) for c in (self._r, self._g, self._b))

        if self._a:
            channels.append(format_number(self._a))
        separator = ", " if fmt == RenderFormat.COMMA else " "
        return separator.join(channels)
