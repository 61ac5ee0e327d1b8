from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from ..conversions import cmyk_to_gray, cmyk_to_rgb
from ..types.color_types import ColorSpace, NumericInput, PERCENT_MAX
from ..types.format_type import FormatLike, RenderFormat, resolve_format
from ..utils.num_utils import format_number, round_half_up
from .color_base import ColorBase, percent_channel

if TYPE_CHECKING:
    from .gray import Grayscale
    from .rgb import Rgb


class Cmyk(ColorBase):
    """
    CMYK print color, each ink a percentage in [0, 100].

    Inputs below 1 are read as 0-1 fractions and scaled: ``0.5`` is stored as
    ``50.0``.
    """
    __slots__ = ("_c", "_m", "_y", "_k")

    mode:       ClassVar[ColorSpace] = "cmyk"
    fields:     ClassVar[Tuple[str, ...]] = ("c", "m", "y", "k")
    str_format: ClassVar[Optional[RenderFormat]] = RenderFormat.PERCENT

    def __init__(self, c: NumericInput, m: NumericInput, y: NumericInput, k: NumericInput) -> None:
        self.c = c
        self.m = m
        self.y = y
        self.k = k

    @property
    def c(self) -> float:
        return self._c

    @c.setter
    def c(self, value: NumericInput) -> None:
        self._c = percent_channel("c", value)

    @property
    def m(self) -> float:
        return self._m

    @m.setter
    def m(self, value: NumericInput) -> None:
        self._m = percent_channel("m", value)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: NumericInput) -> None:
        self._y = percent_channel("y", value)

    @property
    def k(self) -> float:
        return self._k

    @k.setter
    def k(self, value: NumericInput) -> None:
        self._k = percent_channel("k", value)

    def to_rgb(self) -> Rgb:
        from .rgb import Rgb
        return Rgb(*cmyk_to_rgb(self._c, self._m, self._y, self._k))

    def to_gray(self) -> Grayscale:
        from .gray import Grayscale
        return Grayscale(cmyk_to_gray(self._c, self._m, self._y, self._k))

    def to_cmyk(self) -> Cmyk:
        return Cmyk(self._c, self._m, self._y, self._k)

    def render(self, format: FormatLike = None) -> str:
        fmt = resolve_format(format)
        inks = (self._c, self._m, self._y, self._k)

        if fmt == RenderFormat.CSS:
            return self.to_rgb().render(fmt)
        if fmt == RenderFormat.PERCENT:
            return " ".join(format_number(round_half_up(ink / PERCENT_MAX, 2)) for ink in inks)
        separator = ", " if fmt == RenderFormat.COMMA else " "
        return separator.join(format_number(ink) for ink in inks)
