from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from ..conversions import gray_to_cmyk, gray_to_rgb
from ..types.color_types import ColorSpace, NumericInput, PERCENT_MAX
from ..types.format_type import FormatLike, RenderFormat, resolve_format
from ..utils.num_utils import format_number, round_half_up
from .color_base import ColorBase, percent_channel

if TYPE_CHECKING:
    from .cmyk import Cmyk
    from .rgb import Rgb


class Grayscale(ColorBase):
    """Single-channel gray level, a percentage in [0, 100] (sub-1 inputs scaled)."""
    __slots__ = ("_gray",)

    mode:       ClassVar[ColorSpace] = "gray"
    fields:     ClassVar[Tuple[str, ...]] = ("gray",)
    str_format: ClassVar[Optional[RenderFormat]] = RenderFormat.PERCENT

    def __init__(self, gray: NumericInput) -> None:
        self.gray = gray

    @property
    def gray(self) -> float:
        return self._gray

    @gray.setter
    def gray(self, value: NumericInput) -> None:
        self._gray = percent_channel("gray", value)

    def to_cmyk(self) -> Cmyk:
        from .cmyk import Cmyk
        return Cmyk(*gray_to_cmyk(self._gray))

    def to_rgb(self) -> Rgb:
        # The 0-100 level is reused as-is on the 0-255 scale.
        from .rgb import Rgb
        return Rgb(*gray_to_rgb(self._gray))

    def to_gray(self) -> Grayscale:
        return Grayscale(self._gray)

    def render(self, format: FormatLike = None) -> str:
        fmt = resolve_format(format)
        if fmt in (RenderFormat.CSS, RenderFormat.COMMA):
            return self.to_rgb().render(fmt)
        if fmt == RenderFormat.PERCENT:
            return format_number(round_half_up(self._gray / PERCENT_MAX, 2))
        return format_number(self._gray)
