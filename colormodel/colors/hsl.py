from __future__ import annotations
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional, Tuple
import warnings

from ..conversions import hsl_to_rgb
from ..types.color_types import ColorSpace, NumericInput, HUE_MAX, PERCENT_MAX
from ..types.format_type import FormatLike, RenderFormat, resolve_format
from ..utils.num_utils import format_number
from .color_base import ColorBase, WithAlpha, int_channel

if TYPE_CHECKING:
    from .rgb import Rgb


class Hsl(WithAlpha, ColorBase):
    """HSL color: hue in [0, 360], saturation and lightness in [0, 100]."""
    __slots__ = ("_h", "_s", "_l", "_a")

    mode:   ClassVar[ColorSpace] = "hsl"
    fields: ClassVar[Tuple[str, ...]] = ("h", "s", "l", "a")

    def __init__(
        self,
        h: NumericInput,
        s: NumericInput,
        l: NumericInput,
        a: Optional[NumericInput] = None,
    ) -> None:
        self.h = h
        self.s = s
        self.l = l
        self._a = None
        if a is not None:
            self.a = a

    @property
    def h(self) -> int:
        return self._h

    @h.setter
    def h(self, value: NumericInput) -> None:
        self._h = int_channel("h", value, HUE_MAX)

    @property
    def s(self) -> int:
        return self._s

    @s.setter
    def s(self, value: NumericInput) -> None:
        self._s = int_channel("s", value, PERCENT_MAX)

    @property
    def l(self) -> int:
        return self._l

    @l.setter
    def l(self, value: NumericInput) -> None:
        self._l = int_channel("l", value, PERCENT_MAX)

    def to_dict(self) -> Dict[str, Any]:
        values: Dict[str, Any] = self._fields_dict()
        values["s"] = f"{self._s}%"
        values["l"] = f"{self._l}%"
        return values

    def to_rgb(self) -> Rgb:
        from .rgb import Rgb
        return Rgb(*hsl_to_rgb(self._h, self._s, self._l), self._a)

    def to_hsl(self) -> Hsl:
        return Hsl(self._h, self._s, self._l, self._a)

    def render(self, format: FormatLike = None) -> str:
        """HSL only renders as CSS: ``hsl(h, s%, l%)`` or ``hsla(h, s%, l%, a)``."""
        fmt = resolve_format(format)
        if fmt is not None and fmt != RenderFormat.CSS:
            warnings.warn(f"HSL has no {fmt.value} rendering, defaulting to CSS")

        parts = [str(self._h), f"{self._s}%", f"{self._l}%"]
        if self._a is None:
            return f"hsl({', '.join(parts)})"
        return f"hsla({', '.join(parts + [format_number(self._a)])})"
