from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple, Union, Self
from abc import ABC, abstractmethod

from ..errors import ColorFieldError, ColorRangeError
from ..types.color_types import ColorSpace, NumericInput, Scalar, is_hue_space, ALPHA_MAX, PERCENT_MAX
from ..types.format_type import FormatLike, RenderFormat
from ..utils.num_utils import to_float, to_int


def check_range(name: str, value: Scalar, low: Scalar, high: Scalar) -> Scalar:
    if not low <= value <= high:
        raise ColorRangeError(f"The value of {name} must be between {low} and {high}.")
    return value


def int_channel(name: str, value: NumericInput, high: int) -> int:
    """Coerce to int (truncating) and range-check against ``[0, high]``."""
    return check_range(name, to_int(value), 0, high)


def percent_channel(name: str, value: NumericInput) -> float:
    """
    Coerce a 0-100 percentage, reading values below 1 as 0-1 fractions.

    ``0.5`` becomes ``50.0``. A genuine percentage below 1 (say 0.99%) cannot
    be expressed: it is indistinguishable from a fraction.
    """
    number = check_range(name, to_float(value), 0, PERCENT_MAX)
    if number < 1:
        number = number * 100
    return number


class ColorBase(ABC):
    """
    Common behaviour of every color model.

    Fields are reachable as attributes (``color.r``) and as items
    (``color["r"]``); both go through the validated property setters. The set
    of keys is closed: unknown keys fail, and no field can be deleted.
    """
    __slots__ = ()

    mode:       ClassVar[ColorSpace]
    fields:     ClassVar[Tuple[str, ...]]
    str_format: ClassVar[Optional[RenderFormat]] = RenderFormat.CSS
    # def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and name not in self.fields:
            raise ColorFieldError(self._unknown_field(name))
        super().__setattr__(name, value)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        raise ColorFieldError(self._unknown_field(name))

    def __delattr__(self, name: str) -> None:
        if name not in self.fields:
            raise ColorFieldError(self._unknown_field(name))
        raise ColorFieldError("You cannot unset the properties of this color object.")

    # ------------------ ITEM ACCESS ------------------
    def __getitem__(self, key: str) -> Any:
        if key not in self.fields:
            raise ColorFieldError(self._unknown_field(key))
        return getattr(self, key)

    def __setitem__(self, key: str, value: Any) -> None:
        if key not in self.fields:
            raise ColorFieldError(self._unknown_field(key))
        setattr(self, key, value)

    def __delitem__(self, key: str) -> None:
        self.__delattr__(key)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    @classmethod
    def _unknown_field(cls, name: object) -> str:
        keys = [f"'{f}'" for f in cls.fields]
        allowed = keys[0] if len(keys) == 1 else f"{', '.join(keys[:-1])} or {keys[-1]}"
        return f"Unknown field {name!r}: you can only use {allowed}."

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return tuple(self._fields_dict().values())

    @property
    def has_alpha(self) -> bool:
        return False

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def _fields_dict(self) -> Dict[str, Any]:
        return {f: getattr(self, f) for f in self.fields}

    def to_dict(self) -> Dict[str, Any]:
        return self._fields_dict()

    def to_list(self) -> List[Any]:
        return list(self.to_dict().values())

    # ------------------ CONVERSIONS ------------------
    @abstractmethod
    def to_rgb(self):
        ...

    def to_hsl(self):
        return self.to_rgb().to_hsl()

    def to_hex(self):
        return self.to_rgb().to_hex()

    def to_cmyk(self):
        return self.to_rgb().to_cmyk()

    def to_gray(self):
        return self.to_rgb().to_gray()

    # ------------------ RENDERING ------------------
    @abstractmethod
    def render(self, format: FormatLike = None) -> str:
        ...

    def __str__(self) -> str:
        return self.render(self.str_format)

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self.value)
        return f"{self.__class__.__name__}({args})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # mutable through setters


class WithAlpha(ABC):
    """
    Mixin for a color with an optional alpha channel stored in ``_a``.

    An unset alpha (None) means the color carries no opacity information; it is
    distinct from an alpha of 0.
    """
    __slots__ = ()

    _a: Optional[float]

    @property
    def a(self) -> Optional[float]:
        return self._a

    @a.setter
    def a(self, value: NumericInput) -> None:
        self._a = check_range("a", to_float(value), 0, ALPHA_MAX)

    @property
    def has_alpha(self) -> bool:
        return self._a is not None

    def _fields_dict(self) -> Dict[str, Any]:
        values = super()._fields_dict()  # type: ignore[misc]
        if self._a is None:
            values.pop("a")
        return values

    def with_alpha(self, alpha: Union[NumericInput, None]) -> Self:
        """
        Return a copy with a new alpha; ``None`` gives a copy without alpha.
        """
        values = self._fields_dict()
        values.pop("a", None)
        return self.__class__(*values.values(), alpha)  # type: ignore[call-arg]
