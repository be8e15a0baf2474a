from __future__ import annotations
import math
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple

import numpy as np

from ..conversions import convert
from ..errors import ColorError
from ..types.color_types import ColorSpace, ScalarVector
from ..utils import get_dimension

# (lower, upper, upper_inclusive); None means unbounded on that side
Bound = Tuple[Optional[float], Optional[float], bool]

UNBOUNDED: Bound = (None, None, True)
NON_NEGATIVE: Bound = (0.0, None, True)
PERCENT: Bound = (0.0, 100.0, True)
UNIT: Bound = (0.0, 1.0, True)
HUE: Bound = (0.0, 360.0, False)


def _fmt(v: float) -> str:
    return f"{v:g}"


def check_channel(name: str, value: Any, bound: Bound) -> float:
    """
    Validate one channel value and return it as a float.

    Raises:
        ColorError: if the value is not a finite number or lies outside ``bound``.
    """
    if isinstance(value, bool):
        raise ColorError(f"Channel({name}) must be a finite number.")
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise ColorError(f"Channel({name}) must be a finite number.") from exc
    if not math.isfinite(v):
        raise ColorError(f"Channel({name}) must be a finite number.")

    lo, hi, hi_inclusive = bound
    if hi is None:
        if lo is not None and v < lo:
            raise ColorError(f"Channel({name}) must be >= {_fmt(lo)}.")
        return v
    too_high = v > hi if hi_inclusive else v >= hi
    if (lo is not None and v < lo) or too_high:
        closing = "]" if hi_inclusive else ")"
        raise ColorError(f"Channel({name}) must be in range [{_fmt(lo or 0.0)}, {_fmt(hi)}{closing}.")
    return v


class ColorBase:
    """
    Immutable color value: a fixed number of validated float channels.

    Construct from separate channels, a single sequence, or another
    ``ColorBase`` (which is converted into this class's space).
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, ...]]
    bounds:     ClassVar[Tuple[Bound, ...]]
    # def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *value: Any) -> None:
        raw: Any = value[0] if len(value) == 1 else value

        # ---- Handle ColorBase input ----
        if isinstance(raw, ColorBase):
            if raw.mode == self.mode:
                raw = raw.value
            else:
                raw = convert(raw.value, raw.mode, self.mode)

        if isinstance(raw, np.ndarray):
            if raw.ndim != 1:
                raise TypeError(f"{self.mode} holds a single color, got array of shape {raw.shape}")
            raw = tuple(raw.tolist())

        value_dim = get_dimension(raw)
        if isinstance(raw, (str, bytes)) or value_dim != self.num_channels:
            raise TypeError(
                f"{self.__class__.__name__} expects {self.num_channels} channels "
                f"{self.channels}, got {raw!r}"
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = self._check(tuple(raw))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _prepare(cls, values: ScalarVector) -> ScalarVector:
        """Hook for subclasses that normalize a channel before validation."""
        return values

    @classmethod
    def _check(cls, values: ScalarVector) -> Tuple[float, ...]:
        values = cls._prepare(values)
        return tuple(
            check_channel(name, v, bound)
            for name, v, bound in zip(cls.channels, values, cls.bounds)
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, ...]:
        return self._value

    def to_array(self) -> np.ndarray:
        return np.array(self._value, dtype=np.float64)

    def replace(self, **channels: float) -> "ColorBase":
        """
        Return a copy with some channels replaced, by name (case-insensitive).

        Raises:
            TypeError: for a name that is not a channel of this space.
        """
        names = [n.lower() for n in self.channels]
        values = list(self._value)
        for key, v in channels.items():
            if key.lower() not in names:
                raise TypeError(f"{self.__class__.__name__} has no channel {key!r}")
            values[names.index(key.lower())] = v
        return self.__class__(tuple(values))

    @classmethod
    def validate(cls, obj: Any) -> bool:
        """True if ``obj`` is an instance of this class holding valid channels."""
        if not isinstance(obj, cls):
            return False
        try:
            cls._check(obj.value)
        except ColorError:
            return False
        return True

    @classmethod
    def assert_valid(cls, obj: Any) -> None:
        if not isinstance(obj, cls):
            raise TypeError(f"Expected {cls.__name__}, got {type(obj).__name__}")
        cls._check(obj.value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        inner = ", ".join(f"{v:.6g}" for v in self._value)
        return f"{self.__class__.__name__}({inner})"
