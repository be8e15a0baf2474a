from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Tuple

from ..conversions import D65_WHITE, xyz_to_lab
from ..utils.linalg import clamp
from ..types.color_types import ColorSpace
from .color_base import NON_NEGATIVE, Bound, ColorBase

if TYPE_CHECKING:
    from .lab import Lab
    from .rgb import RGB


class XYZ(ColorBase):
    """CIE 1931 XYZ tristimulus values, 0-100 scale, D65."""
    __slots__ = ()

    D65: ClassVar["XYZ"]

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "xyz"
    channels: ClassVar[Tuple[str, ...]] = ("X", "Y", "Z")
    bounds: ClassVar[Tuple[Bound, ...]] = (NON_NEGATIVE, NON_NEGATIVE, NON_NEGATIVE)

    @property
    def x(self) -> float:
        return self._value[0]

    @property
    def y(self) -> float:
        return self._value[1]

    @property
    def z(self) -> float:
        return self._value[2]

    @classmethod
    def from_rgb(cls, rgb: "RGB") -> "XYZ":
        return rgb.to_xyz()

    def to_rgb(self) -> "RGB":
        from .rgb import RGB
        return RGB.from_xyz(self)

    def to_lab(self) -> "Lab":
        """Lab of this color; L* is held to [0, 100] for Y at or beyond the ends."""
        from .lab import Lab
        l, a, b = xyz_to_lab(*self._value)
        return Lab(clamp(l, 0.0, 100.0), a, b)


XYZ.D65 = XYZ(D65_WHITE)
