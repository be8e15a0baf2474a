from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Tuple

from ..conversions import lab_to_xyz
from ..types.color_types import ColorSpace
from .color_base import PERCENT, UNBOUNDED, Bound, ColorBase

if TYPE_CHECKING:
    from .xyz import XYZ


class Lab(ColorBase):
    """CIE L*a*b* relative to D65. L* lies in [0, 100]; a* and b* are unbounded."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "lab"
    channels: ClassVar[Tuple[str, ...]] = ("L", "A", "B")
    bounds: ClassVar[Tuple[Bound, ...]] = (PERCENT, UNBOUNDED, UNBOUNDED)

    @property
    def l(self) -> float:
        return self._value[0]

    @property
    def a(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @classmethod
    def from_xyz(cls, xyz: "XYZ") -> "Lab":
        return xyz.to_lab()

    def to_xyz(self) -> "XYZ":
        """XYZ of this color; imaginary colors clamp to zero per component."""
        from .xyz import XYZ
        return XYZ(tuple(max(v, 0.0) for v in lab_to_xyz(*self._value)))
