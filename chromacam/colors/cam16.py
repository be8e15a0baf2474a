from __future__ import annotations
import math
from typing import TYPE_CHECKING, Any, ClassVar, Tuple

from ..conversions import (
    DEFAULT_VIEWING_CONDITIONS,
    ViewingConditions,
    cam16_to_xyz,
    cam16_ucs,
    jch_to_cam16,
    ucs_colorfulness,
    ucs_distance,
    xyz_to_cam16,
)
from ..types.color_types import ColorSpace
from .color_base import HUE, NON_NEGATIVE, PERCENT, Bound, ColorBase
from .lab import Lab
from .rgb import RGB
from .xyz import XYZ

if TYPE_CHECKING:
    from .hct import HCT


class CAM16(ColorBase):
    """
    CAM16 color appearance: hue, chroma, lightness, brightness,
    colorfulness and saturation.

    The correlates are relative to the viewing conditions the color was
    computed under; pass the same conditions back to :meth:`to_xyz`.
    Hue must already lie in [0, 360).
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 6
    mode: ClassVar[ColorSpace] = "cam16"
    channels: ClassVar[Tuple[str, ...]] = ("H", "C", "J", "Q", "M", "S")
    bounds: ClassVar[Tuple[Bound, ...]] = (
        HUE, NON_NEGATIVE, PERCENT, NON_NEGATIVE, NON_NEGATIVE, NON_NEGATIVE,
    )

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def c(self) -> float:
        return self._value[1]

    @property
    def j(self) -> float:
        return self._value[2]

    @property
    def q(self) -> float:
        return self._value[3]

    @property
    def m(self) -> float:
        return self._value[4]

    @property
    def s(self) -> float:
        return self._value[5]

    @property
    def hue_radians(self) -> float:
        return math.radians(self.h)

    # ------------------ CAM16-UCS ------------------
    @property
    def ucs(self) -> Tuple[float, float, float]:
        """``(J*, a*, b*)`` in CAM16-UCS."""
        return cam16_ucs(self.h, self.j, self.m)

    @property
    def jstar(self) -> float:
        return self.ucs[0]

    @property
    def mstar(self) -> float:
        return ucs_colorfulness(self.m)

    @property
    def astar(self) -> float:
        return self.ucs[1]

    @property
    def bstar(self) -> float:
        return self.ucs[2]

    def distance(self, other: "CAM16") -> float:
        """Perceptual difference to ``other``: ``1.41 * dE'^0.63`` in CAM16-UCS."""
        return ucs_distance(self.ucs, other.ucs)

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def from_jch(
        cls, j: float, c: float, h: float,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "CAM16":
        """Complete appearance from lightness, chroma and hue."""
        return cls(jch_to_cam16(j, c, h, viewing_conditions))

    @classmethod
    def from_xyz(
        cls, xyz: XYZ,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "CAM16":
        return cls(xyz_to_cam16(*xyz.value, viewing_conditions))

    @classmethod
    def from_rgb(
        cls, rgb: RGB,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "CAM16":
        return cls.from_xyz(rgb.to_xyz(), viewing_conditions)

    @classmethod
    def from_hct(
        cls, hct: "HCT",
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "CAM16":
        """Appearance of the sRGB color the HCT solver picks for ``hct``."""
        return cls.from_xyz(hct.to_xyz(viewing_conditions), viewing_conditions)

    @classmethod
    def from_color(
        cls, color: Any,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "CAM16":
        if isinstance(color, CAM16):
            return color
        if isinstance(color, XYZ):
            return cls.from_xyz(color, viewing_conditions)
        if isinstance(color, (RGB, Lab)):
            return cls.from_xyz(color.to_xyz(), viewing_conditions)
        if isinstance(color, ColorBase) and color.mode == "hct":
            return cls.from_hct(color, viewing_conditions)  # type: ignore[arg-type]
        raise TypeError(f"Cannot build CAM16 from {type(color).__name__}")

    # ------------------ INVERSE ------------------
    def to_xyz(
        self, viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> XYZ:
        """
        XYZ this appearance maps back to under ``viewing_conditions``.

        Appearances outside the real-color domain give negative tristimulus
        components; those clamp to zero.
        """
        x, y, z = cam16_to_xyz(self.h, self.c, self.j, viewing_conditions)
        return XYZ(max(x, 0.0), max(y, 0.0), max(z, 0.0))

    def to_rgb(
        self, viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> RGB:
        return RGB.from_xyz(self.to_xyz(viewing_conditions))
