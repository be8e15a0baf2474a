from __future__ import annotations
import math
from typing import Any, ClassVar, Tuple

from ..conversions import (
    DEFAULT_VIEWING_CONDITIONS,
    HctSolution,
    ViewingConditions,
    cam16_to_hct,
    lab_to_hct,
    solve_hct,
    xyz_to_hct,
)
from ..types.color_types import ColorSpace, HueDirection, ScalarVector
from ..utils import hue_lerp, lerp, normalize_hue
from .cam16 import CAM16
from .color_base import HUE, NON_NEGATIVE, PERCENT, Bound, ColorBase
from .lab import Lab
from .rgb import RGB
from .xyz import XYZ


class HCT(ColorBase):
    """
    Hue, Chroma, Tone.

    Hue and chroma are CAM16's (under the default viewing conditions unless
    stated otherwise), tone is CIE L*. Any finite hue is accepted and wrapped
    into [0, 360).

    Going back to RGB is a search, see :func:`chromacam.conversions.solve_hct`.
    Colors whose chroma cannot be reached at the requested tone come back as
    the closest in-gamut approximation.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "hct"
    channels: ClassVar[Tuple[str, ...]] = ("H", "C", "T")
    bounds: ClassVar[Tuple[Bound, ...]] = (HUE, NON_NEGATIVE, PERCENT)

    @classmethod
    def _prepare(cls, values: ScalarVector) -> ScalarVector:
        h = values[0]
        if isinstance(h, (int, float)) and not isinstance(h, bool) and math.isfinite(h):
            return (normalize_hue(h),) + tuple(values[1:])
        return values

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def c(self) -> float:
        return self._value[1]

    @property
    def t(self) -> float:
        return self._value[2]

    hue = h
    chroma = c
    tone = t

    # ------------------ FORWARD ------------------
    @classmethod
    def from_xyz(
        cls, xyz: XYZ,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "HCT":
        return cls(xyz_to_hct(*xyz.value, viewing_conditions))

    @classmethod
    def from_rgb(
        cls, rgb: RGB,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "HCT":
        return cls.from_xyz(rgb.to_xyz(), viewing_conditions)

    @classmethod
    def from_lab(
        cls, lab: Lab,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "HCT":
        """HCT whose tone is exactly ``lab.l``."""
        return cls(lab_to_hct(*lab.value, viewing_conditions))

    @classmethod
    def from_cam16(
        cls, cam: CAM16,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "HCT":
        """
        Keep the appearance's hue and chroma; tone is the L* of the XYZ
        ``cam`` maps back to under ``viewing_conditions``.
        """
        return cls(cam16_to_hct(cam.h, cam.c, cam.j, viewing_conditions))

    @classmethod
    def from_color(
        cls, color: Any,
        viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> "HCT":
        if isinstance(color, HCT):
            return color
        if isinstance(color, RGB):
            return cls.from_rgb(color, viewing_conditions)
        if isinstance(color, XYZ):
            return cls.from_xyz(color, viewing_conditions)
        if isinstance(color, Lab):
            return cls.from_lab(color, viewing_conditions)
        if isinstance(color, CAM16):
            return cls.from_cam16(color, viewing_conditions)
        raise TypeError(f"Cannot build HCT from {type(color).__name__}")

    # ------------------ REVERSE ------------------
    def solve(
        self, viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> HctSolution:
        """Run the RGB search and return the full result, tone error included."""
        return solve_hct(self.h, self.c, self.t, viewing_conditions=viewing_conditions)

    def to_rgb(
        self, viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> RGB:
        return RGB(self.solve(viewing_conditions).rgb)

    def to_xyz(
        self, viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> XYZ:
        return self.to_rgb(viewing_conditions).to_xyz()

    def to_cam16(
        self, viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    ) -> CAM16:
        return CAM16.from_hct(self, viewing_conditions)

    def lerp(self, other: "HCT", t: float, direction: HueDirection = "shortest") -> "HCT":
        """
        Interpolate towards ``other``; ``t=0`` gives ``self``, ``t=1`` gives ``other``.

        Args:
            direction: hue path, 'shortest', 'longest', 'cw' or 'ccw'
        """
        return HCT(
            hue_lerp(self.h, other.h, t, direction),
            lerp(self.c, other.c, t),
            lerp(self.t, other.t, t),
        )

    def __str__(self) -> str:
        return "HCT(%.0f, %.0f, %.0f)" % self._value
