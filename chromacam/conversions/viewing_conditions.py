"""
CAM16 viewing conditions.

A color appearance model judges a color relative to the environment it is
seen in. :class:`ViewingConditions` turns five physically meaningful inputs
(white point, adapting luminance, background lightness, surround and whether
the illuminant is discounted) into the constants every CAM16 forward and
inverse transform needs. Instances are immutable and cheap to share; the
module-level :data:`DEFAULT_VIEWING_CONDITIONS` models a typical sRGB display
and is built once at import.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Tuple

import numpy as np

from ..errors import ColorError
from ..types.color_types import Vector3, element_to_array
from ..utils.linalg import clamp, dot, lerp
from .adaptation import compress, xyz_to_cone
from .lab import D65_WHITE, y_from_lstar

WHITE_POINT_D65: Vector3 = D65_WHITE

SURROUND_BASELINE = 0.8
SURROUND_SCALE = 10.0
SURROUND_THRESHOLD = 0.9
SURROUND_BRIGHT_RANGE = (0.59, 0.69)
SURROUND_DIM_RANGE = (0.525, 0.59)
ACHROMATIC_WEIGHTS = np.array([2.0, 1.0, 0.05])

# 200 lux expressed as adapting luminance over a mid-gray (L*=50) background
DEFAULT_ADAPTING_LUMINANCE = (200.0 / math.pi) * y_from_lstar(50.0) / 100.0


def _finite(name: str, value: Any) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise ColorError(f"{name} must be a finite number, got {value!r}") from exc
    if not math.isfinite(v):
        raise ColorError(f"{name} must be a finite number, got {value!r}")
    return v


def _white_point(white_point: Any) -> Vector3:
    arr = element_to_array(getattr(white_point, "value", white_point))
    if arr.shape != (3,):
        raise ColorError(f"white_point must have 3 components, got shape {arr.shape}")
    x, y, z = (_finite(f"white_point[{i}]", v) for i, v in enumerate(arr))
    if min(x, y, z) < 0 or y <= 0:
        raise ColorError("white_point must be non-negative with Y > 0")
    return (x, y, z)


@dataclass(frozen=True)
class ViewingConditions:
    """
    Environment-dependent CAM16 constants.

    Attributes:
        white_point, adapting_luminance, background_lstar, surround,
        discounting_illuminant: the inputs, kept for ``repr`` and equality.
        n: background luminance factor, ``Y(background L*) / Yw``.
        aw: achromatic response of the white point.
        nbb: brightness non-linearity factor.
        ncb: chromatic non-linearity factor (equal to ``nbb``).
        c: surround impact factor.
        nc: chromatic induction factor.
        rgb_d: per-channel chromatic adaptation (D) factors.
        fl: luminance adaptation factor.
        fl_root: ``fl ** 0.25``.
        z: base exponential non-linearity.

    Build instances with :meth:`make`; the raw constructor only stores values.
    """

    DEFAULT: ClassVar["ViewingConditions"]

    white_point: Vector3
    adapting_luminance: float
    background_lstar: float
    surround: float
    discounting_illuminant: bool
    n: float = field(repr=False)
    aw: float = field(repr=False)
    nbb: float = field(repr=False)
    ncb: float = field(repr=False)
    c: float = field(repr=False)
    nc: float = field(repr=False)
    rgb_d: Vector3 = field(repr=False)
    fl: float = field(repr=False)
    fl_root: float = field(repr=False)
    z: float = field(repr=False)

    @classmethod
    def make(
        cls,
        white_point: Any = WHITE_POINT_D65,
        adapting_luminance: float = DEFAULT_ADAPTING_LUMINANCE,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> "ViewingConditions":
        """
        Create viewing conditions from physically relevant parameters.

        Args:
            white_point: XYZ white (0-100 scale), an ``XYZ`` or a 3-sequence.
                Defaults to D65.
            adapting_luminance: Luminance of the adapting field in cd/m², > 0.
                Defaults to ~11.72, i.e. a 200 lux room.
            background_lstar: L* of the background, in (0, 100]. Defaults to 50.
            surround: 0 (dark, a cinema) to 2 (average, the surround matches
                the stimulus). Defaults to 2.0.
            discounting_illuminant: Assume complete adaptation to the
                illuminant. Defaults to False, as for self-luminous displays.

        Raises:
            ColorError: for non-finite or out-of-range inputs.
        """
        wp = _white_point(white_point)
        la = _finite("adapting_luminance", adapting_luminance)
        if la <= 0:
            raise ColorError(f"adapting_luminance must be > 0, got {la}")
        bg = _finite("background_lstar", background_lstar)
        if not 0 < bg <= 100:
            raise ColorError(f"background_lstar must be in range (0, 100], got {bg}")
        sr = _finite("surround", surround)
        if not 0 <= sr <= 2:
            raise ColorError(f"surround must be in range [0, 2], got {sr}")

        rgb_w = xyz_to_cone(np.array(wp))
        if np.any(rgb_w <= 0):
            raise ColorError(f"white_point {wp} has a non-positive cone response")

        f = SURROUND_BASELINE + sr / SURROUND_SCALE
        if f >= SURROUND_THRESHOLD:
            c = lerp(*SURROUND_BRIGHT_RANGE, (f - SURROUND_THRESHOLD) * SURROUND_SCALE)
        else:
            c = lerp(*SURROUND_DIM_RANGE, (f - SURROUND_BASELINE) * SURROUND_SCALE)

        if discounting_illuminant:
            d = 1.0
        else:
            d = clamp(f * (1.0 - (1.0 / 3.6) * math.exp((-la - 42.0) / 92.0)), 0.0, 1.0)
        rgb_d = d * (100.0 / rgb_w) + (1.0 - d)

        k = 1.0 / (5.0 * la + 1.0)
        k4 = k ** 4
        k4f = 1.0 - k4
        fl = k4 * la + 0.1 * k4f * k4f * math.cbrt(5.0 * la)

        n = y_from_lstar(bg) / wp[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n ** 0.2

        rgb_aw = compress(rgb_d * rgb_w, fl)
        aw = dot(ACHROMATIC_WEIGHTS, rgb_aw) * nbb

        return cls(
            white_point=wp,
            adapting_luminance=la,
            background_lstar=bg,
            surround=sr,
            discounting_illuminant=bool(discounting_illuminant),
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=nbb,
            c=float(c),
            nc=f,
            rgb_d=tuple(float(v) for v in rgb_d),  # type: ignore[arg-type]
            fl=fl,
            fl_root=fl ** 0.25,
            z=z,
        )

    @classmethod
    def default(cls) -> "ViewingConditions":
        """sRGB-like viewing conditions, shared."""
        return cls.DEFAULT

    @property
    def rgb_d_array(self) -> np.ndarray:
        return np.array(self.rgb_d, dtype=np.float64)

    @property
    def chroma_scale(self) -> float:
        """``(1.64 - 0.29**n) ** 0.73``, the background term in chroma."""
        return (1.64 - 0.29 ** self.n) ** 0.73


ViewingConditions.DEFAULT = ViewingConditions.make()
DEFAULT_VIEWING_CONDITIONS = ViewingConditions.DEFAULT
