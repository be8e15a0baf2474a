"""
CAM16 forward (XYZ -> appearance) and inverse (appearance -> XYZ) transforms.

Appearance arrays carry six correlates along the last axis, in the order
``(H, C, J, Q, M, S)``: hue (degrees), chroma, lightness, brightness,
colorfulness and saturation. XYZ is on the 0-100 scale.

Every function takes the :class:`ViewingConditions` the color is judged
under and defaults to the shared sRGB-like instance.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..errors import ColorError
from ..utils.hue import np_normalize_hue
from ..utils.linalg import safe_divide
from .adaptation import compress, cone_to_xyz, expand, xyz_to_cone
from .viewing_conditions import DEFAULT_VIEWING_CONDITIONS, ViewingConditions

CAM16Tuple = Tuple[float, float, float, float, float, float]

HUE_WRAP_THRESHOLD = 20.14
ACHROMATIC_EPSILON = 1e-12
UCS_C1 = 0.007
UCS_C2 = 0.0228


def _require_finite(arr: NDArray, what: str) -> None:
    if not np.all(np.isfinite(arr)):
        raise ColorError(f"{what} components must be finite numbers")


def _require_conditions(vc: object) -> None:
    if not isinstance(vc, ViewingConditions):
        raise TypeError(f"Expected ViewingConditions, got {type(vc).__name__}")


def np_xyz_to_cam16(
    xyz: NDArray,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> NDArray:
    """
    Vectorized: Convert XYZ to CAM16 appearance correlates.

    Args:
        xyz: array of shape (..., 3), non-negative, 0-100 scale
        viewing_conditions: environment the color is seen in

    Returns:
        array of shape (..., 6): (H, C, J, Q, M, S)

    Raises:
        ColorError: if any component is negative or non-finite
    """
    vc = viewing_conditions
    _require_conditions(vc)
    xyz = np.asarray(xyz, dtype=np.float64)
    if xyz.shape[-1:] != (3,):
        raise ValueError(f"XYZ expects last dimension to be 3, got shape {xyz.shape}")
    _require_finite(xyz, "XYZ")
    if np.any(xyz < 0):
        raise ColorError("XYZ components must be non-negative")

    rgb_a = compress(xyz_to_cone(xyz) * vc.rgb_d_array, vc.fl)
    r, g, b = rgb_a[..., 0], rgb_a[..., 1], rgb_a[..., 2]

    # opponent dimensions
    a = (11.0 * r - 12.0 * g + b) / 11.0
    bb = (r + g - 2.0 * b) / 9.0
    u = (20.0 * r + 20.0 * g + 21.0 * b) / 20.0
    p2 = (40.0 * r + 20.0 * g + b) / 20.0

    magnitude = np.sqrt(a * a + bb * bb)
    achromatic = magnitude <= ACHROMATIC_EPSILON

    hue = np_normalize_hue(np.degrees(np.arctan2(bb, a)))
    hue = np.where(achromatic, 0.0, hue)

    ac = np.maximum(p2 * vc.nbb, 0.0)
    j = np.clip(100.0 * np.power(ac / vc.aw, vc.c * vc.z), 0.0, 100.0)
    q = (4.0 / vc.c) * np.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

    hue_prime = np.where(hue < HUE_WRAP_THRESHOLD, hue + 360.0, hue)
    e_hue = 0.25 * (np.cos(np.radians(hue_prime) + 2.0) + 3.8)
    p1 = (50000.0 / 13.0) * e_hue * vc.nc * vc.ncb
    t = np.maximum(safe_divide(p1 * magnitude, u + 0.305), 0.0)
    alpha = np.power(t, 0.9) * vc.chroma_scale

    c = np.where(achromatic, 0.0, alpha * np.sqrt(j / 100.0))
    m = c * vc.fl_root
    s = np.where(achromatic, 0.0, 50.0 * np.sqrt(alpha * vc.c / (vc.aw + 4.0)))

    return np.stack([hue, c, j, q, m, s], axis=-1)


def np_cam16_to_xyz(
    hcj: NDArray,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> NDArray:
    """
    Vectorized: Convert CAM16 hue/chroma/lightness back to XYZ.

    Only H, C and J are needed; a full ``(..., 6)`` appearance array is
    accepted too and its trailing Q, M, S columns are ignored.

    Args:
        hcj: array of shape (..., 3) or (..., 6), starting with (H, C, J)
        viewing_conditions: environment the color is seen in

    Returns:
        array of shape (..., 3), 0-100 scale. Not clamped: appearance values
        outside the real-color domain can map to negative tristimulus values.
        Chroma so large that the intermediate terms overflow maps to NaN.
    """
    vc = viewing_conditions
    _require_conditions(vc)
    hcj = np.asarray(hcj, dtype=np.float64)
    if hcj.shape[-1] not in (3, 6):
        raise ValueError(f"CAM16 expects last dimension to be 3 or 6, got shape {hcj.shape}")
    _require_finite(hcj[..., :3], "CAM16")
    h, c, j = hcj[..., 0], hcj[..., 1], hcj[..., 2]

    with np.errstate(over="ignore", invalid="ignore"):
        alpha = safe_divide(c, np.sqrt(np.maximum(j, 0.0) / 100.0))
        t = np.power(np.maximum(alpha / vc.chroma_scale, 0.0), 1.0 / 0.9)

        h_rad = np.radians(h)
        h_sin, h_cos = np.sin(h_rad), np.cos(h_rad)
        e_hue = 0.25 * (np.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * np.power(np.maximum(j, 0.0) / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        gamma = safe_divide(
            23.0 * (p2 + 0.305) * t,
            23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin,
        )
        # chroma large enough to overflow t has no tristimulus counterpart
        gamma = np.where(np.isfinite(t) & np.isfinite(gamma), gamma, np.nan)
        a = gamma * h_cos
        b = gamma * h_sin

        rgb_a = np.stack([
            (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0,
            (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0,
            (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0,
        ], axis=-1)

        rgb_f = safe_divide(expand(rgb_a, vc.fl), vc.rgb_d_array)
        return cone_to_xyz(rgb_f)


def xyz_to_cam16(
    x: float, y: float, z: float,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> CAM16Tuple:
    out = np_xyz_to_cam16(np.array([x, y, z], dtype=np.float64), viewing_conditions)
    return tuple(float(v) for v in out)  # type: ignore[return-value]


def cam16_to_xyz(
    h: float, c: float, j: float,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> Tuple[float, float, float]:
    out = np_cam16_to_xyz(np.array([h, c, j], dtype=np.float64), viewing_conditions)
    return float(out[0]), float(out[1]), float(out[2])


def jch_to_cam16(
    j: float, c: float, h: float,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> CAM16Tuple:
    """
    Complete a CAM16 appearance from lightness, chroma and hue.

    Brightness, colorfulness and saturation follow exactly from the three
    inputs under the given viewing conditions.

    Returns:
        (H, C, J, Q, M, S)

    Raises:
        ColorError: if an input is not finite or out of range
    """
    vc = viewing_conditions
    if not all(math.isfinite(v) for v in (j, c, h)):
        raise ColorError(f"CAM16 components must be finite numbers, got J={j}, C={c}, h={h}")
    if not 0.0 <= j <= 100.0:
        raise ColorError(f"Lightness J must be in range [0, 100], got {j}")
    if c < 0.0:
        raise ColorError(f"Chroma C must be >= 0, got {c}")
    root_j = math.sqrt(j / 100.0)
    q = (4.0 / vc.c) * root_j * (vc.aw + 4.0) * vc.fl_root
    m = c * vc.fl_root
    alpha = c / root_j if root_j > 0 else 0.0
    s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))
    return (h, c, j, q, m, s)


def ucs_colorfulness(m: float) -> float:
    """CAM16-UCS colorfulness M* of a CAM16 colorfulness M."""
    return math.log1p(UCS_C2 * m) / UCS_C2


def cam16_ucs(h: float, j: float, m: float) -> Tuple[float, float, float]:
    """CAM16-UCS coordinates ``(J*, a*, b*)`` of a hue, lightness and colorfulness."""
    jstar = (1.0 + 100.0 * UCS_C1) * j / (1.0 + UCS_C1 * j)
    mstar = ucs_colorfulness(m)
    h_rad = math.radians(h)
    return jstar, mstar * math.cos(h_rad), mstar * math.sin(h_rad)


def ucs_distance(ucs_a: Tuple[float, float, float], ucs_b: Tuple[float, float, float]) -> float:
    """Perceptual color difference between two CAM16-UCS points."""
    d_e = math.dist(ucs_a, ucs_b)
    return 1.41 * d_e ** 0.63
