"""
HCT (Hue, Chroma, Tone) conversions.

Hue and chroma come from CAM16, tone is CIE L*. The forward direction is a
plain composition. The reverse direction has no closed form, so
:func:`solve_hct` binary-searches CAM16 lightness J until the in-gamut
candidate's L* lands close to the requested tone.
"""
from __future__ import annotations

import logging
import math
from typing import NamedTuple, Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp

from ..types.color_types import Vector3
from .cam16 import cam16_to_xyz, jch_to_cam16, np_cam16_to_xyz, np_xyz_to_cam16
from .lab import lstar_from_y, np_lab_to_xyz, np_lab_f
from .srgb import is_in_gamut, np_unit_rgb_to_xyz, unit_rgb_to_xyz, xyz_to_unit_rgb
from .viewing_conditions import DEFAULT_VIEWING_CONDITIONS, ViewingConditions

logger = logging.getLogger(__name__)

SOLVER_ITERATIONS = 20
SOLVER_TONE_TOLERANCE = 0.2
GAMUT_TOLERANCE = 1e-3
DEGENERATE_EPSILON = 1e-4

BLACK: Vector3 = (0.0, 0.0, 0.0)
WHITE: Vector3 = (1.0, 1.0, 1.0)


class HctSolution(NamedTuple):
    """
    Outcome of :func:`solve_hct`.

    Attributes:
        rgb: gamma-encoded unit RGB, always inside [0, 1]
        tone_error: ``|L*(rgb) - requested tone|``
        iterations: search iterations spent (0 for the black/white/gray shortcuts)
        converged: True if the tone error fell below the tolerance
    """
    rgb: Vector3
    tone_error: float
    iterations: int
    converged: bool


def np_tone_from_y(y: NDArray) -> NDArray:
    """Vectorized L* of a luminance Y (0-100), clamped into [0, 100]."""
    y = np.maximum(np.asarray(y, dtype=np.float64), 0.0)
    return np.clip(116.0 * np_lab_f(y / 100.0) - 16.0, 0.0, 100.0)


def tone_from_y(y: float) -> float:
    return clamp(lstar_from_y(max(y, 0.0)), 0.0, 100.0)


def np_xyz_to_hct(
    xyz: NDArray,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> NDArray:
    """
    Vectorized: Convert XYZ (0-100 scale) to HCT.

    Returns:
        array of shape (..., 3): (H, C, T)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    cam = np_xyz_to_cam16(xyz, viewing_conditions)
    tone = np_tone_from_y(xyz[..., 1])
    return np.stack([cam[..., 0], cam[..., 1], tone], axis=-1)


def np_unit_rgb_to_hct(
    rgb: NDArray,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> NDArray:
    """Vectorized: Convert unit RGB of shape (..., 3) to HCT."""
    return np_xyz_to_hct(np_unit_rgb_to_xyz(rgb), viewing_conditions)


def np_lab_to_hct(
    lab: NDArray,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> NDArray:
    lab = np.asarray(lab, dtype=np.float64)
    xyz = np.maximum(np_lab_to_xyz(lab), 0.0)
    hct = np_xyz_to_hct(xyz, viewing_conditions)
    # Tone is L* itself
    hct[..., 2] = np.clip(lab[..., 0], 0.0, 100.0)
    return hct


def xyz_to_hct(
    x: float, y: float, z: float,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> Vector3:
    h, c, t = np_xyz_to_hct(np.array([x, y, z], dtype=np.float64), viewing_conditions)
    return float(h), float(c), float(t)


def unit_rgb_to_hct(
    r: float, g: float, b: float,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> Vector3:
    return xyz_to_hct(*unit_rgb_to_xyz(r, g, b), viewing_conditions=viewing_conditions)


def lab_to_hct(
    l: float, a: float, b: float,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> Vector3:
    h, c, t = np_lab_to_hct(np.array([l, a, b], dtype=np.float64), viewing_conditions)
    return float(h), float(c), float(t)


def cam16_to_hct(
    h: float, c: float, j: float,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> Vector3:
    """
    HCT of a CAM16 appearance.

    Hue and chroma carry over unchanged; tone is the L* of the XYZ the
    appearance maps back to.
    """
    _, y, _ = cam16_to_xyz(h, c, j, viewing_conditions)
    return h, c, tone_from_y(y)


def np_cam16_to_hct(
    hcj: NDArray,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> NDArray:
    """Vectorized: HCT of CAM16 arrays of shape (..., 3) or (..., 6)."""
    hcj = np.asarray(hcj, dtype=np.float64)
    tone = np_tone_from_y(np_cam16_to_xyz(hcj, viewing_conditions)[..., 1])
    return np.stack([hcj[..., 0], hcj[..., 1], tone], axis=-1)


def _tone_of(rgb: Vector3) -> float:
    return lstar_from_y(unit_rgb_to_xyz(*rgb)[1])


def solve_hct(
    hue: float,
    chroma: float,
    tone: float,
    *,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
    iterations: int = SOLVER_ITERATIONS,
    tolerance: float = SOLVER_TONE_TOLERANCE,
    gamut_tolerance: float = GAMUT_TOLERANCE,
) -> HctSolution:
    """
    Find an sRGB color with the given CAM16 hue and chroma and L* tone.

    Black, white and zero-chroma grays are answered directly. Otherwise J is
    bisected over [0, 100]: a candidate that falls outside the RGB gamut
    lowers the upper bound, an in-gamut one is clamped, scored by its tone
    error and moves whichever bound brings its tone closer to the target.

    Args:
        hue: degrees, any finite value
        chroma: >= 0
        tone: L* in [0, 100]
        viewing_conditions: environment the hue and chroma refer to
        iterations: maximum number of bisection steps
        tolerance: tone error that ends the search early
        gamut_tolerance: slack allowed around [0, 1] before a candidate is
            rejected as out of gamut

    Returns:
        HctSolution. If the search runs out before reaching ``tolerance`` the
        best candidate seen is returned, not the last one.

    Accuracy:
        RGB -> HCT -> RGB round trips stay within 0.003 per channel for
        chroma below 10. Higher chroma drifts further, because an out-of-gamut
        candidate always lowers the upper J bound even when the matching
        in-gamut J lies above it. Worst channel errors sampled over 1500
        random sRGB colors:

        - chroma 10-20: 0.07 (1.4% of colors above 0.01)
        - chroma 30-45: 0.30 (19% above 0.01)
        - chroma 45 and up: 0.88 (58% above 0.01)
    """
    if tone < DEGENERATE_EPSILON:
        logger.debug("HCT(%s, %s, %s): black shortcut", hue, chroma, tone)
        return HctSolution(BLACK, abs(tone), 0, True)
    if tone > 100.0 - DEGENERATE_EPSILON:
        logger.debug("HCT(%s, %s, %s): white shortcut", hue, chroma, tone)
        return HctSolution(WHITE, abs(100.0 - tone), 0, True)

    gray = tone / 100.0
    gray_rgb: Vector3 = (gray, gray, gray)
    if chroma < DEGENERATE_EPSILON:
        logger.debug("HCT(%s, %s, %s): gray shortcut", hue, chroma, tone)
        error = abs(_tone_of(gray_rgb) - tone)
        return HctSolution(gray_rgb, error, 0, error < tolerance)

    j_low, j_high = 0.0, 100.0
    best_rgb = gray_rgb
    best_error = math.inf

    for i in range(iterations):
        j_mid = (j_low + j_high) / 2.0
        h, c, j, _, _, _ = jch_to_cam16(j_mid, chroma, hue, viewing_conditions)
        rgb = xyz_to_unit_rgb(*cam16_to_xyz(h, c, j, viewing_conditions), clip=False)

        if not is_in_gamut(rgb, gamut_tolerance):
            j_high = j_mid
            continue

        candidate: Vector3 = tuple(clamp(v, 0.0, 1.0) for v in rgb)  # type: ignore[assignment]
        result_tone = _tone_of(candidate)
        error = abs(result_tone - tone)
        if error < best_error:
            best_rgb, best_error = candidate, error

        if error < tolerance:
            logger.debug("HCT(%s, %s, %s): converged after %d iterations, error %.4f",
                         hue, chroma, tone, i + 1, error)
            return HctSolution(candidate, error, i + 1, True)

        if result_tone < tone:
            j_low = j_mid
        else:
            j_high = j_mid

    if math.isinf(best_error):
        best_error = abs(_tone_of(best_rgb) - tone)
    logger.debug("HCT(%s, %s, %s): no convergence in %d iterations, best error %.4f",
                 hue, chroma, tone, iterations, best_error)
    return HctSolution(best_rgb, best_error, iterations, False)


def hct_to_unit_rgb(
    h: float, c: float, t: float,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> Vector3:
    return solve_hct(h, c, t, viewing_conditions=viewing_conditions).rgb


def np_hct_to_unit_rgb(
    hct: NDArray,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> NDArray:
    """
    Convert an array of HCT colors of shape (..., 3) to unit RGB.

    Each color runs its own search; there is no batched shortcut.
    """
    hct = np.asarray(hct, dtype=np.float64)
    flat = hct.reshape(-1, 3)
    out = np.empty_like(flat)
    for idx, (h, c, t) in enumerate(flat):
        out[idx] = solve_hct(float(h), float(c), float(t), viewing_conditions=viewing_conditions).rgb
    return out.reshape(hct.shape)

