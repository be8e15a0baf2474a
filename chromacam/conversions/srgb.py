"""
sRGB (gamma-encoded, unit range) <-> CIE XYZ (D65, 0-100 scale).

``clip=False`` on the XYZ -> RGB direction returns the raw encoded values,
which may fall outside [0, 1]; gamut checks need that.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..utils.linalg import as_matrix3, mat_inverse, mat_vec

SRGB_TO_XYZ = as_matrix3([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_SRGB = mat_inverse(SRGB_TO_XYZ)

GAMMA_THRESHOLD = 0.04045
LINEAR_THRESHOLD = 0.0031308


def linearize(c: float) -> float:
    """sRGB transfer function decode for one channel."""
    if c <= GAMMA_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def delinearize(c: float) -> float:
    """sRGB transfer function encode for one channel."""
    if c <= LINEAR_THRESHOLD:
        return 12.92 * c
    return 1.055 * c ** (1.0 / 2.4) - 0.055


def np_linearize(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        curve = ((rgb + 0.055) / 1.055) ** 2.4
    return np.where(rgb <= GAMMA_THRESHOLD, rgb / 12.92, curve)


def np_delinearize(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        curve = 1.055 * np.power(np.maximum(rgb, 0.0), 1.0 / 2.4) - 0.055
    return np.where(rgb <= LINEAR_THRESHOLD, 12.92 * rgb, curve)


def np_unit_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert gamma-encoded unit RGB to XYZ.

    Args:
        rgb: array of shape (..., 3) in [0, 1]

    Returns:
        array of shape (..., 3), 0-100 scale
    """
    return mat_vec(SRGB_TO_XYZ, np_linearize(rgb)) * 100.0


def np_xyz_to_unit_rgb(xyz: NDArray, clip: bool = True) -> NDArray:
    """
    Vectorized: Convert XYZ (0-100 scale) to gamma-encoded unit RGB.

    Args:
        xyz: array of shape (..., 3)
        clip: clamp the result into [0, 1]

    Returns:
        array of shape (..., 3)
    """
    linear = mat_vec(XYZ_TO_SRGB, np.asarray(xyz, dtype=np.float64) / 100.0)
    rgb = np_delinearize(linear)
    return np.clip(rgb, 0.0, 1.0) if clip else rgb


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    x, y, z = np_unit_rgb_to_xyz(np.array([r, g, b]))
    return float(x), float(y), float(z)


def xyz_to_unit_rgb(x: float, y: float, z: float, clip: bool = True) -> Tuple[float, float, float]:
    r, g, b = np_xyz_to_unit_rgb(np.array([x, y, z]), clip=clip)
    return float(r), float(g), float(b)


def is_in_gamut(rgb, tolerance: float = 0.0) -> bool:
    """True if every channel lies within [-tolerance, 1 + tolerance]."""
    arr = np.asarray(rgb, dtype=np.float64)
    return bool(np.all((arr >= -tolerance) & (arr <= 1.0 + tolerance)))
