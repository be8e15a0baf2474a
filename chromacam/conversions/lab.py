"""
CIE XYZ <-> CIE L*a*b* (D65), plus the L* <-> Y helpers HCT uses for Tone.

XYZ is on the 0-100 scale throughout.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Vector3

LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0

D65_WHITE: Vector3 = (95.047, 100.0, 108.883)


def lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return math.cbrt(t)
    return (LAB_KAPPA * t + 16.0) / 116.0


def lab_f_inv(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > LAB_EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / LAB_KAPPA


def np_lab_f(t: NDArray) -> NDArray:
    t = np.asarray(t, dtype=np.float64)
    return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16.0) / 116.0)


def np_lab_f_inv(ft: NDArray) -> NDArray:
    ft = np.asarray(ft, dtype=np.float64)
    ft3 = ft ** 3
    return np.where(ft3 > LAB_EPSILON, ft3, (116.0 * ft - 16.0) / LAB_KAPPA)


def y_from_lstar(lstar: float) -> float:
    """Luminance Y (0-100) of a given L*."""
    return 100.0 * lab_f_inv((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """L* of a given luminance Y (0-100)."""
    return 116.0 * lab_f(y / 100.0) - 16.0


def np_xyz_to_lab(xyz: NDArray, white: Vector3 = D65_WHITE) -> NDArray:
    """
    Vectorized: Convert XYZ to Lab.

    Args:
        xyz: array of shape (..., 3), 0-100 scale
        white: reference white, 0-100 scale

    Returns:
        array of shape (..., 3): (L, a, b)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = np_lab_f(xyz / np.asarray(white, dtype=np.float64))
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray, white: Vector3 = D65_WHITE) -> NDArray:
    """Vectorized: Convert Lab to XYZ (0-100 scale)."""
    lab = np.asarray(lab, dtype=np.float64)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = lab[..., 1] / 500.0 + fy
    fz = fy - lab[..., 2] / 200.0
    f = np.stack([fx, fy, fz], axis=-1)
    return np_lab_f_inv(f) * np.asarray(white, dtype=np.float64)


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    l, a, b = np_xyz_to_lab(np.array([x, y, z]))
    return float(l), float(a), float(b)


def lab_to_xyz(l: float, a: float, b: float) -> Tuple[float, float, float]:
    x, y, z = np_lab_to_xyz(np.array([l, a, b]))
    return float(x), float(y), float(z)
