"""
Small vector/matrix helpers shared by the conversion modules.

Everything here works on float64 numpy arrays whose last axis holds the
three channels, so the same helper serves a single color ``(3,)`` and a
batch ``(..., 3)``. None of it knows about any particular color space.
"""
from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
EPSILON = np.finfo(np.float64).eps

ArrayLike = Union[NDArray, Sequence[float], Sequence[Sequence[float]]]


def as_matrix3(rows: ArrayLike) -> NDArray:
    """Build a read-only 3x3 float64 matrix."""
    m = np.array(rows, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {m.shape}")
    m.setflags(write=False)
    return m


def mat_vec(matrix: NDArray, vec: ArrayLike) -> NDArray:
    """Apply ``matrix`` to every 3-vector along the last axis of ``vec``."""
    v = np.asarray(vec, dtype=np.float64)
    return v @ matrix.T


def mat_mul(a: ArrayLike, b: ArrayLike) -> NDArray:
    return np.asarray(a, dtype=np.float64) @ np.asarray(b, dtype=np.float64)


def mat_inverse(matrix: ArrayLike) -> NDArray:
    """
    Invert a square matrix.

    Raises:
        ValueError: if the matrix is singular.
    """
    try:
        inv = np.linalg.inv(np.asarray(matrix, dtype=np.float64))
    except np.linalg.LinAlgError as exc:
        raise ValueError("Matrix is singular and cannot be inverted") from exc
    inv.setflags(write=False)
    return inv


def dot(a: ArrayLike, b: ArrayLike) -> float:
    return float(np.dot(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)))


def safe_divide(num: ArrayLike, den: ArrayLike, eps: float = EPSILON) -> NDArray:
    """Elementwise ``num / den`` with 0 wherever ``|den| <= eps``."""
    num = np.asarray(num, dtype=np.float64)
    den = np.asarray(den, dtype=np.float64)
    ok = np.abs(den) > eps
    with np.errstate(divide="ignore", invalid="ignore"):
        out = np.where(ok, num / np.where(ok, den, 1.0), 0.0)
    return out


def lerp(a, b, t):
    return a + (b - a) * t


def degrees_to_radians(deg):
    return deg * DEG2RAD


def radians_to_degrees(rad):
    return rad * RAD2DEG


__all__ = [
    "DEG2RAD",
    "RAD2DEG",
    "EPSILON",
    "as_matrix3",
    "mat_vec",
    "mat_mul",
    "mat_inverse",
    "dot",
    "safe_divide",
    "lerp",
    "clamp",
    "degrees_to_radians",
    "radians_to_degrees",
]
