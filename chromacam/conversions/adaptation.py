"""
CAT16 cone-space matrices and the CAM16 post-adaptation response curve.

Shared by the viewing-conditions precomputation and by the CAM16 forward and
inverse transforms. Inputs are arrays whose last axis holds three channels.
"""
from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray

from ..utils.linalg import as_matrix3, mat_inverse, mat_vec, safe_divide

# XYZ -> CAT16 cone response
M16 = as_matrix3([
    [0.401288, 0.650173, -0.051461],
    [-0.250268, 1.204414, 0.045854],
    [-0.002079, 0.048952, 0.953127],
])

# CAT16 cone response -> XYZ
M16_INV = mat_inverse(M16)

RESPONSE_EXPONENT = 0.42
RESPONSE_SCALE = 400.0
RESPONSE_OFFSET = 27.13


def xyz_to_cone(xyz: NDArray) -> NDArray:
    return mat_vec(M16, xyz)


def cone_to_xyz(rgb: NDArray) -> NDArray:
    return mat_vec(M16_INV, rgb)


def compress(rgb_c: NDArray, fl: float) -> NDArray:
    """
    Post-adaptation non-linear response compression.

    ``F = sign(x) * 400 * (FL*|x|/100)^0.42 / ((FL*|x|/100)^0.42 + 27.13)``
    """
    rgb_c = np.asarray(rgb_c, dtype=np.float64)
    af = np.power(fl * np.abs(rgb_c) / 100.0, RESPONSE_EXPONENT)
    return np.sign(rgb_c) * RESPONSE_SCALE * af / (af + RESPONSE_OFFSET)


def expand(rgb_a: NDArray, fl: float) -> NDArray:
    """
    Inverse of :func:`compress`.

    Channels whose magnitude reaches the 400 asymptote map to 0.
    """
    rgb_a = np.asarray(rgb_a, dtype=np.float64)
    mag = np.abs(rgb_a)
    base = np.maximum(0.0, safe_divide(RESPONSE_OFFSET * mag, RESPONSE_SCALE - mag))
    return np.sign(rgb_a) * (100.0 / fl) * np.power(base, 1.0 / RESPONSE_EXPONENT)
