"""Hue wrapping and direction-aware hue interpolation."""
from __future__ import annotations

from typing import Optional

import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import HUE_360


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = float(h) % HUE_360
    # -1e-17 % 360.0 rounds up to 360.0
    return 0.0 if h >= HUE_360 else h


def np_normalize_hue(h: NDArray) -> NDArray:
    h = np.mod(np.asarray(h, dtype=np.float64), HUE_360)
    return np.where(h >= HUE_360, 0.0, h)


def _hue_delta(h0: float, h1: float, direction: Optional[str]) -> float:
    if direction is None or direction == "shortest":
        return ((h1 - h0 + 180.0) % HUE_360) - 180.0
    if direction == "longest":
        d = ((h1 - h0 + 180.0) % HUE_360) - 180.0
        if d > 0:
            return d - HUE_360
        if d < 0:
            return d + HUE_360
        return d
    if direction in ("cw", "clockwise"):
        return (h1 - h0) % HUE_360
    if direction in ("ccw", "counterclockwise"):
        return -((h0 - h1) % HUE_360)
    raise ValueError(f"Invalid hue direction: {direction}")


def hue_lerp(h0: float, h1: float, t: float, direction: Optional[str] = None) -> float:
    """
    Interpolate between two hues with wrapping support.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        t: Interpolation coefficient, 0 gives ``h0`` and 1 gives ``h1``
        direction: 'shortest' (default), 'longest', 'cw' (increasing hue)
            or 'ccw' (decreasing hue)

    Returns:
        Interpolated hue in [0, 360)
    """
    delta = _hue_delta(normalize_hue(h0), normalize_hue(h1), direction)
    return normalize_hue(h0 + delta * t)
