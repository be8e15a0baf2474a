from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
Vector3 = Tuple[float, float, float]
ColorElement = Union[Scalar, ScalarVector]
ColorSpace = Literal["rgb", "xyz", "lab", "cam16", "hct"]
COLOR_SPACES: Tuple[str, ...] = ("rgb", "xyz", "lab", "cam16", "hct")
HueDirection = Literal["cw", "ccw", "shortest", "longest"]

def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float64 numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=np.float64)
    return np.array(element, dtype=np.float64)

