from .dimension import get_dimension
from .linalg import (
    DEG2RAD,
    RAD2DEG,
    as_matrix3,
    mat_vec,
    mat_mul,
    mat_inverse,
    dot,
    safe_divide,
    lerp,
    clamp,
    degrees_to_radians,
    radians_to_degrees,
)
from .hue import normalize_hue, np_normalize_hue, hue_lerp

__all__ = [
    "get_dimension",
    "DEG2RAD",
    "RAD2DEG",
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
    "normalize_hue",
    "np_normalize_hue",
    "hue_lerp",
]
