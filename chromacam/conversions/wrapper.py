import numpy as np
from typing import Callable, Dict, Tuple, cast

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorElement, ColorSpace, COLOR_SPACES, element_to_array

from .cam16 import np_cam16_to_xyz, np_xyz_to_cam16
from .hct import (
    np_cam16_to_hct,
    np_hct_to_unit_rgb,
    np_lab_to_hct,
    np_unit_rgb_to_hct,
    np_xyz_to_hct,
)
from .lab import np_lab_to_xyz, np_xyz_to_lab
from .srgb import np_unit_rgb_to_xyz, np_xyz_to_unit_rgb
from .viewing_conditions import DEFAULT_VIEWING_CONDITIONS, ViewingConditions

NumpyConversion = Callable[[np.ndarray, ViewingConditions], np.ndarray]


def _hct_to_xyz(hct: np.ndarray, vc: ViewingConditions) -> np.ndarray:
    return np_unit_rgb_to_xyz(np_hct_to_unit_rgb(hct, vc))


def _to_cam16(xyz: np.ndarray, vc: ViewingConditions) -> np.ndarray:
    # Lab and out-of-gamut inverse results can dip just below zero
    return np_xyz_to_cam16(np.maximum(xyz, 0.0), vc)


def _from_cam16(cam: np.ndarray, vc: ViewingConditions) -> np.ndarray:
    # valid appearances outside the real-color domain invert to negative XYZ
    return np.maximum(np_cam16_to_xyz(cam, vc), 0.0)


def _to_lab(xyz: np.ndarray, vc: ViewingConditions) -> np.ndarray:
    lab = np_xyz_to_lab(xyz)
    # L* of Y = 0 can round to -2e-15
    lab[..., 0] = np.clip(lab[..., 0], 0.0, 100.0)
    return lab


# Every space reaches every other through XYZ unless a direct route exists.
TO_XYZ: Dict[str, NumpyConversion] = {
    "rgb": lambda rgb, vc: np_unit_rgb_to_xyz(rgb),
    "lab": lambda lab, vc: np_lab_to_xyz(lab),
    "cam16": _from_cam16,
    "hct": _hct_to_xyz,
}

FROM_XYZ: Dict[str, NumpyConversion] = {
    "rgb": lambda xyz, vc: np_xyz_to_unit_rgb(xyz),
    "lab": _to_lab,
    "cam16": _to_cam16,
    "hct": lambda xyz, vc: np_xyz_to_hct(np.maximum(xyz, 0.0), vc),
}

CONVERT_NUMPY_DIRECT: Dict[Tuple[str, str], NumpyConversion] = {
    ("rgb", "hct"): np_unit_rgb_to_hct,
    ("hct", "rgb"): np_hct_to_unit_rgb,
    ("lab", "hct"): np_lab_to_hct,
    ("cam16", "hct"): np_cam16_to_hct,
    **{("xyz", ts): fn for ts, fn in FROM_XYZ.items()},
    **{(fs, "xyz"): fn for fs, fn in TO_XYZ.items()},
}


def _route(from_space: str, to_space: str) -> NumpyConversion:
    key = (from_space, to_space)
    if key in CONVERT_NUMPY_DIRECT:
        return CONVERT_NUMPY_DIRECT[key]
    to_xyz, from_xyz = TO_XYZ[from_space], FROM_XYZ[to_space]
    return lambda color, vc: from_xyz(to_xyz(color, vc), vc)


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space


def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    """Bring RGB into the unit range; other spaces carry their own units."""
    if space == "rgb":
        return color / max_non_hue[fmt]
    return color


def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    if space == "rgb":
        scaled = color * max_non_hue[fmt]
        return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled
    return color


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
    viewing_conditions: ViewingConditions,
) -> np.ndarray:
    expected = 6 if from_space == "cam16" else 3
    if color.shape[-1:] not in ((3,), (expected,)):
        raise TypeError(
            f"{from_space} expects last dimension {expected}, got shape {color.shape}"
        )

    base_norm = normalize(color, from_space, input_fmt)
    if from_space == to_space:
        converted = base_norm
    else:
        converted = _route(from_space, to_space)(base_norm, viewing_conditions)
    return scale(converted, to_space, output_fmt)


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> ColorElement:
    """
    Convert a color between named spaces.

    ``input_type``/``output_type`` only affect RGB, which may be given as
    0-255 ints, unit floats or percentages. XYZ is 0-100, Lab and HCT use
    their natural units and CAM16 is the six correlates ``(H, C, J, Q, M, S)``
    (only ``(H, C, J)`` is required as input).

    Raises:
        ValueError: for an unknown space name
        TypeError: for a channel count the source space cannot take
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    if fs == ts and input_type == output_type:
        return color  # No conversion needed
    result = _convert_core(
        element_to_array(color),
        fs,
        ts,
        FormatType(input_type),
        FormatType(output_type),
        viewing_conditions,
    )
    # Convert back to tuple for scalar output
    return tuple(result.flat) if result.ndim == 1 else cast(ColorElement, result)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
    viewing_conditions: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> np.ndarray:
    fs, ts = _check_space(from_space), _check_space(to_space)
    if fs == ts and input_type == output_type:
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color, dtype=float),
        fs,
        ts,
        FormatType(input_type),
        FormatType(output_type),
        viewing_conditions,
    )
