"""Chromacam: CAM16 color appearance and HCT colors."""

from .errors import ColorError
from .types.format_type import FormatType
from .conversions import (
    DEFAULT_VIEWING_CONDITIONS,
    ViewingConditions,
    HctSolution,
    solve_hct,
    xyz_to_cam16,
    cam16_to_xyz,
    np_xyz_to_cam16,
    np_cam16_to_xyz,
    unit_rgb_to_hct,
    hct_to_unit_rgb,
    np_unit_rgb_to_hct,
    np_hct_to_unit_rgb,
    convert,
    np_convert,
)
from .colors.color_base import ColorBase
from .colors.rgb import RGB
from .colors.xyz import XYZ
from .colors.lab import Lab
from .colors.cam16 import CAM16
from .colors.hct import HCT
from .colors.color import color_convert, convert_color, get_color_class

__version__ = "0.1.0"

__all__ = [
    "ColorError",
    "FormatType",
    "DEFAULT_VIEWING_CONDITIONS",
    "ViewingConditions",
    "HctSolution",
    "solve_hct",
    "xyz_to_cam16",
    "cam16_to_xyz",
    "np_xyz_to_cam16",
    "np_cam16_to_xyz",
    "unit_rgb_to_hct",
    "hct_to_unit_rgb",
    "np_unit_rgb_to_hct",
    "np_hct_to_unit_rgb",
    "convert",
    "np_convert",
    "ColorBase",
    "RGB",
    "XYZ",
    "Lab",
    "CAM16",
    "HCT",
    "color_convert",
    "convert_color",
    "get_color_class",
    "__version__",
]
