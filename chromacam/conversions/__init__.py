"""
Chromacam Color Space Conversions
=================================

Pure conversion functions between sRGB, CIE XYZ, CIE Lab, CAM16 and HCT,
each with a scalar form and a vectorized ``np_*`` form working on arrays
whose last axis holds the channels.

Conventions
-----------
- RGB: gamma-encoded sRGB, unit range [0, 1]
- XYZ: D65, 0-100 scale
- Lab: D65 white, L* in [0, 100]
- CAM16: ``(H, C, J, Q, M, S)``, hue in degrees
- HCT: CAM16 hue and chroma, tone = L*

Conversion Functions
--------------------

sRGB <-> XYZ:
    unit_rgb_to_xyz(r, g, b), np_unit_rgb_to_xyz(rgb)
    xyz_to_unit_rgb(x, y, z, clip=True), np_xyz_to_unit_rgb(xyz, clip=True)

XYZ <-> Lab:
    xyz_to_lab(x, y, z), np_xyz_to_lab(xyz)
    lab_to_xyz(l, a, b), np_lab_to_xyz(lab)

XYZ <-> CAM16:
    xyz_to_cam16(x, y, z, viewing_conditions), np_xyz_to_cam16(xyz, viewing_conditions)
    cam16_to_xyz(h, c, j, viewing_conditions), np_cam16_to_xyz(hcj, viewing_conditions)
    jch_to_cam16(j, c, h, viewing_conditions)

-> HCT:
    unit_rgb_to_hct, xyz_to_hct, lab_to_hct, cam16_to_hct and np_* variants

HCT -> RGB:
    solve_hct(h, c, t, ...) -> HctSolution
    hct_to_unit_rgb(h, c, t), np_hct_to_unit_rgb(hct)

High-Level API
--------------
convert(color, from_space, to_space, input_type, output_type, viewing_conditions)
np_convert(...)
"""
# Import order matters: viewing_conditions needs lab and adaptation, cam16 needs
# viewing_conditions.
from .lab import (
    D65_WHITE,
    lab_to_xyz,
    lstar_from_y,
    np_lab_to_xyz,
    np_xyz_to_lab,
    xyz_to_lab,
    y_from_lstar,
)
from .srgb import (
    is_in_gamut,
    np_unit_rgb_to_xyz,
    np_xyz_to_unit_rgb,
    unit_rgb_to_xyz,
    xyz_to_unit_rgb,
)
from .adaptation import compress, expand
from .viewing_conditions import DEFAULT_VIEWING_CONDITIONS, ViewingConditions
from .cam16 import (
    cam16_to_xyz,
    cam16_ucs,
    jch_to_cam16,
    np_cam16_to_xyz,
    np_xyz_to_cam16,
    ucs_colorfulness,
    ucs_distance,
    xyz_to_cam16,
)
from .hct import (
    DEGENERATE_EPSILON,
    GAMUT_TOLERANCE,
    SOLVER_ITERATIONS,
    SOLVER_TONE_TOLERANCE,
    HctSolution,
    cam16_to_hct,
    hct_to_unit_rgb,
    lab_to_hct,
    np_cam16_to_hct,
    np_hct_to_unit_rgb,
    np_lab_to_hct,
    np_unit_rgb_to_hct,
    np_xyz_to_hct,
    solve_hct,
    unit_rgb_to_hct,
    xyz_to_hct,
)
from .wrapper import convert, np_convert

__all__ = [
    "D65_WHITE",
    "lab_to_xyz",
    "lstar_from_y",
    "np_lab_to_xyz",
    "np_xyz_to_lab",
    "xyz_to_lab",
    "y_from_lstar",
    "is_in_gamut",
    "np_unit_rgb_to_xyz",
    "np_xyz_to_unit_rgb",
    "unit_rgb_to_xyz",
    "xyz_to_unit_rgb",
    "compress",
    "expand",
    "DEFAULT_VIEWING_CONDITIONS",
    "ViewingConditions",
    "cam16_to_xyz",
    "cam16_ucs",
    "jch_to_cam16",
    "np_cam16_to_xyz",
    "np_xyz_to_cam16",
    "ucs_colorfulness",
    "ucs_distance",
    "xyz_to_cam16",
    "DEGENERATE_EPSILON",
    "GAMUT_TOLERANCE",
    "SOLVER_ITERATIONS",
    "SOLVER_TONE_TOLERANCE",
    "HctSolution",
    "cam16_to_hct",
    "hct_to_unit_rgb",
    "lab_to_hct",
    "np_cam16_to_hct",
    "np_hct_to_unit_rgb",
    "np_lab_to_hct",
    "np_unit_rgb_to_hct",
    "np_xyz_to_hct",
    "solve_hct",
    "unit_rgb_to_hct",
    "xyz_to_hct",
    "convert",
    "np_convert",
]
