from __future__ import annotations
from typing import Any, Dict

from ..conversions import convert
from ..types.color_types import ColorSpace
from .cam16 import CAM16
from .color_base import ColorBase
from .hct import HCT
from .lab import Lab
from .rgb import RGB
from .xyz import XYZ

unified_space_to_class: Dict[str, type[ColorBase]] = {
    cls.mode: cls for cls in (RGB, XYZ, Lab, CAM16, HCT)
}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to another color space.

    CAM16 and HCT use the default viewing conditions here; use the
    ``from_*``/``to_*`` methods on those classes to choose others.

    Args:
        to_space: Target color space ("rgb", "xyz", "lab", "cam16", "hct").
            Defaults to this color's own space.

    Returns:
        New ColorBase instance in the target space
    """
    cls = get_color_class(to_space or self.mode)
    if cls.mode == self.mode:
        return self
    return cls(convert(self.value, self.mode, cls.mode))


ColorBase.convert = color_convert


def convert_color(value: Any, color_space: str) -> ColorBase:
    """Build a color of ``color_space`` from another color or a channel tuple."""
    color_class = get_color_class(color_space)
    if isinstance(value, ColorBase):
        return value.convert(color_class.mode)
    return color_class(value)
