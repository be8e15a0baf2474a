from .color_base import ColorBase
from .rgb import RGB
from .xyz import XYZ
from .lab import Lab
from .cam16 import CAM16
from .hct import HCT
from .color import unified_space_to_class, get_color_class, convert_color

__all__ = [
    "ColorBase",
    "RGB",
    "XYZ",
    "Lab",
    "CAM16",
    "HCT",
    "unified_space_to_class",
    "get_color_class",
    "convert_color",
]
