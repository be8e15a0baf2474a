from __future__ import annotations
import re
from typing import TYPE_CHECKING, ClassVar, Tuple

from ..conversions import unit_rgb_to_xyz, xyz_to_unit_rgb
from ..errors import ColorError
from ..types.color_types import ColorSpace
from ..types.format_type import FormatType, format_classes, max_non_hue
from .color_base import UNIT, Bound, ColorBase

if TYPE_CHECKING:
    from .xyz import XYZ

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class RGB(ColorBase):
    """Gamma-encoded sRGB with every channel in [0, 1]."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    channels: ClassVar[Tuple[str, ...]] = ("R", "G", "B")
    bounds: ClassVar[Tuple[Bound, ...]] = (UNIT, UNIT, UNIT)

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @classmethod
    def from_xyz(cls, xyz: "XYZ") -> "RGB":
        """sRGB of an XYZ color, clamped into the gamut."""
        return cls(xyz_to_unit_rgb(*xyz.value, clip=True))

    def to_xyz(self) -> "XYZ":
        from .xyz import XYZ
        x, y, z = unit_rgb_to_xyz(*self._value)
        # matrix round-off can leave black a hair below zero
        return XYZ(max(x, 0.0), max(y, 0.0), max(z, 0.0))

    def to_format(self, format_type: FormatType) -> Tuple[float, ...]:
        """
        Channels scaled to a format: 0-255 ints, unit floats or percentages.
        """
        fmt = FormatType(format_type)
        maxval = max_non_hue[fmt]
        if fmt == FormatType.INT:
            return tuple(int(round(v * maxval)) for v in self._value)
        return tuple(format_classes[fmt](v * maxval) for v in self._value)

    @classmethod
    def from_format(cls, value: Tuple[float, ...], format_type: FormatType) -> "RGB":
        maxval = max_non_hue[FormatType(format_type)]
        return cls(tuple(v / maxval for v in value))

    def to_hex(self) -> str:
        r, g, b = self.to_format(FormatType.INT)
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def from_hex(cls, text: str) -> "RGB":
        """
        Parse ``#rgb`` or ``#rrggbb`` (the ``#`` is optional).

        Raises:
            ColorError: if ``text`` is not a hex color.
        """
        match = _HEX_RE.match(text.strip())
        if match is None:
            raise ColorError(f"Invalid hex color: {text!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls.from_format(
            tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4)), FormatType.INT
        )

