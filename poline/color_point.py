"""
Color points.

A ``ColorPoint`` is one palette location, readable as a Cartesian position
on the color disk or as an HSL color.
"""
from __future__ import annotations
from typing import Optional, Tuple, Union

from .conversions import point_to_hsl, hsl_to_point, hsl_to_unit_rgb, scale_rgb
from .types.color_types import Vector3, Vector3Like, as_vector3
from .types.format_type import FormatType, HUE_360


class ColorPoint:
    """
    A palette location addressable both as a Cartesian point and as an HSL color.

    The two representations are kept in sync: setting the position recomputes
    the color and setting the color recomputes the position, using the
    point's ``inverted_lightness`` (fixed at construction).
    """

    __slots__ = ('_x', '_y', '_z', '_color', '_inverted_lightness')

    def __init__(
        self,
        xyz: Optional[Vector3Like] = None,
        color: Optional[Vector3Like] = None,
        inverted_lightness: bool = False,
    ) -> None:
        if xyz is not None and color is not None:
            raise ValueError("Point must be initialized with either x,y,z or hsl, not both")

        self._inverted_lightness = bool(inverted_lightness)
        self._x = 0.0
        self._y = 0.0
        self._z = 0.0
        self._color: Vector3 = (0.0, 0.0, 0.0)

        if xyz is not None:
            self.position = xyz
        elif color is not None:
            self.hsl = color

    # ------------------ PROPERTIES ------------------
    @property
    def inverted_lightness(self) -> bool:
        return self._inverted_lightness

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def position(self) -> Vector3:
        """Cartesian position (x, y, z)."""
        return self._x, self._y, self._z

    @position.setter
    def position(self, xyz: Vector3Like) -> None:
        self._x, self._y, self._z = as_vector3(xyz)
        self._color = point_to_hsl(self.position, self._inverted_lightness)

    @property
    def hsl(self) -> Vector3:
        """Color as (hue, saturation, lightness)."""
        return self._color

    @hsl.setter
    def hsl(self, hsl: Vector3Like) -> None:
        self._color = as_vector3(hsl)
        self._x, self._y, self._z = hsl_to_point(self._color, self._inverted_lightness)

    @property
    def rgb(self) -> Vector3:
        """Color as unit RGB floats."""
        return hsl_to_unit_rgb(*self._color)

    # ------------------ METHODS ------------------
    def get_rgb(self, format_type: FormatType = FormatType.FLOAT) -> Union[Tuple[float, ...], Tuple[int, ...]]:
        """RGB in the requested format (unit floats, 0-255 ints or percentages)."""
        return scale_rgb(self.rgb, format_type)

    def shift_hue(self, angle: float) -> None:
        """Rotate the hue by ``angle`` degrees and move the point accordingly."""
        h, s, l = self._color
        self.hsl = ((HUE_360 + (h + angle)) % HUE_360, s, l)

    def copy(self) -> ColorPoint:
        clone = ColorPoint(inverted_lightness=self._inverted_lightness)
        clone._x, clone._y, clone._z = self._x, self._y, self._z
        clone._color = self._color
        return clone

    def __repr__(self) -> str:
        h, s, l = self._color
        return (
            f"ColorPoint(xyz=({self._x:.4f}, {self._y:.4f}, {self._z:.4f}), "
            f"hsl=({h:.2f}, {s:.4f}, {l:.4f}), inverted_lightness={self._inverted_lightness})"
        )
