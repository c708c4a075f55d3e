"""
Anchor graph and interpolation engine.

A ``Poline`` holds an ordered list of anchor ``ColorPoint``s. Consecutive
anchors (plus last-to-first when the loop is closed) form segments, and each
segment is filled with points eased along the x, y and z axes by their
position functions. Every mutator rebuilds the whole set of segments before
returning, so readers never see stale points.
"""
from __future__ import annotations
import logging
import numbers
from typing import List, Optional, Sequence, Tuple, Union
import numpy as np

from .color_point import ColorPoint
from .conversions import np_point_to_hsl, np_hsl_to_unit_rgb, scale_rgb
from .distance import distance
from .interpolation import vectors_on_line
from .positions import DEFAULT_POSITION_FUNCTION, PositionFunctionName, get_position_function
from .random_colors import random_hsl_pair
from .types.color_types import ColorSpace, PartialVector3, PositionFunction, Vector3, Vector3Like, as_vector3
from .types.format_type import FormatType
from .utils import value_or_default

logger = logging.getLogger(__name__)

PositionFunctionLike = Union[PositionFunction, PositionFunctionName, str]
AnchorPair = Tuple[ColorPoint, ColorPoint]

DEFAULT_NUM_POINTS = 4
DEFAULT_HUE_SHIFT = 20.0


def _validate_num_points(num_points: int) -> int:
    if isinstance(num_points, bool) or not isinstance(num_points, numbers.Integral):
        raise ValueError(f"num_points must be an integer, got {num_points!r}")
    if num_points < 1:
        raise ValueError(f"Must have at least one point, got {num_points}")
    return int(num_points)


class Poline:
    """
    Palette generator interpolating between anchor colors.

    Args:
        anchor_colors: HSL anchors; a random pair when omitted. At least two.
        num_points: Interpolated points between each pair of anchors (>= 1)
        position_function: Position function for all three axes
        position_function_x, position_function_y, position_function_z:
            Per-axis overrides of ``position_function``
        inverted_lightness: Measure lightness from the rim of the disk
        closed_loop: Also interpolate from the last anchor back to the first

    Position functions may be given as callables, ``PositionFunctionName``
    members or catalog names such as ``"sinusoidal"``.
    """

    def __init__(
        self,
        anchor_colors: Optional[Sequence[Vector3Like]] = None,
        num_points: int = DEFAULT_NUM_POINTS,
        position_function: Optional[PositionFunctionLike] = None,
        position_function_x: Optional[PositionFunctionLike] = None,
        position_function_y: Optional[PositionFunctionLike] = None,
        position_function_z: Optional[PositionFunctionLike] = None,
        inverted_lightness: bool = False,
        closed_loop: bool = False,
    ) -> None:
        if anchor_colors is None:
            anchor_colors = random_hsl_pair()
        if len(anchor_colors) < 2:
            raise ValueError("Must have at least two anchor colors")

        base = value_or_default(position_function, DEFAULT_POSITION_FUNCTION)
        self._position_function_x = get_position_function(value_or_default(position_function_x, base))
        self._position_function_y = get_position_function(value_or_default(position_function_y, base))
        self._position_function_z = get_position_function(value_or_default(position_function_z, base))

        # Stored with the two segment endpoints included
        self._num_points = _validate_num_points(num_points) + 2
        self._closed_loop = bool(closed_loop)
        self._inverted_lightness = bool(inverted_lightness)

        self._anchor_points: List[ColorPoint] = [
            ColorPoint(color=color, inverted_lightness=self._inverted_lightness)
            for color in anchor_colors
        ]
        self._anchor_pairs: List[AnchorPair] = []
        self._points: List[List[ColorPoint]] = []

        self.update_anchor_pairs()

    # ------------------ REBUILD ------------------
    def update_anchor_pairs(self) -> None:
        """Re-pair the anchors and regenerate every segment's points."""
        n = len(self._anchor_points)
        segment_count = n if self._closed_loop else n - 1

        self._anchor_pairs = [
            (self._anchor_points[i], self._anchor_points[(i + 1) % n])
            for i in range(segment_count)
        ]

        self._points = []
        for i, (start, end) in enumerate(self._anchor_pairs):
            # Alternate easing direction so adjacent segments read as one curve
            positions = vectors_on_line(
                start.position,
                end.position,
                self._num_points,
                i % 2 == 1,
                self._position_function_x,
                self._position_function_y,
                self._position_function_z,
            )
            self._points.append([
                ColorPoint(xyz=p, inverted_lightness=self._inverted_lightness)
                for p in positions
            ])

        logger.debug(
            "Rebuilt %d segment(s) of %d point(s) from %d anchor(s)",
            len(self._points), self._num_points, n,
        )

    # ------------------ READ-ONLY STATE ------------------
    @property
    def points(self) -> List[List[ColorPoint]]:
        """Interpolated points, one list per segment, endpoints included."""
        return [list(segment) for segment in self._points]

    @property
    def anchor_pairs(self) -> List[AnchorPair]:
        return list(self._anchor_pairs)

    @property
    def position_function_x(self) -> PositionFunction:
        return self._position_function_x

    @property
    def position_function_y(self) -> PositionFunction:
        return self._position_function_y

    @property
    def position_function_z(self) -> PositionFunction:
        return self._position_function_z

    # ------------------ NUM POINTS ------------------
    @property
    def num_points(self) -> int:
        return self._num_points - 2

    @num_points.setter
    def num_points(self, num_points: int) -> None:
        self.set_num_points(num_points)

    def set_num_points(self, num_points: int) -> None:
        self._num_points = _validate_num_points(num_points) + 2
        self.update_anchor_pairs()

    # ------------------ POSITION FUNCTIONS ------------------
    @property
    def position_function(self) -> Union[PositionFunction, Tuple[PositionFunction, PositionFunction, PositionFunction]]:
        """The shared position function, or an (x, y, z) tuple when the axes differ."""
        fx, fy, fz = self._position_function_x, self._position_function_y, self._position_function_z
        if fx is fy and fx is fz:
            return fx
        return fx, fy, fz

    @position_function.setter
    def position_function(self, position_function: PositionFunctionLike) -> None:
        self.set_position_function(position_function)

    def set_position_function(self, position_function: PositionFunctionLike) -> None:
        """Use one position function on all three axes."""
        fn = get_position_function(position_function)
        self._position_function_x = fn
        self._position_function_y = fn
        self._position_function_z = fn
        self.update_anchor_pairs()

    def set_position_functions(self, position_functions: Sequence[PositionFunctionLike]) -> None:
        """Set the x, y and z position functions from a 3-element sequence."""
        if len(position_functions) != 3:
            raise ValueError(
                f"Position function array must have 3 elements, got {len(position_functions)}"
            )
        fx, fy, fz = (get_position_function(fn) for fn in position_functions)
        self._position_function_x = fx
        self._position_function_y = fy
        self._position_function_z = fz
        self.update_anchor_pairs()

    # ------------------ ANCHORS ------------------
    @property
    def anchor_points(self) -> List[ColorPoint]:
        return list(self._anchor_points)

    @anchor_points.setter
    def anchor_points(self, anchor_points: Sequence[ColorPoint]) -> None:
        self.set_anchor_points(anchor_points)

    def set_anchor_points(self, anchor_points: Sequence[ColorPoint]) -> None:
        """Replace every anchor. At least two ``ColorPoint``s are required."""
        anchor_points = list(anchor_points)
        if len(anchor_points) < 2:
            raise ValueError("Must have at least two anchor points")
        for anchor in anchor_points:
            if not isinstance(anchor, ColorPoint):
                raise ValueError(f"Anchor points must be ColorPoint instances, got {anchor!r}")
        self._anchor_points = anchor_points
        self.update_anchor_pairs()


    def _resolve_anchor_index(self, point: Optional[ColorPoint], index: Optional[int]) -> Optional[int]:
        """Index of the targeted anchor, or None when it cannot be found."""
        if index is not None:
            return index if 0 <= index < len(self._anchor_points) else None
        for i, anchor in enumerate(self._anchor_points):
            if anchor is point:
                return i
        return None

    def add_anchor_point(
        self,
        xyz: Optional[Vector3Like] = None,
        color: Optional[Vector3Like] = None,
        insert_at_index: Optional[int] = None,
        inverted_lightness: Optional[bool] = None,
    ) -> ColorPoint:
        """
        Add an anchor from a position or a color.

        Args:
            xyz: Cartesian position of the new anchor
            color: HSL color of the new anchor
            insert_at_index: Position in the anchor list; appended when omitted
            inverted_lightness: Defaults to the palette's setting

        Returns:
            The new anchor
        """
        new_anchor = ColorPoint(
            xyz=xyz,
            color=color,
            inverted_lightness=value_or_default(inverted_lightness, self._inverted_lightness),
        )

        if insert_at_index is not None:
            self._anchor_points.insert(insert_at_index, new_anchor)
        else:
            self._anchor_points.append(new_anchor)

        logger.debug("Added anchor %r", new_anchor)
        self.update_anchor_pairs()
        return new_anchor

    def remove_anchor_point(self, point: Optional[ColorPoint] = None, index: Optional[int] = None) -> ColorPoint:
        """
        Remove an anchor identified by ``index`` or by the anchor object itself.

        Returns:
            The removed anchor

        Raises:
            ValueError: If neither argument is given or the anchor is not found
        """
        if point is None and index is None:
            raise ValueError("Must provide a point or index")

        target = self._resolve_anchor_index(point, index)
        if target is None:
            raise ValueError("Point not found")

        removed = self._anchor_points.pop(target)
        logger.debug("Removed anchor %d: %r", target, removed)
        self.update_anchor_pairs()
        return removed

    def update_anchor_point(
        self,
        point: Optional[ColorPoint] = None,
        point_index: Optional[int] = None,
        xyz: Optional[Vector3Like] = None,
        color: Optional[Vector3Like] = None,
    ) -> ColorPoint:
        """
        Move an existing anchor in place.

        When both ``xyz`` and ``color`` are given the position is applied
        first and the color last, so the color wins.

        Returns:
            The updated anchor

        Raises:
            ValueError: If the anchor cannot be identified or no new value is given
        """
        if point is None and point_index is None:
            raise ValueError("Must provide a point or point_index")

        target = self._resolve_anchor_index(point, point_index)
        if target is None:
            raise ValueError("Point not found")

        if xyz is None and color is None:
            raise ValueError("Must provide a new xyz position or color")

        new_xyz = as_vector3(xyz) if xyz is not None else None
        new_color = as_vector3(color) if color is not None else None

        anchor = self._anchor_points[target]
        if new_xyz is not None:
            anchor.position = new_xyz
        if new_color is not None:
            anchor.hsl = new_color

        self.update_anchor_pairs()
        return anchor

    def get_closest_anchor_index(
        self,
        xyz: Optional[PartialVector3] = None,
        hsl: Optional[PartialVector3] = None,
        max_distance: float = 1.0,
    ) -> Optional[int]:
        """
        Index of the anchor nearest to a position or color.

        Components of the query may be None to ignore that axis. Color queries
        compare hues around the circle.

        Returns:
            The first index at the minimum distance, or None if that distance
            exceeds ``max_distance``
        """
        if xyz is None and hsl is None:
            raise ValueError("Must provide a xyz or hsl")

        if xyz is not None:
            distances = [distance(anchor.position, xyz) for anchor in self._anchor_points]
        else:
            distances = [distance(anchor.hsl, hsl, hue_mode=True) for anchor in self._anchor_points]

        if not distances:
            return None

        min_index = min(range(len(distances)), key=distances.__getitem__)
        if distances[min_index] > max_distance:
            return None
        return min_index

    def get_closest_anchor_point(
        self,
        xyz: Optional[PartialVector3] = None,
        hsl: Optional[PartialVector3] = None,
        max_distance: float = 1.0,
    ) -> Optional[ColorPoint]:
        """Anchor nearest to a position or color; see ``get_closest_anchor_index``."""
        index = self.get_closest_anchor_index(xyz=xyz, hsl=hsl, max_distance=max_distance)
        return None if index is None else self._anchor_points[index]

    # ------------------ FLAGS ------------------
    @property
    def closed_loop(self) -> bool:
        return self._closed_loop

    @closed_loop.setter
    def closed_loop(self, new_status: bool) -> None:
        self.set_closed_loop(new_status)

    def set_closed_loop(self, new_status: bool) -> None:
        self._closed_loop = bool(new_status)
        self.update_anchor_pairs()

    @property
    def inverted_lightness(self) -> bool:
        return self._inverted_lightness

    @inverted_lightness.setter
    def inverted_lightness(self, new_status: bool) -> None:
        self.set_inverted_lightness(new_status)

    def set_inverted_lightness(self, new_status: bool) -> None:
        self._inverted_lightness = bool(new_status)
        self.update_anchor_pairs()

    # ------------------ OUTPUT ------------------
    def get_flattened_points(self) -> List[ColorPoint]:
        """All segment points in order, with the joints shared by adjacent segments kept once."""
        flat = [point for segment in self._points for point in segment]
        return [
            point for i, point in enumerate(flat)
            if i == 0 or i % self._num_points != 0
        ]

    def _palette_points(self) -> List[ColorPoint]:
        points = self.get_flattened_points()
        if self._closed_loop and points:
            # Last point repeats the first anchor
            points = points[:-1]
        return points

    def get_colors(self) -> List[Vector3]:
        """Palette as HSL tuples."""
        return [point.hsl for point in self._palette_points()]

    def get_rgb_colors(self, format_type: FormatType = FormatType.FLOAT) -> List[Tuple]:
        """Palette as RGB tuples in the requested format."""
        return [point.get_rgb(format_type) for point in self._palette_points()]

    def get_colors_array(
        self,
        color_space: ColorSpace = "hsl",
        format_type: FormatType = FormatType.FLOAT,
    ) -> np.ndarray:
        """
        Palette as an (N, 3) array.

        Args:
            color_space: "hsl", "rgb" or "xyz"
            format_type: Scaling applied to "rgb" output

        Returns:
            np.ndarray of shape (N, 3)
        """
        space = color_space.lower()
        xyz = np.array([point.position for point in self._palette_points()], dtype=float).reshape(-1, 3)
        if space == "xyz":
            return xyz

        hsl = np_point_to_hsl(xyz[:, 0], xyz[:, 1], xyz[:, 2], self._inverted_lightness)
        if space == "hsl":
            return hsl
        if space == "rgb":
            return scale_rgb(np_hsl_to_unit_rgb(hsl[:, 0], hsl[:, 1], hsl[:, 2]), format_type)
        raise ValueError(f"Unknown color space: {color_space}")

    def shift_hue(self, amount: float = DEFAULT_HUE_SHIFT) -> None:
        """Rotate every anchor's hue by ``amount`` degrees."""
        for anchor in self._anchor_points:
            anchor.shift_hue(amount)
        self.update_anchor_pairs()

    def __len__(self) -> int:
        return len(self._palette_points())

    def __repr__(self) -> str:
        return (
            f"Poline(anchors={len(self._anchor_points)}, num_points={self.num_points}, "
            f"closed_loop={self._closed_loop}, inverted_lightness={self._inverted_lightness})"
        )
