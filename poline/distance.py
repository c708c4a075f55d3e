import math
from typing import Optional

from .types.color_types import PartialVector3
from .types.format_type import HUE_360


def _component(p: PartialVector3, index: int) -> Optional[float]:
    return p[index] if index < len(p) else None


def _axis_difference(p1: PartialVector3, p2: PartialVector3, index: int) -> float:
    a = _component(p1, index)
    b = _component(p2, index)
    if a is None or b is None:
        return 0.0
    return b - a


def distance(p1: PartialVector3, p2: PartialVector3, hue_mode: bool = False) -> float:
    """
    Weighted Euclidean distance between two partial 3-vectors.

    A component that is ``None`` (or missing) in either operand contributes
    nothing. With ``hue_mode`` the first component is treated as a hue in
    degrees: the shorter way around the circle is used and the result is
    scaled by 1/360 so it is comparable with unit saturation/lightness.

    Args:
        p1: First vector, e.g. (x, y, z) or (h, s, l)
        p2: Second vector
        hue_mode: Treat the first component as a circular hue

    Returns:
        float: Distance >= 0
    """
    a1 = _component(p1, 0)
    a2 = _component(p2, 0)

    if hue_mode and a1 is not None and a2 is not None:
        delta = abs(a1 - a2)
        diff_a = min(delta, HUE_360 - delta) / HUE_360
    else:
        diff_a = _axis_difference(p1, p2, 0)

    diff_b = _axis_difference(p1, p2, 1)
    diff_c = _axis_difference(p1, p2, 2)

    return math.sqrt(diff_a * diff_a + diff_b * diff_b + diff_c * diff_c)
