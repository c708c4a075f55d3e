import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp

from ..types.color_types import Vector3, Vector3Like
from ..types.format_type import HUE_360

# Center of the unit disk the hue/lightness plane is mapped onto
CENTER_X = 0.5
CENTER_Y = 0.5


def point_to_hsl(xyz: Vector3Like, inverted_lightness: bool = False) -> Vector3:
    """
    Convert a Cartesian point to an HSL triple.

    The (x, y) plane is read as polar coordinates around (0.5, 0.5): the angle
    is the hue and the distance from the center (scaled so the rim is 1) is
    the lightness. z is the saturation.

    Args:
        xyz: Point (x, y, z)
        inverted_lightness: Measure lightness from the rim instead of the center

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    x, y, z = xyz

    radians = math.atan2(y - CENTER_Y, x - CENTER_X)
    deg = (HUE_360 + math.degrees(radians)) % HUE_360

    s = clamp(z, 0.0, 1.0)

    dist = math.sqrt((y - CENTER_Y) ** 2 + (x - CENTER_X) ** 2)
    l = clamp(dist / CENTER_X, 0.0, 1.0)

    return float(deg), float(s), float(1 - l if inverted_lightness else l)


def np_point_to_hsl(x: NDArray, y: NDArray, z: NDArray, inverted_lightness: bool = False) -> NDArray:
    """
    Vectorized: Convert Cartesian points to HSL.

    Args:
        x, y, z: array-like or scalar coordinates
        inverted_lightness: Measure lightness from the rim instead of the center

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    z = np.asarray(z, dtype=float)

    out_shape = np.broadcast(x, y, z).shape
    x = np.broadcast_to(x, out_shape)
    y = np.broadcast_to(y, out_shape)
    z = np.broadcast_to(z, out_shape)

    dx = x - CENTER_X
    dy = y - CENTER_Y

    hue = (HUE_360 + np.degrees(np.arctan2(dy, dx))) % HUE_360
    saturation = np.clip(z, 0.0, 1.0)
    lightness = np.clip(np.hypot(dx, dy) / CENTER_X, 0.0, 1.0)
    if inverted_lightness:
        lightness = 1 - lightness

    return np.stack([hue, saturation, lightness], axis=-1)
