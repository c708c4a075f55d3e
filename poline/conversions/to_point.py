import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Vector3, Vector3Like
from .to_hsl import CENTER_X, CENTER_Y


def hsl_to_point(hsl: Vector3Like, inverted_lightness: bool = False) -> Vector3:
    """
    Convert an HSL triple to its Cartesian point.

    Inverse of ``point_to_hsl``.

    Args:
        hsl: (hue in degrees, saturation [0,1], lightness [0,1])
        inverted_lightness: Measure lightness from the rim instead of the center

    Returns:
        Tuple[float, float, float]: (x, y, z)
    """
    h, s, l = hsl

    radians = math.radians(h)
    dist = (1 - l if inverted_lightness else l) * CENTER_X

    x = CENTER_X + dist * math.cos(radians)
    y = CENTER_Y + dist * math.sin(radians)

    return float(x), float(y), float(s)


def np_hsl_to_point(h: NDArray, s: NDArray, l: NDArray, inverted_lightness: bool = False) -> NDArray:
    """
    Vectorized: Convert HSL values to Cartesian points.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]
        inverted_lightness: Measure lightness from the rim instead of the center

    Returns:
        xyz: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    radians = np.radians(h)
    dist = np.where(inverted_lightness, 1 - l, l) * CENTER_X

    x = CENTER_X + dist * np.cos(radians)
    y = CENTER_Y + dist * np.sin(radians)

    return np.stack([x, y, s], axis=-1)
