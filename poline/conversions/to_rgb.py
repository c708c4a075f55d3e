from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp, cyclic_wrap_float

from ..types.format_type import FormatType, max_non_hue, HUE_360


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Resolve one RGB channel from the HSL helper values ``p``/``q`` and hue offset ``t``."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Hue is wrapped into [0, 360); saturation and lightness are clamped to [0, 1].

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = cyclic_wrap_float(h, 0.0, float(HUE_360))
    s = clamp(s, 0.0, 1.0)
    l = clamp(l, 0.0, 1.0)

    if s == 0:
        return float(l), float(l), float(l)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    hk = h / HUE_360

    r = hue_to_rgb(p, q, (hk + 1 / 3) % 1)
    g = hue_to_rgb(p, q, hk)
    b = hue_to_rgb(p, q, (hk - 1 / 3) % 1)

    return float(r), float(g), float(b)


def _np_hue_to_rgb(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % HUE_360
    s = np.clip(np.asarray(s, dtype=float), 0.0, 1.0)
    l = np.clip(np.asarray(l, dtype=float), 0.0, 1.0)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    hk = h / HUE_360

    r = _np_hue_to_rgb(p, q, (hk + 1 / 3) % 1)
    g = _np_hue_to_rgb(p, q, hk)
    b = _np_hue_to_rgb(p, q, (hk - 1 / 3) % 1)

    # Achromatic
    achromatic = s == 0
    r = np.where(achromatic, l, r)
    g = np.where(achromatic, l, g)
    b = np.where(achromatic, l, b)

    return np.stack([r, g, b], axis=-1)


def scale_rgb(
    rgb: Union[Sequence[float], NDArray],
    format_type: FormatType = FormatType.FLOAT,
) -> Union[Tuple[float, ...], Tuple[int, ...], NDArray]:
    """
    Rescale unit RGB to the requested format.

    Tuples come back as tuples and arrays as arrays. INT output is rounded to 0-255.
    """
    fmt = FormatType(format_type)
    maxval = max_non_hue[fmt]
    if isinstance(rgb, np.ndarray):
        scaled = rgb * maxval
        return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled
    if fmt == FormatType.INT:
        return tuple(int(round(c * maxval)) for c in rgb)
    return tuple(float(c * maxval) for c in rgb)
