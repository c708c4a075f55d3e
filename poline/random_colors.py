"""
Random seed palettes.

Generate two or three HSL anchors whose hues are spread 60-240 degrees from
the first, with saturation and lightness drawn from ranges that keep the
anchors visually distinct.
"""
from __future__ import annotations
from typing import List, Optional, Sequence
import numpy as np

from .types.color_types import Vector3
from .types.format_type import HUE_360
from .utils import value_or_default


def _offset_hue(start_hue: float, rng: np.random.Generator) -> float:
    return float((start_hue + 60 + rng.random() * 180) % HUE_360)


def random_hsl_pair(
    start_hue: Optional[float] = None,
    saturations: Optional[Sequence[float]] = None,
    lightnesses: Optional[Sequence[float]] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Vector3]:
    """
    Two random anchor colors: a light one and a darker, less saturated one.

    Args:
        start_hue: Hue of the first color; random when omitted
        saturations: Saturations of both colors; random when omitted
        lightnesses: Lightnesses of both colors; random when omitted
        rng: numpy Generator for reproducible output

    Returns:
        List of two (h, s, l) tuples
    """
    rng = value_or_default(rng, np.random.default_rng())
    start_hue = float(value_or_default(start_hue, rng.random() * HUE_360))
    saturations = value_or_default(saturations, (rng.random(), rng.random() * 0.5))
    lightnesses = value_or_default(
        lightnesses, (0.75 + rng.random() * 0.2, 0.3 + rng.random() * 0.2)
    )
    if len(saturations) != 2 or len(lightnesses) != 2:
        raise ValueError("saturations and lightnesses must have 2 entries each")

    return [
        (start_hue, float(saturations[0]), float(lightnesses[0])),
        (_offset_hue(start_hue, rng), float(saturations[1]), float(lightnesses[1])),
    ]


def random_hsl_triple(
    start_hue: Optional[float] = None,
    saturations: Optional[Sequence[float]] = None,
    lightnesses: Optional[Sequence[float]] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Vector3]:
    """
    Three random anchor colors: light, dark, light.

    Same arguments as ``random_hsl_pair`` with three entries per sequence.
    """
    rng = value_or_default(rng, np.random.default_rng())
    start_hue = float(value_or_default(start_hue, rng.random() * HUE_360))
    saturations = value_or_default(
        saturations, (rng.random(), rng.random() * 0.5, rng.random() * 0.75)
    )
    lightnesses = value_or_default(
        lightnesses,
        (0.6 + rng.random() * 0.2, 0.1 + rng.random() * 0.3, 0.6 + rng.random() * 0.2),
    )
    if len(saturations) != 3 or len(lightnesses) != 3:
        raise ValueError("saturations and lightnesses must have 3 entries each")

    return [
        (start_hue, float(saturations[0]), float(lightnesses[0])),
        (_offset_hue(start_hue, rng), float(saturations[1]), float(lightnesses[1])),
        (_offset_hue(start_hue, rng), float(saturations[2]), float(lightnesses[2])),
    ]
