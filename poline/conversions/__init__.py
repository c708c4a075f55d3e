"""
Poline Color Space Conversions
==============================

Mappings between the three coordinate systems a palette point lives in:

- HSL: (hue [0,360), saturation [0,1], lightness [0,1])
- Cartesian: (x, y, z) where (x, y) lies on a disk of radius 0.5 around
  (0.5, 0.5) and z is the saturation
- RGB: (r, g, b) unit floats, optionally rescaled with ``scale_rgb``

Every conversion has a scalar form and a vectorized ``np_`` form taking
separate channel arrays.

Cartesian ↔ HSL:
    point_to_hsl(xyz, inverted_lightness=False)
    np_point_to_hsl(x, y, z, inverted_lightness=False)
    hsl_to_point(hsl, inverted_lightness=False)
    np_hsl_to_point(h, s, l, inverted_lightness=False)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_unit_rgb(h, s, l)

Examples
--------
>>> from poline.conversions import hsl_to_point, point_to_hsl
>>> xyz = hsl_to_point((120.0, 0.8, 0.5))
>>> point_to_hsl(xyz)  # approximately
(120.0, 0.8, 0.5)
"""

from .to_hsl import point_to_hsl, np_point_to_hsl
from .to_point import hsl_to_point, np_hsl_to_point
from .to_rgb import hue_to_rgb, hsl_to_unit_rgb, np_hsl_to_unit_rgb, scale_rgb

from ..types.format_type import FormatType

__all__ = [
    # Cartesian ↔ HSL
    'point_to_hsl',
    'np_point_to_hsl',
    'hsl_to_point',
    'np_hsl_to_point',

    # HSL → RGB
    'hue_to_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'scale_rgb',

    # Types
    'FormatType',
]
