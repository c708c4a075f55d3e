"""Poline: palettes interpolated between anchor colors on an HSL-derived disk."""
import logging

from .color_point import ColorPoint
from .poline import Poline
from .conversions import (
    point_to_hsl,
    hsl_to_point,
    np_point_to_hsl,
    np_hsl_to_point,
    hue_to_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    scale_rgb,
)
from .positions import (
    linear_position,
    exponential_position,
    quadratic_position,
    cubic_position,
    quartic_position,
    sinusoidal_position,
    asinusoidal_position,
    arc_position,
    smooth_step_position,
    PositionFunctionName,
    POSITION_FUNCTIONS,
    get_position_function,
    position_function_name,
)
from .distance import distance
from .interpolation import vector_on_line, vectors_on_line
from .random_colors import random_hsl_pair, random_hsl_triple
from .types.format_type import FormatType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # engine
    "Poline",
    "ColorPoint",
    # conversions
    "point_to_hsl",
    "hsl_to_point",
    "np_point_to_hsl",
    "np_hsl_to_point",
    "hue_to_rgb",
    "hsl_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "scale_rgb",
    "FormatType",
    # position functions
    "linear_position",
    "exponential_position",
    "quadratic_position",
    "cubic_position",
    "quartic_position",
    "sinusoidal_position",
    "asinusoidal_position",
    "arc_position",
    "smooth_step_position",
    "PositionFunctionName",
    "POSITION_FUNCTIONS",
    "get_position_function",
    "position_function_name",
    # geometry
    "distance",
    "vector_on_line",
    "vectors_on_line",
    # seeds
    "random_hsl_pair",
    "random_hsl_triple",
    "__version__",
]
