"""
Position functions.

Easing curves that remap a linear interpolation parameter ``t`` in [0, 1]
onto [0, 1]. Each takes ``(t, reverse=False)`` and works on floats as well as
numpy arrays. ``reverse`` mirrors the curve so that consecutive palette
segments can ease in opposite directions.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, Union
import math
import re
import numpy as np
from numpy import ndarray

from .types.color_types import PositionFunction

Param = Union[float, ndarray]

HALF_PI = math.pi / 2


def linear_position(t: Param, reverse: bool = False) -> Param:
    """Identity curve. ``reverse`` has no effect since the line is its own mirror."""
    return t


def exponential_position(t: Param, reverse: bool = False) -> Param:
    if reverse:
        return 1 - (1 - t) ** 2
    return t ** 2


def quadratic_position(t: Param, reverse: bool = False) -> Param:
    if reverse:
        return 1 - (1 - t) ** 3
    return t ** 3


def cubic_position(t: Param, reverse: bool = False) -> Param:
    if reverse:
        return 1 - (1 - t) ** 4
    return t ** 4


def quartic_position(t: Param, reverse: bool = False) -> Param:
    if reverse:
        return 1 - (1 - t) ** 5
    return t ** 5


def sinusoidal_position(t: Param, reverse: bool = False) -> Param:
    if reverse:
        return 1 - np.sin((1 - t) * HALF_PI)
    return np.sin(t * HALF_PI)


def asinusoidal_position(t: Param, reverse: bool = False) -> Param:
    if reverse:
        return 1 - np.arcsin(1 - t) / HALF_PI
    return np.arcsin(t) / HALF_PI


def arc_position(t: Param, reverse: bool = False) -> Param:
    if reverse:
        return np.sqrt(1 - (1 - t) ** 2)
    return 1 - np.sqrt(1 - t)


def smooth_step_position(t: Param, reverse: bool = False) -> Param:
    """Hermite smoothstep. Symmetric, so ``reverse`` is accepted and ignored."""
    return t ** 2 * (3 - 2 * t)


class PositionFunctionName(str, Enum):
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    QUARTIC = "quartic"
    SINUSOIDAL = "sinusoidal"
    ASINUSOIDAL = "asinusoidal"
    ARC = "arc"
    SMOOTH_STEP = "smooth_step"


POSITION_FUNCTIONS: Dict[PositionFunctionName, PositionFunction] = {
    PositionFunctionName.LINEAR: linear_position,
    PositionFunctionName.EXPONENTIAL: exponential_position,
    PositionFunctionName.QUADRATIC: quadratic_position,
    PositionFunctionName.CUBIC: cubic_position,
    PositionFunctionName.QUARTIC: quartic_position,
    PositionFunctionName.SINUSOIDAL: sinusoidal_position,
    PositionFunctionName.ASINUSOIDAL: asinusoidal_position,
    PositionFunctionName.ARC: arc_position,
    PositionFunctionName.SMOOTH_STEP: smooth_step_position,
}

DEFAULT_POSITION_FUNCTION: PositionFunction = sinusoidal_position


def _normalize_name(name: str) -> str:
    # "smooth_step", "smoothStep" and "smoothStepPosition" all map to "smooth_step"
    key = re.sub(r"(?<!^)(?=[A-Z])", "_", name.strip()).lower().replace("-", "_")
    key = re.sub(r"_+", "_", key)
    if key.endswith("_position"):
        key = key[: -len("_position")]
    return key


def get_position_function(
    position_function: Union[PositionFunction, PositionFunctionName, str],
) -> PositionFunction:
    """
    Resolve a position function from a callable, an enum member or a catalog name.

    Args:
        position_function: A callable ``(t, reverse) -> t'`` or ``(t) -> t'``, a ``PositionFunctionName``
            or its string value (camelCase and ``*Position`` spellings are accepted)

    Returns:
        The matching callable

    Raises:
        ValueError: If a name does not match any catalog entry
    """
    if isinstance(position_function, PositionFunctionName):
        return POSITION_FUNCTIONS[position_function]
    if isinstance(position_function, str):
        try:
            return POSITION_FUNCTIONS[PositionFunctionName(_normalize_name(position_function))]
        except ValueError:
            raise ValueError(f"Invalid position function: {position_function}") from None
    if callable(position_function):
        return position_function
    raise ValueError(f"Invalid position function: {position_function!r}")


def position_function_name(position_function: PositionFunction) -> str | None:
    """Return the catalog name of a position function, or None for custom callables."""
    for name, fn in POSITION_FUNCTIONS.items():
        if fn is position_function:
            return name.value
    return None
