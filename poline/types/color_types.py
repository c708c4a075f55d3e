from __future__ import annotations
from typing import Callable, Literal, Optional, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Vector3 = Tuple[float, float, float]
PartialVector3 = Sequence[Optional[float]]
Vector3Like = Union[Vector3, Sequence[float], ndarray]
ColorSpace = Literal["hsl", "rgb", "xyz"]
PositionFunction = Callable[..., Union[float, ndarray]]


def as_vector3(values: Vector3Like) -> Vector3:
    """
    Coerce a 3-element sequence or array into a tuple of Python floats.

    Args:
        values: Any sequence or 1D array with exactly three entries

    Returns:
        Tuple of three floats
    """
    arr = np.asarray(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {arr.shape}")
    return float(arr[0]), float(arr[1]), float(arr[2])
