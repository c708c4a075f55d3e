"""
Interpolation of Cartesian points between two anchors.

Each axis is eased independently by its own position function before the
linear blend, which is what bends a palette segment into a curve.

Catalog position functions are applied to the whole parameter array at once.
Any other callable is treated as a scalar map and called once per ``t``, and
may omit the ``reverse`` argument.
"""
from __future__ import annotations
from typing import Optional
import inspect
import numpy as np
from numpy import ndarray

from .types.color_types import PositionFunction, Vector3Like
from .positions import POSITION_FUNCTIONS, linear_position


def _takes_reverse(fn: PositionFunction) -> bool:
    try:
        inspect.signature(fn).bind(0.0, False)
    except TypeError:
        return False
    except ValueError:
        # No introspectable signature, e.g. a C builtin such as math.sqrt
        return False
    return True


def _is_catalog_function(fn: PositionFunction) -> bool:
    return any(fn is catalog_fn for catalog_fn in POSITION_FUNCTIONS.values())


def _eased(fn: Optional[PositionFunction], t: ndarray, reverse: bool):
    if fn is None:
        return 1 - t if reverse else t
    if _is_catalog_function(fn):
        return fn(t, reverse)
    if _takes_reverse(fn):
        eased = [float(fn(float(v), reverse)) for v in t.ravel()]
    else:
        eased = [float(fn(float(v))) for v in t.ravel()]
    return np.asarray(eased, dtype=float).reshape(t.shape)


def vector_on_line(
    t,
    p1: Vector3Like,
    p2: Vector3Like,
    reverse: bool = False,
    fx: Optional[PositionFunction] = linear_position,
    fy: Optional[PositionFunction] = linear_position,
    fz: Optional[PositionFunction] = linear_position,
) -> ndarray:
    """
    Point(s) at parameter ``t`` on the eased line from ``p1`` to ``p2``.

    Args:
        t: Parameter in [0, 1], scalar or 1D array
        p1: Start point (x, y, z)
        p2: End point (x, y, z)
        reverse: Pass ``reverse=True`` to the position functions
        fx, fy, fz: Per-axis position functions, ``(t, reverse)`` or ``(t)``.
            ``None`` means plain linear (mirrored to ``1 - t`` when reversed)

    Returns:
        ndarray of shape (3,) for scalar ``t`` or (len(t), 3) for an array
    """
    p1 = np.asarray(p1, dtype=float)
    p2 = np.asarray(p2, dtype=float)
    t = np.asarray(t, dtype=float)

    tx = _eased(fx, t, reverse)
    ty = _eased(fy, t, reverse)
    tz = _eased(fz, t, reverse)

    x = (1 - tx) * p1[0] + tx * p2[0]
    y = (1 - ty) * p1[1] + ty * p2[1]
    z = (1 - tz) * p1[2] + tz * p2[2]

    return np.stack(np.broadcast_arrays(x, y, z), axis=-1)


def vectors_on_line(
    p1: Vector3Like,
    p2: Vector3Like,
    num_points: int = 4,
    reverse: bool = False,
    fx: Optional[PositionFunction] = linear_position,
    fy: Optional[PositionFunction] = linear_position,
    fz: Optional[PositionFunction] = linear_position,
) -> ndarray:
    """
    ``num_points`` evenly parametrized points from ``p1`` to ``p2``, endpoints included.

    Returns:
        ndarray of shape (num_points, 3)
    """
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    t = np.arange(num_points, dtype=float) / (num_points - 1)
    return vector_on_line(t, p1, p2, reverse, fx, fy, fz)
