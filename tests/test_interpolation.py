import math
import numpy as np
import pytest

from poline.interpolation import vector_on_line, vectors_on_line
from poline.positions import linear_position, exponential_position, sinusoidal_position

p1 = (0.0, 0.0, 0.0)
p2 = (1.0, 0.5, 0.25)


def test_linear_points():
    points = vectors_on_line(p1, p2, 5)
    assert points.shape == (5, 3)
    assert np.allclose(points[0], p1)
    assert np.allclose(points[-1], p2)
    assert np.allclose(points[2], (0.5, 0.25, 0.125))


def test_per_axis_functions():
    point = vector_on_line(0.5, p1, p2, False, linear_position, exponential_position, exponential_position)
    assert point.shape == (3,)
    assert np.allclose(point, (0.5, 0.125, 0.0625))

    point = vector_on_line(0.5, p1, p2, True, linear_position, exponential_position, exponential_position)
    assert np.allclose(point, (0.5, 0.375, 0.1875))


def test_reverse_keeps_endpoints():
    points = vectors_on_line(p1, p2, 4, True, exponential_position, exponential_position, exponential_position)
    assert np.allclose(points[0], p1)
    assert np.allclose(points[-1], p2)


def test_missing_function_falls_back_to_mirrored_linear():
    points = vectors_on_line(p1, p2, 3, True, None, None, None)
    assert np.allclose(points[0], p2)
    assert np.allclose(points[-1], p1)


def test_requires_two_points():
    with pytest.raises(ValueError):
        vectors_on_line(p1, p2, 1)


def test_scalar_math_easing():
    def eased(t, reverse=False):
        return math.sin(t * math.pi / 2)

    custom = vectors_on_line(p1, p2, 5, False, eased, eased, eased)
    catalog = vectors_on_line(p1, p2, 5, False, sinusoidal_position, sinusoidal_position, sinusoidal_position)
    assert np.allclose(custom, catalog)

    point = vector_on_line(0.5, p1, p2, False, eased, eased, eased)
    assert point.shape == (3,)
    assert np.allclose(point, catalog[2])


def test_branching_easing():
    def step(t, reverse=False):
        return 0.0 if t < 0.5 else 1.0

    points = vectors_on_line(p1, p2, 4, False, step, step, step)
    assert np.allclose(points, [p1, p1, p2, p2])


def test_easing_without_reverse_argument():
    points = vectors_on_line(p1, p2, 3, True, lambda t: t * t, linear_position, None)
    assert np.allclose(points[1], (0.25, 0.25, 0.125))


def test_reverse_passed_to_custom_easing():
    seen = []

    def eased(t, reverse):
        seen.append(reverse)
        return t

    vectors_on_line(p1, p2, 3, True, eased, eased, eased)
    assert seen == [True] * 9
