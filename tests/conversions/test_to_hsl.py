import math
import numpy as np
import pytest

from poline.conversions import point_to_hsl, np_point_to_hsl, hsl_to_point, np_hsl_to_point

tolerance = 1e-9

# (x, y, z) -> (h, s, l)
samples_point_hsl = {
    (0.5, 0.5, 0.3): (0.0, 0.3, 0.0),
    (1.0, 0.5, 0.7): (0.0, 0.7, 1.0),
    (0.5, 1.0, 0.2): (90.0, 0.2, 1.0),
    (0.0, 0.5, 1.0): (180.0, 1.0, 1.0),
    (0.5, 0.0, 0.5): (270.0, 0.5, 1.0),
    (0.75, 0.5, 0.4): (0.0, 0.4, 0.5),
    (0.5, 0.25, 0.6): (270.0, 0.6, 0.5),
}


def test_point_to_hsl_samples():
    for xyz, (h_exp, s_exp, l_exp) in samples_point_hsl.items():
        h, s, l = point_to_hsl(xyz)
        assert abs(h - h_exp) < tolerance
        assert abs(s - s_exp) < tolerance
        assert abs(l - l_exp) < tolerance


def test_point_to_hsl_inverted_lightness():
    for xyz, (h_exp, s_exp, l_exp) in samples_point_hsl.items():
        h, s, l = point_to_hsl(xyz, inverted_lightness=True)
        assert abs(h - h_exp) < tolerance
        assert abs(s - s_exp) < tolerance
        assert abs(l - (1 - l_exp)) < tolerance


def test_point_to_hsl_hue_in_range():
    for angle in np.linspace(-math.pi, math.pi, 37):
        xyz = (0.5 + 0.3 * math.cos(angle), 0.5 + 0.3 * math.sin(angle), 0.5)
        h, _, _ = point_to_hsl(xyz)
        assert 0.0 <= h < 360.0


def test_point_to_hsl_clamps():
    # Saturation follows z, clamped
    assert point_to_hsl((0.5, 0.5, 1.5))[1] == 1.0
    assert point_to_hsl((0.5, 0.5, -0.2))[1] == 0.0
    # Outside the disk lightness saturates at 1
    assert point_to_hsl((2.0, 0.5, 0.0))[2] == 1.0
    assert point_to_hsl((2.0, 0.5, 0.0), inverted_lightness=True)[2] == 0.0


def test_hsl_to_point_samples():
    x, y, z = hsl_to_point((0.0, 0.4, 1.0))
    assert (x, y, z) == pytest.approx((1.0, 0.5, 0.4))

    x, y, z = hsl_to_point((90.0, 0.5, 0.5))
    assert (x, y, z) == pytest.approx((0.5, 0.75, 0.5))

    x, y, z = hsl_to_point((180.0, 0.0, 0.5))
    assert (x, y, z) == pytest.approx((0.25, 0.5, 0.0))


def test_hsl_to_point_inverted_lightness():
    # Full lightness sits at the center when inverted
    assert hsl_to_point((0.0, 0.4, 1.0), inverted_lightness=True) == pytest.approx((0.5, 0.5, 0.4))
    assert hsl_to_point((0.0, 0.4, 0.0), inverted_lightness=True) == pytest.approx((1.0, 0.5, 0.4))


def test_np_point_to_hsl_matches_scalar():
    the_matrix = np.array(list(samples_point_hsl.keys()))
    for inverted in (False, True):
        hsl = np_point_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2], inverted)
        assert hsl.shape == the_matrix.shape
        expected = np.array([point_to_hsl(p, inverted) for p in the_matrix])
        assert np.allclose(hsl, expected, atol=tolerance)


def test_np_hsl_to_point_matches_scalar():
    h = np.array([0.0, 45.0, 90.0, 200.0, 359.0])
    s = np.array([0.0, 0.25, 0.5, 0.75, 1.0])
    l = np.array([0.1, 0.3, 0.5, 0.7, 0.9])
    for inverted in (False, True):
        xyz = np_hsl_to_point(h, s, l, inverted)
        expected = np.array([hsl_to_point(c, inverted) for c in zip(h, s, l)])
        assert xyz.shape == (5, 3)
        assert np.allclose(xyz, expected, atol=tolerance)


def test_np_conversions_broadcast_scalars():
    xyz = np_hsl_to_point(np.array([0.0, 90.0]), 0.5, 1.0)
    assert xyz.shape == (2, 3)
    assert np.allclose(xyz[:, 2], 0.5)
