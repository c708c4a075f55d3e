import itertools
import numpy as np
import pytest

from poline.conversions import point_to_hsl, hsl_to_point, np_point_to_hsl, np_hsl_to_point

hsl_tolerance = 1e-9

hues = [float(h) for h in range(0, 360, 15)] + [359.5]
saturations = [0.0, 0.25, 0.5, 1.0]
# Lightness 0 (or 1 when inverted) collapses onto the center, where hue is undefined
lightnesses = [0.1, 0.5, 0.9, 1.0]


def hue_difference(a: float, b: float) -> float:
    d = abs(a - b) % 360
    return min(d, 360 - d)


@pytest.mark.parametrize("inverted", [False, True])
def test_round_trip_hsl_point(inverted):
    for h, s, l in itertools.product(hues, saturations, lightnesses):
        if inverted and l == 1.0:
            continue
        h_out, s_out, l_out = point_to_hsl(hsl_to_point((h, s, l), inverted), inverted)

        assert hue_difference(h, h_out) < hsl_tolerance
        assert abs(s - s_out) < hsl_tolerance
        assert abs(l - l_out) < hsl_tolerance


def test_round_trip_hue_modulo_360():
    h_out, _, _ = point_to_hsl(hsl_to_point((400.0, 0.5, 0.5)))
    assert hue_difference(40.0, h_out) < hsl_tolerance

    h_out, _, _ = point_to_hsl(hsl_to_point((-30.0, 0.5, 0.5)))
    assert hue_difference(330.0, h_out) < hsl_tolerance


def test_round_trip_point_hsl_numpy():
    grid = np.array(list(itertools.product(hues, saturations, [0.2, 0.6, 0.95])))
    h, s, l = grid[..., 0], grid[..., 1], grid[..., 2]
    xyz = np_hsl_to_point(h, s, l)
    hsl = np_point_to_hsl(xyz[..., 0], xyz[..., 1], xyz[..., 2])
    h_out, s_out, l_out = hsl[..., 0], hsl[..., 1], hsl[..., 2]

    dh = np.abs(h - h_out) % 360
    assert np.all(np.minimum(dh, 360 - dh) < hsl_tolerance)
    assert np.allclose(s, s_out, atol=hsl_tolerance)
    assert np.allclose(l, l_out, atol=hsl_tolerance)
