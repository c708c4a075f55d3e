import numpy as np
import pytest

from poline.random_colors import random_hsl_pair, random_hsl_triple


def hue_offset(a: float, b: float) -> float:
    return (b - a) % 360


def test_random_pair_ranges():
    rng = np.random.default_rng(7)
    for _ in range(50):
        first, second = random_hsl_pair(rng=rng)
        assert 0 <= first[0] < 360
        assert 60 - 1e-9 <= hue_offset(first[0], second[0]) <= 240 + 1e-9
        assert 0 <= first[1] <= 1
        assert 0 <= second[1] <= 0.5
        assert 0.75 <= first[2] <= 0.95
        assert 0.3 <= second[2] <= 0.5


def test_random_triple_ranges():
    rng = np.random.default_rng(11)
    for _ in range(50):
        first, second, third = random_hsl_triple(rng=rng)
        assert 60 - 1e-9 <= hue_offset(first[0], second[0]) <= 240 + 1e-9
        assert 60 - 1e-9 <= hue_offset(first[0], third[0]) <= 240 + 1e-9
        assert 0 <= second[1] <= 0.5
        assert 0 <= third[1] <= 0.75
        assert 0.6 <= first[2] <= 0.8
        assert 0.1 <= second[2] <= 0.4
        assert 0.6 <= third[2] <= 0.8


def test_explicit_arguments_are_used():
    pair = random_hsl_pair(start_hue=100, saturations=(0.9, 0.1), lightnesses=(0.8, 0.4))
    assert pair[0] == (100.0, 0.9, 0.8)
    assert pair[1][1:] == (0.1, 0.4)


def test_reproducible_with_seed():
    a = random_hsl_triple(rng=np.random.default_rng(3))
    b = random_hsl_triple(rng=np.random.default_rng(3))
    assert a == b


def test_wrong_lengths_rejected():
    with pytest.raises(ValueError):
        random_hsl_pair(saturations=(0.5,))
    with pytest.raises(ValueError):
        random_hsl_triple(lightnesses=(0.5, 0.5))
