import numpy as np
import pytest
from opensimplex import OpenSimplex

from smartcity.utils.noise import NoiseField


def _grid(step=0.37, count=40):
    return [(i * step, j * step * 1.3) for i in range(count) for j in range(count)]


def test_values_in_range():
    noise = NoiseField(12345)
    values = [noise.sample(x, y) for x, y in _grid()]
    assert all(-1.0 <= v <= 1.0 for v in values)
    # The field is not flat.
    assert max(values) - min(values) > 0.5


def test_same_seed_is_deterministic():
    a = NoiseField(8)
    b = NoiseField(8)
    assert [a.sample(x, y) for x, y in _grid()] == [b.sample(x, y) for x, y in _grid()]


def test_different_seeds_differ():
    a = NoiseField(1)
    b = NoiseField(2)
    assert [a.sample(x, y) for x, y in _grid()] != [b.sample(x, y) for x, y in _grid()]


def test_sample_uses_opensimplex_with_the_seed():
    noise = NoiseField(77)
    reference = OpenSimplex(seed=77)
    for x, y in _grid(step=0.53, count=8):
        assert noise.sample(x, y) == max(-1.0, min(1.0, reference.noise2(x, y)))


def test_nearby_points_are_close():
    noise = NoiseField(4)
    for x, y in _grid(step=0.71, count=15):
        assert abs(noise.sample(x, y) - noise.sample(x + 1e-3, y)) < 0.05
        assert abs(noise.sample(x, y) - noise.sample(x, y + 1e-3)) < 0.05


def test_sampling_has_no_hidden_state():
    noise = NoiseField(21)
    first = noise.sample(0.4, 1.2)
    for x, y in _grid(count=10):
        noise.sample(x, y)
    assert noise.sample(0.4, 1.2) == first
    assert noise(0.4, 1.2) == first


def test_negative_coordinates():
    noise = NoiseField(21)
    assert -1.0 <= noise.sample(-3.7, -12.2) <= 1.0


def test_sample_grid_matches_point_samples():
    noise = NoiseField(6)
    xs = np.array([0.0, 0.4, 1.6])
    ys = np.array([0.0, 0.8])
    grid = noise.sample_grid(xs, ys)
    assert grid.shape == (2, 3)
    for row, y in enumerate(ys):
        for col, x in enumerate(xs):
            assert grid[row, col] == pytest.approx(noise.sample(x, y), abs=1e-9)
    assert np.all(np.abs(grid) <= 1.0)
