import numpy as np
import pytest

from voxel_world.noise import hash_scalar, value_noise, value_noise_2d


@pytest.mark.parametrize("seed", [0, 42, 2 ** 32 - 1])
def test_hash_is_in_unit_interval(seed):
    values = [hash_scalar(n, seed) for n in range(-500, 500)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_hash_is_deterministic_and_seeded():
    assert hash_scalar(17, 42) == hash_scalar(17, 42)
    assert hash_scalar(17, 42) != hash_scalar(17, 43)


def test_lattice_points_return_corner_hash():
    seed = 42
    # Exact multiples of the cell size have a zero fraction on both axes.
    assert value_noise(0, 0, 1.0, seed) == hash_scalar(0, seed)
    assert value_noise(64, 0, 1.0, seed) == hash_scalar(37, seed)
    assert value_noise(0, 128, 1.0, seed) == hash_scalar(2 * 57, seed)
    assert value_noise(128, 128, 2.0, seed) == hash_scalar(37 + 57, seed)


def test_midpoint_interpolates_between_corners():
    seed = 7
    a = hash_scalar(0, seed)
    b = hash_scalar(37, seed)
    assert value_noise(32, 0, 1.0, seed) == pytest.approx((a + b) / 2)


def test_value_noise_range_and_determinism():
    seed = 1234
    for x in range(0, 400, 7):
        for y in range(0, 400, 11):
            v = value_noise(x * 1.5, y * 1.5, 1.0, seed)
            assert 0.0 <= v < 1.0
            assert v == value_noise(x * 1.5, y * 1.5, 1.0, seed)


def test_array_sampler_matches_scalar_sampler():
    seed = 99
    xs, ys = np.meshgrid(np.arange(12, dtype=np.float64) * 20.0,
                         np.arange(9, dtype=np.float64) * 20.0, indexing='ij')
    grid = value_noise_2d(xs, ys, 1.0, seed)
    assert grid.shape == (12, 9)
    for i in range(12):
        for j in range(9):
            assert grid[i, j] == value_noise(i * 20.0, j * 20.0, 1.0, seed)
