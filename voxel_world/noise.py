# voxel_world/noise.py

"""
================================================================================
NOISE GENERATION UTILITIES
================================================================================
This module provides a seeded scalar hash and a bilinear value-noise sampler.
It is designed to be a pure, stateless utility: identical inputs always
reproduce identical output, which lets the terrain be recomputed from scratch
every frame without a cache.

Data Contract:
---------------
- Inputs:
    - n: An integer lattice index.
    - x, y: Sample coordinates (scalars, or NumPy arrays for the 2D variant).
    - scale: Lattice cell size as a multiple of LATTICE_CELL_SIZE.
    - seed: The (possibly channel-offset) world seed.
- Outputs:
    - Noise values in the range [0, 1).
- Side Effects: None.
- Invariants: The scalar and array samplers agree element-wise. Coordinates
  that are exact multiples of the cell size interpolate with a zero fraction.
================================================================================
"""

import math

import numpy as np
from numba import njit

from .config import (
    CORNER_MULTIPLIER_I,
    CORNER_MULTIPLIER_J,
    HASH_AMPLITUDE,
    HASH_MULTIPLIER,
    LATTICE_CELL_SIZE,
)

@njit
def _lerp(a, b, t):
    "Linear interpolation."
    return a + (b - a) * t

@njit
def hash_scalar(n, seed):
    """
    Deterministic pseudo-random value in [0, 1) for an integer index.
    Reproducibility is the goal here, not unpredictability.
    """
    return abs(math.sin(float(n * HASH_MULTIPLIER + seed)) * HASH_AMPLITUDE) % 1.0

@njit
def _corner_index(i, j):
    return i * CORNER_MULTIPLIER_I + j * CORNER_MULTIPLIER_J

@njit
def value_noise(x, y, scale, seed):
    """
    Samples 2D value noise at (x, y).

    The four lattice corners surrounding the point are hashed and blended
    bilinearly using the fractional offset within the cell.
    """
    cell = LATTICE_CELL_SIZE * scale
    i = int(np.floor(x / cell))
    j = int(np.floor(y / cell))
    fx = (x - i * cell) / cell
    fy = (y - j * cell) / cell

    a = hash_scalar(_corner_index(i, j), seed)
    b = hash_scalar(_corner_index(i + 1, j), seed)
    c = hash_scalar(_corner_index(i, j + 1), seed)
    d = hash_scalar(_corner_index(i + 1, j + 1), seed)

    return _lerp(_lerp(a, b, fx), _lerp(c, d, fx), fy)

@njit
def value_noise_2d(xs, ys, scale, seed):
    """
    Array form of value_noise. xs and ys must be 2D float arrays of the same
    shape; the output has that shape.
    """
    rows, cols = xs.shape
    out = np.zeros((rows, cols))
    for r in range(rows):
        for c in range(cols):
            out[r, c] = value_noise(xs[r, c], ys[r, c], scale, seed)
    return out
