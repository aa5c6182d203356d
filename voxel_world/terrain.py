# voxel_world/terrain.py

"""
================================================================================
TERRAIN FIELD
================================================================================
This module derives the voxel terrain from the noise field: a per-column
height, a per-column biome and a 3D cave mask.

Every field is exposed twice:
    - as a free function of explicit (seed, coordinates, settings), and
    - as a dense NumPy array inside a `TerrainSample`, which the renderer
      builds once per frame instead of re-evaluating noise per voxel.
Both forms are computed with the same arithmetic and agree exactly.

Data Contract:
---------------
- Inputs:
    - seed (int): The world seed.
    - x, y (int): A column inside [0, world_width) x [0, world_height).
    - z (int): A layer inside [0, height_at(x, y)].
    - settings (dict): As produced by `settings.build_settings`.
- Outputs:
    - height_at: int in [min_height, max_height].
    - biome_at: one of BIOME_DESERT, BIOME_FOREST, BIOME_CHERRY.
    - is_cave: bool, never True at or above height - cave_surface_margin.
- Side Effects: None.
- Invariants: Given the same seed and settings, output is deterministic.
  Out-of-bounds columns are a caller error and are not reported.
================================================================================
"""

import math
from dataclasses import dataclass

import numpy as np

from .config import BIOME_BANDS, BIOME_CHERRY, BIOME_DESERT, BIOME_FOREST
from . import noise
from .settings import build_settings

# The voxel type of a column's top layer, per biome.
SURFACE_VOXEL_BY_BIOME = {
    BIOME_DESERT: "sand",
    BIOME_FOREST: "grass",
    BIOME_CHERRY: "cherry_grass",
}

def _blend_height(low: float, high: float, settings: dict) -> float:
    return low * settings['height_low_weight'] + high * settings['height_high_weight']

def height_at(seed: int, x: int, y: int, settings: dict) -> int:
    """Returns the topmost solid layer of column (x, y)."""
    low = noise.value_noise(x * settings['height_low_frequency'], y * settings['height_low_frequency'], 1.0, seed)
    high = noise.value_noise(x * settings['height_high_frequency'], y * settings['height_high_frequency'], 1.0, seed)
    blended = _blend_height(low, high, settings)

    min_height = settings['min_height']
    max_height = settings['max_height']
    height = math.floor(min_height + blended * (max_height - min_height))
    return max(min_height, min(max_height, height))

def classify_biome(value: float) -> int:
    """Buckets a noise value in [0, 1] into one of the three biome bands."""
    if value < BIOME_BANDS[0]:
        return BIOME_DESERT
    if value < BIOME_BANDS[1]:
        return BIOME_FOREST
    return BIOME_CHERRY

def biome_at(seed: int, x: int, y: int, settings: dict) -> int:
    """Returns the biome ID of column (x, y)."""
    frequency = settings['biome_frequency']
    value = noise.value_noise(
        x * frequency, y * frequency, settings['biome_scale'], seed + settings['biome_seed_offset']
    )
    return classify_biome(value)

def _cave_sample(seed: int, x, y, z: int, settings: dict):
    fold = z * settings['cave_depth_fold']
    frequency = settings['cave_frequency']
    return x * frequency + fold, y * frequency + fold

def is_cave(seed: int, x: int, y: int, z: int, settings: dict) -> bool:
    """True if voxel (x, y, z) is carved out by a cave."""
    if z >= height_at(seed, x, y, settings) - settings['cave_surface_margin']:
        return False
    if z <= settings['world_floor']:
        return False
    sample_x, sample_y = _cave_sample(seed, x, y, z, settings)
    return noise.value_noise(sample_x, sample_y, 1.0, seed) > settings['cave_threshold']

def column_voxel_type(z: int, height: int, biome: int, settings: dict) -> str:
    """The voxel type of layer z in a column of the given height and biome."""
    if z == height:
        return SURFACE_VOXEL_BY_BIOME[biome]
    if z >= height - settings['dirt_depth']:
        return "dirt"
    return "stone"

@dataclass
class TerrainSample:
    """
    Dense terrain arrays for one frame. All arrays are indexed [x, y] (and
    [x, y, z] for caves).
    """
    heights: np.ndarray
    biomes: np.ndarray
    caves: np.ndarray

    @property
    def width(self) -> int:
        return self.heights.shape[0]

    @property
    def height(self) -> int:
        return self.heights.shape[1]

    def height_at(self, x: int, y: int) -> int:
        return int(self.heights[x, y])

    def biome_at(self, x: int, y: int) -> int:
        return int(self.biomes[x, y])

    def is_cave(self, x: int, y: int, z: int) -> bool:
        if z >= self.caves.shape[2]:
            return False
        return bool(self.caves[x, y, z])

class TerrainField:
    """
    Binds a seed and settings to the terrain functions. Holds no cached
    terrain: `sample()` recomputes everything on each call.
    """
    def __init__(self, seed: int, settings: dict = None):
        self.seed = seed
        self.settings = settings if settings is not None else build_settings()

    def height_at(self, x: int, y: int) -> int:
        return height_at(self.seed, x, y, self.settings)

    def biome_at(self, x: int, y: int) -> int:
        return biome_at(self.seed, x, y, self.settings)

    def is_cave(self, x: int, y: int, z: int) -> bool:
        return is_cave(self.seed, x, y, z, self.settings)

    def voxel_type(self, x: int, y: int, z: int) -> str:
        return column_voxel_type(z, self.height_at(x, y), self.biome_at(x, y), self.settings)

    def sample(self, width: int = None, height: int = None) -> TerrainSample:
        """
        Evaluates heights, biomes and caves for the whole world as arrays.

        Args:
            width (int, optional): Columns along x. Defaults to the world width.
            height (int, optional): Columns along y. Defaults to the world height.
        """
        s = self.settings
        width = s['world_width'] if width is None else width
        height = s['world_height'] if height is None else height

        xs, ys = np.meshgrid(
            np.arange(width, dtype=np.float64),
            np.arange(height, dtype=np.float64),
            indexing='ij',
        )

        # --- 1. Heights ---
        low = noise.value_noise_2d(xs * s['height_low_frequency'], ys * s['height_low_frequency'], 1.0, self.seed)
        high = noise.value_noise_2d(xs * s['height_high_frequency'], ys * s['height_high_frequency'], 1.0, self.seed)
        blended = _blend_height(low, high, s)
        heights = np.floor(s['min_height'] + blended * (s['max_height'] - s['min_height'])).astype(np.int64)
        heights = np.clip(heights, s['min_height'], s['max_height'])

        # --- 2. Biomes ---
        biome_noise = noise.value_noise_2d(
            xs * s['biome_frequency'], ys * s['biome_frequency'],
            s['biome_scale'], self.seed + s['biome_seed_offset'],
        )
        biomes = np.select(
            [biome_noise < BIOME_BANDS[0], biome_noise < BIOME_BANDS[1]],
            [BIOME_DESERT, BIOME_FOREST],
            default=BIOME_CHERRY,
        ).astype(np.int64)

        # --- 3. Caves ---
        caves = np.zeros((width, height, s['max_height'] + 1), dtype=bool)
        for z in range(s['world_floor'] + 1, s['max_height'] + 1):
            carvable = z < heights - s['cave_surface_margin']
            if not carvable.any():
                continue
            sample_x, sample_y = _cave_sample(self.seed, xs, ys, z, s)
            cave_noise = noise.value_noise_2d(sample_x, sample_y, 1.0, self.seed)
            caves[:, :, z] = carvable & (cave_noise > s['cave_threshold'])

        return TerrainSample(heights=heights, biomes=biomes, caves=caves)
