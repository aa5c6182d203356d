# voxel_world/world.py

"""
================================================================================
WORLD STATE
================================================================================
This module contains the WorldState aggregate: the seed, the world extent and
settings, the terrain field, the player's block overlay and the cursor. It is
constructed once and passed explicitly into generation, rendering and input
handling; nothing here is a module-level global.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): Overrides for the internal defaults. The 'seed' key may
      be omitted, in which case a random unsigned 32-bit seed is drawn.
    - logger: A configured Python logging object for runtime messages.
- Side Effects: Logs messages using the provided logger. `move_cursor` and
  `commit` mutate the cursor and the overlay respectively.
- Invariants: The seed never changes for the lifetime of the instance.
================================================================================
"""

import logging
from dataclasses import dataclass

import numpy as np

from .overlay import BlockOverlay, VoxelKey
from .settings import build_settings
from .terrain import TerrainField

SEED_LIMIT = 2 ** 32

def random_seed() -> int:
    """Draws a fresh unsigned 32-bit world seed."""
    return int(np.random.default_rng().integers(0, SEED_LIMIT, dtype=np.uint64))

@dataclass
class Cursor:
    ix: int
    iy: int

class WorldState:
    """The single owner of all mutable world state."""

    def __init__(self, config: dict, logger: logging.Logger):
        self.logger = logger
        self.settings = build_settings(config)

        seed = config.get('seed')
        if seed is None:
            seed = random_seed()
        if not 0 <= seed < SEED_LIMIT:
            raise ValueError(f"Seed must be an unsigned 32-bit integer, got {seed}.")

        self.seed = int(seed)
        self.width = self.settings['world_width']
        self.height = self.settings['world_height']
        self.terrain = TerrainField(self.seed, self.settings)
        self.overlay = BlockOverlay()
        self.cursor = Cursor(self.width // 2, self.height // 2)

        self.logger.info(f"World seed: {self.seed}")
        self.logger.info(
            f"World dimensions: {self.width}x{self.height} columns, "
            f"heights {self.settings['min_height']}-{self.settings['max_height']}, "
            f"sea level {self.settings['sea_level']}"
        )

    def move_cursor(self, ix: int, iy: int):
        """Moves the cursor, clamping it into the world."""
        self.cursor.ix = max(0, min(self.width - 1, ix))
        self.cursor.iy = max(0, min(self.height - 1, iy))

    def cursor_preview_z(self) -> int:
        return self.terrain.height_at(self.cursor.ix, self.cursor.iy) + 1

    def commit(self) -> bool:
        """
        Places a block on top of the column under the cursor.

        The surface height is evaluated now, not when the cursor was picked.
        Committing on an occupied key does nothing. Returns True if a block
        was placed.
        """
        key = VoxelKey(self.cursor.ix, self.cursor.iy, self.cursor_preview_z())
        placed = self.overlay.place(key, self.settings['placed_block_type'])
        if placed:
            self.logger.debug(f"Placed {self.settings['placed_block_type']} at {tuple(key)}.")
        else:
            self.logger.debug(f"Block at {tuple(key)} already exists, nothing placed.")
        return placed
