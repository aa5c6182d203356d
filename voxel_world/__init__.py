# voxel_world/__init__.py

# Public API of the voxel world core. Nothing imported here depends on Pygame;
# the Pygame adapter lives in voxel_world.runtime.

from .world import WorldState, Cursor
from .terrain import TerrainField, TerrainSample, height_at, biome_at, is_cave
from .overlay import BlockOverlay, VoxelKey
from .projection import IsoProjection
from .renderer import IsoRenderer, DrawingSurface

__all__ = [
    "WorldState", "Cursor",
    "TerrainField", "TerrainSample", "height_at", "biome_at", "is_cave",
    "BlockOverlay", "VoxelKey",
    "IsoProjection",
    "IsoRenderer", "DrawingSurface",
]
