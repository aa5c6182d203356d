# voxel_world/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the voxel
world. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC WORLD.
Instead, pass a configuration dictionary to the WorldState instance.
================================================================================
"""

# --- World Extent ---
DEFAULT_WORLD_WIDTH = 20
DEFAULT_WORLD_HEIGHT = 20

# --- Heights (in voxel layers) ---
MIN_HEIGHT = 3
MAX_HEIGHT = 8
SEA_LEVEL = 4

# --- Noise Generation ---
# Every value-noise lattice cell is LATTICE_CELL_SIZE * scale sample units wide.
# Coordinates are multiplied by a per-channel frequency before sampling, so a
# frequency of 20 gives lattice cells of 64 / 20 = 3.2 tiles. Keeping that
# ratio non-integer avoids visible tiling seams against the world edge.
LATTICE_CELL_SIZE = 64.0

# Multipliers used to fold a lattice corner (i, j) into a single hash index.
CORNER_MULTIPLIER_I = 37
CORNER_MULTIPLIER_J = 57

# The hash is a trigonometric scramble: abs(sin(n * HASH_MULTIPLIER + seed) * HASH_AMPLITUDE) % 1
HASH_MULTIPLIER = 918273
HASH_AMPLITUDE = 10000.0

# Offsets added to the world seed, making every noise channel unique but
# deterministic from the master seed.
BIOME_SEED_OFFSET = 12347
TREE_PICK_SEED_OFFSET = 98761
TREE_ACCEPT_SEED_OFFSET = 54321

# Height: two octaves, low frequency dominant.
HEIGHT_LOW_FREQUENCY = 20.0
HEIGHT_HIGH_FREQUENCY = 60.0
HEIGHT_LOW_WEIGHT = 0.85
HEIGHT_HIGH_WEIGHT = 0.15

# Biome: a coarser channel on a doubled lattice.
BIOME_FREQUENCY = 5.0
BIOME_SCALE = 2.0

# --- Biomes ---
BIOME_DESERT = 0
BIOME_FOREST = 1
BIOME_CHERRY = 2

BIOME_NAMES = {
    BIOME_DESERT: "desert",
    BIOME_FOREST: "forest",
    BIOME_CHERRY: "cherry",
}

# Upper (exclusive) bounds of the first two noise bands. Anything at or above
# the last bound falls into the final band, so the bands cover [0, 1] exactly.
BIOME_BANDS = (1.0 / 3.0, 2.0 / 3.0)

# --- Caves ---
CAVE_FREQUENCY = 18.0
# Depth is folded into both sampled coordinates to correlate caves in 3D.
CAVE_DEPTH_FOLD = 12.0
CAVE_THRESHOLD = 0.7
# Layers directly under the surface that can never be carved.
CAVE_SURFACE_MARGIN = 2
# Layers at or below the floor can never be carved.
WORLD_FLOOR = 0

# --- Soil Layering ---
# Voxels within this many layers below the top are dirt, deeper ones stone.
DIRT_DEPTH = 2

# --- Vegetation ---
TREE_CELL_SIZE = 4
# Minimum Chebyshev distance between any two trees. Must not exceed TREE_CELL_SIZE.
TREE_MIN_SPACING = 3
# Chance that an eligible cell actually grows its tree, per biome.
# Biomes missing from this table (the desert) never grow trees.
TREE_ACCEPT_PROBABILITY = {
    BIOME_FOREST: 0.75,
    BIOME_CHERRY: 0.7,
}
TRUNK_HEIGHT = 2
# Leaf positions relative to the trunk base (the first voxel above the surface).
LEAF_OFFSETS = (
    (0, 0, 2),
    (1, 0, 2),
    (-1, 0, 2),
    (0, 1, 2),
    (0, -1, 2),
    (0, 0, 3),
)

# --- Player Blocks ---
PLACED_BLOCK_TYPE = "stone"

# --- Rendering ---
# On-screen pixel half-width of one tile footprint.
TILE_SIZE = 24
LEFT_FACE_SHADE = 0.9
RIGHT_FACE_SHADE = 0.8
WATER_ALPHA = 0.75
CURSOR_ALPHA = 0.5
BACKGROUND_COLOR = (18, 20, 28)

# 'center': the world bounding box is centered vertically on the surface.
# 'margin': the top of the grid sits ORIGIN_TOP_MARGIN pixels below the top edge.
ORIGIN_MODE = 'center'
ORIGIN_TOP_MARGIN = 40

# Tallest stack above the surface: trunk base + the topmost leaf offset.
VEGETATION_STACK_HEIGHT = 1 + max(offset[2] for offset in LEAF_OFFSETS)
