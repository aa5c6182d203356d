# voxel_world/vegetation.py

"""
================================================================================
VEGETATION PLACEMENT
================================================================================
Decides, per column, whether a tree grows there, using cell-based
declustering:

    1. The grid is partitioned into square cells of `tree_cell_size` tiles.
    2. Each cell nominates exactly one candidate column from a hash keyed on
       the cell index. Candidates are restricted to the first
       `tree_cell_size - tree_min_spacing + 1` offsets on each axis, so two
       candidates from different cells are always at least
       `tree_min_spacing` apart (Chebyshev distance).
    3. A candidate becomes a tree only above sea level, outside the desert,
       and when a second, independent hash falls below the biome's
       acceptance probability.

Data Contract:
---------------
- Inputs:
    - field (TerrainField): Supplies seed, settings and terrain queries.
- Outputs:
    - Tree records and the voxels they occupy.
- Side Effects: None.
================================================================================
"""

from dataclasses import dataclass

from .config import BIOME_CHERRY, BIOME_DESERT, LEAF_OFFSETS, TRUNK_HEIGHT
from .noise import hash_scalar
from .terrain import TerrainField

# Cell index encodings for the two vegetation hash channels.
_PICK_MULTIPLIERS = (999, 333)
_ACCEPT_MULTIPLIERS = (571, 773)

@dataclass(frozen=True)
class Tree:
    x: int
    y: int
    base_z: int
    leaf_type: str

def _candidate_for_cell(field: TerrainField, cx: int, cy: int) -> tuple[int, int]:
    """Returns the single column cell (cx, cy) nominates for a tree."""
    s = field.settings
    cell = s['tree_cell_size']
    span = cell - s['tree_min_spacing'] + 1

    pick = hash_scalar(
        cx * _PICK_MULTIPLIERS[0] + cy * _PICK_MULTIPLIERS[1],
        field.seed + s['tree_pick_seed_offset'],
    )
    slot = int(pick * span * span)
    return cx * cell + slot % span, cy * cell + slot // span

def _grow(field: TerrainField, x: int, y: int) -> Tree | None:
    """Applies the water, biome and acceptance gates to a nominated column."""
    s = field.settings
    height = field.height_at(x, y)
    if height <= s['sea_level']:
        return None

    biome = field.biome_at(x, y)
    probability = s['tree_accept_probability'].get(biome)
    if biome == BIOME_DESERT or probability is None:
        return None

    cell = s['tree_cell_size']
    cx, cy = x // cell, y // cell
    roll = hash_scalar(
        cx * _ACCEPT_MULTIPLIERS[0] + cy * _ACCEPT_MULTIPLIERS[1],
        field.seed + s['tree_accept_seed_offset'],
    )
    if roll >= probability:
        return None

    leaf_type = "cherry_leaf" if biome == BIOME_CHERRY else "leaf"
    return Tree(x=x, y=y, base_z=height + 1, leaf_type=leaf_type)

def tree_at(field: TerrainField, x: int, y: int) -> Tree | None:
    """Returns the tree rooted in column (x, y), or None."""
    cell = field.settings['tree_cell_size']
    if (x, y) != _candidate_for_cell(field, x // cell, y // cell):
        return None
    return _grow(field, x, y)

def place_trees(field: TerrainField, width: int = None, height: int = None) -> list[Tree]:
    """Returns every tree in the world, visiting each cell once."""
    s = field.settings
    width = s['world_width'] if width is None else width
    height = s['world_height'] if height is None else height
    cell = s['tree_cell_size']

    trees = []
    for cy in range((height + cell - 1) // cell):
        for cx in range((width + cell - 1) // cell):
            x, y = _candidate_for_cell(field, cx, cy)
            # The last row/column of cells may be clipped by the world edge.
            if x >= width or y >= height:
                continue
            tree = _grow(field, x, y)
            if tree is not None:
                trees.append(tree)
    return trees

def tree_voxels(tree: Tree, width: int, height: int) -> list[tuple[int, int, int, str]]:
    """
    Returns (x, y, z, voxel_type) for the trunk and leaves of a tree.
    Leaves that would hang outside the world are dropped.
    """
    voxels = [(tree.x, tree.y, tree.base_z + dz, "wood") for dz in range(TRUNK_HEIGHT)]
    for dx, dy, dz in LEAF_OFFSETS:
        x, y = tree.x + dx, tree.y + dy
        if 0 <= x < width and 0 <= y < height:
            voxels.append((x, y, tree.base_z + dz, tree.leaf_type))
    return voxels
