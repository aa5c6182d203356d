import itertools

import pytest

from voxel_world import config as DEFAULTS
from voxel_world.settings import build_settings
from voxel_world.terrain import TerrainField
from voxel_world.vegetation import Tree, _candidate_for_cell, place_trees, tree_at, tree_voxels


def chebyshev(a, b):
    return max(abs(a.x - b.x), abs(a.y - b.y))


@pytest.mark.parametrize("seed", range(0, 40, 3))
def test_trees_keep_minimum_spacing(seed):
    settings = build_settings({'tree_accept_probability': {'forest': 1.0, 'cherry': 1.0}})
    trees = place_trees(TerrainField(seed, settings))
    for a, b in itertools.combinations(trees, 2):
        assert chebyshev(a, b) >= settings['tree_min_spacing']


@pytest.mark.parametrize("seed", [0, 42, 1001])
def test_no_trees_on_water_or_in_desert(seed, settings):
    field = TerrainField(seed, settings)
    for tree in place_trees(field):
        assert field.height_at(tree.x, tree.y) > settings['sea_level']
        assert field.biome_at(tree.x, tree.y) != DEFAULTS.BIOME_DESERT


def test_desert_never_grows_trees_even_if_configured():
    settings = build_settings({
        'sea_level': 0,
        'tree_accept_probability': {'desert': 1.0, 'forest': 1.0, 'cherry': 1.0},
    })
    for seed in range(10):
        field = TerrainField(seed, settings)
        for tree in place_trees(field):
            assert field.biome_at(tree.x, tree.y) != DEFAULTS.BIOME_DESERT


def test_every_eligible_cell_grows_with_certain_acceptance():
    settings = build_settings({
        'sea_level': 0,
        'tree_accept_probability': {'forest': 1.0, 'cherry': 1.0},
    })
    field = TerrainField(42, settings)
    cell = settings['tree_cell_size']
    expected = set()
    for cx in range(settings['world_width'] // cell):
        for cy in range(settings['world_height'] // cell):
            x, y = _candidate_for_cell(field, cx, cy)
            assert cx * cell <= x <= cx * cell + cell - settings['tree_min_spacing']
            assert cy * cell <= y <= cy * cell + cell - settings['tree_min_spacing']
            if field.biome_at(x, y) != DEFAULTS.BIOME_DESERT:
                expected.add((x, y))
    assert {(t.x, t.y) for t in place_trees(field)} == expected


def test_per_column_query_agrees_with_placement(settings):
    field = TerrainField(42, settings)
    from_columns = {
        (x, y)
        for x in range(settings['world_width'])
        for y in range(settings['world_height'])
        if tree_at(field, x, y) is not None
    }
    assert from_columns == {(t.x, t.y) for t in place_trees(field)}


def test_tree_sits_on_surface_with_biome_leaves(settings):
    settings = build_settings({'sea_level': 0, 'tree_accept_probability': {'forest': 1.0, 'cherry': 1.0}})
    field = TerrainField(7, settings)
    for tree in place_trees(field):
        assert tree.base_z == field.height_at(tree.x, tree.y) + 1
        biome = field.biome_at(tree.x, tree.y)
        assert tree.leaf_type == ("cherry_leaf" if biome == DEFAULTS.BIOME_CHERRY else "leaf")


def test_tree_voxel_pattern():
    tree = Tree(x=5, y=5, base_z=6, leaf_type="leaf")
    voxels = tree_voxels(tree, 20, 20)
    assert voxels[:2] == [(5, 5, 6, "wood"), (5, 5, 7, "wood")]
    assert set(voxels[2:]) == {
        (5, 5, 8, "leaf"),
        (6, 5, 8, "leaf"),
        (4, 5, 8, "leaf"),
        (5, 6, 8, "leaf"),
        (5, 4, 8, "leaf"),
        (5, 5, 9, "leaf"),
    }


def test_tree_voxels_drop_leaves_outside_world():
    tree = Tree(x=0, y=0, base_z=5, leaf_type="cherry_leaf")
    voxels = tree_voxels(tree, 20, 20)
    assert all(x >= 0 and y >= 0 for x, y, _, _ in voxels)
    assert len(voxels) == 2 + 4
