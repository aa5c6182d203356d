import json
import os

import pygame
import pytest
from PIL import Image

from voxel_world.renderer import IsoRenderer
from voxel_world.runtime import PygameSurface
from voxel_world.world import WorldState

import snapshot

SQUARE = [(0, 0), (20, 0), (20, 20), (0, 20)]


@pytest.fixture
def target():
    return PygameSurface(pygame.Surface((40, 40)), background=(10, 20, 30))


def test_clear_fills_background(target):
    target.clear(40, 40)
    assert target.surface.get_at((39, 39))[:3] == (10, 20, 30)


def test_opaque_polygon(target):
    target.clear(40, 40)
    target.fill_convex_polygon(SQUARE, (200, 100, 50))
    assert target.surface.get_at((10, 10))[:3] == (200, 100, 50)
    assert target.surface.get_at((30, 30))[:3] == (10, 20, 30)


def test_translucent_pass_is_composited_on_flush():
    target = PygameSurface(pygame.Surface((40, 40)), background=(0, 0, 0))
    target.clear(40, 40)
    target.set_global_alpha(0.5)
    target.fill_convex_polygon(SQUARE, (255, 255, 255))
    # Nothing reaches the target until the layer is composited.
    assert target.surface.get_at((10, 10))[:3] == (0, 0, 0)
    target.flush()
    red, green, blue = target.surface.get_at((10, 10))[:3]
    assert abs(red - 128) <= 2 and red == green == blue


def test_resetting_alpha_composites_layer():
    target = PygameSurface(pygame.Surface((40, 40)), background=(0, 0, 0))
    target.clear(40, 40)
    target.set_global_alpha(0.75)
    target.fill_convex_polygon(SQUARE, (0, 0, 200))
    target.set_global_alpha(1.0)
    assert 145 <= target.surface.get_at((10, 10))[2] <= 155


def test_world_renders_onto_pygame_surface(logger):
    world = WorldState(config={'seed': 42}, logger=logger)
    renderer = IsoRenderer(logger=logger)
    surface = pygame.Surface((1024, 768))
    target = PygameSurface(surface, renderer.settings['background_color'])
    renderer.draw(target, world, 1024, 768)
    target.flush()

    sx, sy = renderer.projection.project(10, 10, world.terrain.height_at(10, 10) + 1)
    # The cursor preview over the default cursor cell is never background.
    assert surface.get_at((int(sx), int(sy) + 12))[:3] != renderer.settings['background_color']
    assert surface.get_at((0, 0))[:3] == renderer.settings['background_color']


def test_render_snapshot_returns_rgb_image(logger):
    world = WorldState(config={'seed': 7}, logger=logger)
    image = snapshot.render_snapshot(world, IsoRenderer(logger=logger), 320, 240)
    assert isinstance(image, Image.Image)
    assert image.size == (320, 240)
    assert image.mode == 'RGB'


def test_take_snapshots_writes_pngs(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({
        "world_generation_parameters": {"world_width": 8, "world_height": 8},
        "rendering": {"tile_size": 8},
    }))
    out_dir = tmp_path / "out"
    saved = snapshot.take_snapshots(str(config_path), str(out_dir), seed=100, count=2, width=200, height=160)
    assert [os.path.basename(p) for p in saved] == ["seed_100.png", "seed_101.png"]
    for path in saved:
        with Image.open(path) as image:
            assert image.size == (200, 160)


def test_take_snapshots_with_missing_config(tmp_path):
    assert snapshot.take_snapshots(str(tmp_path / "missing.json"), str(tmp_path / "out")) == []


def test_viewer_arguments():
    import viewer

    args = viewer.parse_args(["--seed", "42", "--config", "other.json"])
    assert args.seed == 42
    assert args.config == "other.json"
    assert viewer.parse_args([]).seed is None
