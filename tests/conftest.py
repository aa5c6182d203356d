import logging
import os

import pytest

# Pygame must never try to open a real window during tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from voxel_world.settings import build_settings
from voxel_world.terrain import TerrainField
from voxel_world.world import WorldState


class RecordingSurface:
    """DrawingSurface that records every primitive call."""

    def __init__(self):
        self.calls = []
        self.alpha = 1.0

    def clear(self, width, height):
        self.calls.append(("clear", width, height))

    def fill_convex_polygon(self, points, color):
        self.calls.append(("fill", [tuple(p) for p in points], tuple(color), self.alpha))

    def set_global_alpha(self, alpha):
        self.alpha = alpha
        self.calls.append(("alpha", alpha))

    def fills(self):
        return [call for call in self.calls if call[0] == "fill"]


@pytest.fixture
def logger():
    return logging.getLogger("voxel_world.tests")


@pytest.fixture
def settings():
    return build_settings()


@pytest.fixture
def field(settings):
    return TerrainField(42, settings)


@pytest.fixture
def world(logger):
    return WorldState(config={"seed": 42}, logger=logger)


@pytest.fixture
def recording_surface():
    return RecordingSurface()
