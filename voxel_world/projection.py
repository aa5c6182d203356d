# voxel_world/projection.py

"""
================================================================================
ISOMETRIC PROJECTION & PICKING
================================================================================
Maps grid columns and layers to screen space and back.

Forward transform, with t the on-screen half-width of a tile footprint:
    x = (ix - iy) * t + origin_x
    y = (ix + iy) * t / 2 + origin_y - iz * t

Inverse transform (picking), with (mx, my) the pointer minus the origin:
    ix = round((my / (t / 2) + mx / t) / 2)
    iy = round((my / (t / 2) - mx / t) / 2)

The origin is recomputed every frame from the surface size; picking must use
the origin of the most recent frame or it drifts away from the drawn cursor.

Data Contract:
---------------
- Inputs: surface size, world extent, grid/screen coordinates.
- Outputs: screen points, convex face polygons, clamped grid cells.
- Side Effects: `update_origin` mutates the projection's origin.
================================================================================
"""

import math
from typing import Callable

from . import config as DEFAULTS

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

class IsoProjection:
    """Axonometric (diamond) projection with a per-frame origin."""

    def __init__(self, tile_size: float = DEFAULTS.TILE_SIZE, origin_mode: str = DEFAULTS.ORIGIN_MODE,
                 top_margin: float = DEFAULTS.ORIGIN_TOP_MARGIN):
        self.tile_size = tile_size
        self.origin_mode = origin_mode
        self.top_margin = top_margin
        self.origin_x = 0.0
        self.origin_y = 0.0

    def update_origin(self, surface_width: int, surface_height: int, world_width: int, world_height: int,
                      top_layer: int):
        """
        Centers the world horizontally and places it vertically on the surface.

        Args:
            surface_width, surface_height (int): Current surface size in pixels.
            world_width, world_height (int): World extent in columns.
            top_layer (int): Highest layer anything can be drawn at.
        """
        t = self.tile_size
        # The footprint spans from -world_height * t to +world_width * t around the origin.
        self.origin_x = surface_width / 2 - (world_width - world_height) * t / 2

        if self.origin_mode == 'margin':
            self.origin_y = self.top_margin
            return

        # Bounding box: from the top vertex of the tallest stack at (0, 0)
        # down to the bottom of the side faces of the nearest ground voxel.
        box_height = (world_width + world_height - 2) * t / 2 + 2 * t + top_layer * t
        self.origin_y = (surface_height - box_height) / 2 + top_layer * t

    def project(self, ix: int, iy: int, iz: int) -> tuple[float, float]:
        t = self.tile_size
        return (
            (ix - iy) * t + self.origin_x,
            (ix + iy) * t * 0.5 + self.origin_y - iz * t,
        )

    def voxel_polygons(self, ix: int, iy: int, iz: int) -> tuple[list, list, list]:
        """
        Returns the (top, left, right) face polygons of a voxel. The top face
        is a rhombus hanging from the projected point; each side face extends
        one tile downward from an edge of the rhombus.
        """
        t = self.tile_size
        x, y = self.project(ix, iy, iz)
        top = [(x, y), (x + t, y + t * 0.5), (x, y + t), (x - t, y + t * 0.5)]
        left = [(x - t, y + t * 0.5), (x - t, y + t * 1.5), (x, y + t * 2), (x, y + t)]
        right = [(x + t, y + t * 0.5), (x + t, y + t * 1.5), (x, y + t * 2), (x, y + t)]
        return top, left, right

    def unproject(self, screen_x: float, screen_y: float, iz: int = 0) -> tuple[float, float]:
        """Continuous grid coordinates of a screen point lying on layer iz."""
        t = self.tile_size
        mx = screen_x - self.origin_x
        my = screen_y - self.origin_y + iz * t
        return (my / (t * 0.5) + mx / t) / 2, (my / (t * 0.5) - mx / t) / 2

    def pick(self, screen_x: float, screen_y: float, world_width: int, world_height: int,
             iz: int = 0) -> tuple[int, int]:
        """Returns the grid cell nearest a screen point, clamped into the world."""
        fx, fy = self.unproject(screen_x, screen_y, iz)
        ix = max(0, min(world_width - 1, _round_half_up(fx)))
        iy = max(0, min(world_height - 1, _round_half_up(fy)))
        return ix, iy

    def pick_surface(self, screen_x: float, screen_y: float, world_width: int, world_height: int,
                     height_at: Callable[[int, int], int], top_layer: int) -> tuple[int, int]:
        """
        Returns the column whose surface lies under a screen point.

        Layers are scanned from the top down; the first in-bounds column whose
        surface height equals the scanned layer wins, since it is drawn in
        front of anything found at lower layers. Falls back to layer 0.
        """
        for iz in range(top_layer, -1, -1):
            fx, fy = self.unproject(screen_x, screen_y, iz)
            ix, iy = _round_half_up(fx), _round_half_up(fy)
            if 0 <= ix < world_width and 0 <= iy < world_height and height_at(ix, iy) == iz:
                return ix, iy
        return self.pick(screen_x, screen_y, world_width, world_height)
