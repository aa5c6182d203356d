# voxel_world/renderer.py

"""
================================================================================
ISOMETRIC VOXEL RENDERER
================================================================================
Rasterizes the world as shaded voxels with the painter's algorithm: there is
no depth buffer, so voxels are issued strictly back to front.

A voxel can only hide voxels that are at or below it on every axis (the
viewer looks from +x, +y, +z), so any order that is ascending on z, y and x
paints occluded voxels first. The passes are:

    1. Terrain, layer by layer (z outer, then y, then x, all ascending),
       skipping layers above the column height and cave voxels.
    2. Translucent water at sea level over every column at or below it.
    3. Vegetation.
    4. Player-placed blocks, with no occlusion test against terrain.
    5. A translucent preview of the next block above the cursor.

The renderer talks to its target only through the DrawingSurface protocol.
All terrain is recomputed from the seed on every frame.
================================================================================
"""

import logging
from typing import Iterator, Protocol, Sequence

from . import config as DEFAULTS
from .color_maps import face_colors
from .projection import IsoProjection
from .settings import build_render_settings
from .terrain import TerrainSample, column_voxel_type
from .vegetation import place_trees, tree_voxels

class DrawingSurface(Protocol):
    """
    The raster primitives the renderer needs. Any object providing these
    methods can be drawn on, which keeps the core free of Pygame.
    """
    def clear(self, width: int, height: int) -> None: ...
    def fill_convex_polygon(self, points: Sequence[tuple[float, float]], color: tuple) -> None: ...
    def set_global_alpha(self, alpha: float) -> None: ...

def terrain_voxels(sample: TerrainSample, settings: dict) -> Iterator[tuple[int, int, int, str]]:
    """Yields (x, y, z, voxel_type) for every solid terrain voxel, back to front."""
    for iz in range(settings['max_height'] + 1):
        for iy in range(sample.height):
            for ix in range(sample.width):
                height = sample.height_at(ix, iy)
                if iz > height or sample.is_cave(ix, iy, iz):
                    continue
                yield ix, iy, iz, column_voxel_type(iz, height, sample.biome_at(ix, iy), settings)

def water_voxels(sample: TerrainSample, settings: dict) -> Iterator[tuple[int, int, int, str]]:
    """Yields one water voxel at sea level for every column at or below it."""
    sea_level = settings['sea_level']
    for iy in range(sample.height):
        for ix in range(sample.width):
            if sample.height_at(ix, iy) <= sea_level:
                yield ix, iy, sea_level, "water"

def vegetation_voxels(world) -> list[tuple[int, int, int, str]]:
    voxels = []
    for tree in place_trees(world.terrain, world.width, world.height):
        voxels.extend(tree_voxels(tree, world.width, world.height))
    voxels.sort(key=lambda v: (v[2], v[1], v[0]))
    return voxels

class IsoRenderer:
    """Draws a WorldState onto a DrawingSurface."""

    def __init__(self, logger: logging.Logger, config: dict = None):
        self.logger = logger
        self.settings = build_render_settings(config)
        self.projection = IsoProjection(
            tile_size=self.settings['tile_size'],
            origin_mode=self.settings['origin_mode'],
            top_margin=self.settings['origin_top_margin'],
        )
        self.logger.info(
            f"IsoRenderer initialized (tile size {self.settings['tile_size']}px, "
            f"origin mode '{self.settings['origin_mode']}')."
        )

    def top_layer(self, world) -> int:
        """Highest layer anything in the world can be drawn at."""
        return world.settings['max_height'] + DEFAULTS.VEGETATION_STACK_HEIGHT

    def update_origin(self, world, surface_width: int, surface_height: int):
        self.projection.update_origin(
            surface_width, surface_height, world.width, world.height, self.top_layer(world)
        )

    def draw_voxel(self, surface: DrawingSurface, ix: int, iy: int, iz: int, voxel_type: str):
        """Fills the top, left and right faces of one voxel."""
        top_color, left_color, right_color = face_colors(
            voxel_type, self.settings['left_face_shade'], self.settings['right_face_shade']
        )
        top, left, right = self.projection.voxel_polygons(ix, iy, iz)
        surface.fill_convex_polygon(top, top_color)
        surface.fill_convex_polygon(left, left_color)
        surface.fill_convex_polygon(right, right_color)

    def draw(self, surface: DrawingSurface, world, surface_width: int, surface_height: int):
        """
        Renders one full frame.

        Args:
            surface (DrawingSurface): The target surface.
            world (WorldState): The world to draw.
            surface_width, surface_height (int): Current surface size in pixels.
        """
        self.update_origin(world, surface_width, surface_height)
        surface.clear(surface_width, surface_height)

        sample = world.terrain.sample(world.width, world.height)

        # --- 1. Terrain ---
        for ix, iy, iz, voxel_type in terrain_voxels(sample, world.settings):
            self.draw_voxel(surface, ix, iy, iz, voxel_type)

        # --- 2. Water ---
        surface.set_global_alpha(self.settings['water_alpha'])
        for ix, iy, iz, voxel_type in water_voxels(sample, world.settings):
            self.draw_voxel(surface, ix, iy, iz, voxel_type)
        surface.set_global_alpha(1.0)

        # --- 3. Vegetation ---
        for ix, iy, iz, voxel_type in vegetation_voxels(world):
            self.draw_voxel(surface, ix, iy, iz, voxel_type)

        # --- 4. Player Blocks ---
        for key, voxel_type in world.overlay.render_order():
            self.draw_voxel(surface, key.x, key.y, key.z, voxel_type)

        # --- 5. Cursor Preview ---
        cursor = world.cursor
        preview_z = sample.height_at(cursor.ix, cursor.iy) + 1
        surface.set_global_alpha(self.settings['cursor_alpha'])
        self.draw_voxel(surface, cursor.ix, cursor.iy, preview_z, world.settings['placed_block_type'])
        surface.set_global_alpha(1.0)
