# voxel_world/runtime/surface.py

"""
================================================================================
PYGAME DRAWING SURFACE
================================================================================
Implements the renderer's DrawingSurface protocol on top of a pygame.Surface.

Pygame has no global alpha, so translucent passes are drawn onto an
off-screen SRCALPHA layer. The layer is composited onto the target with the
pass's alpha when the alpha changes again or when `flush()` is called.

Data Contract:
---------------
- Inputs (on initialization):
    - surface (pygame.Surface): The target to draw on.
    - background (tuple): The RGB color `clear` fills with.
- Side Effects: Draws on the target surface.
================================================================================
"""
import logging

import pygame

class PygameSurface:
    """DrawingSurface backed by a pygame.Surface."""

    def __init__(self, surface: pygame.Surface, background: tuple = (0, 0, 0)):
        self.surface = surface
        self.background = background
        self.logger = logging.getLogger(__name__)
        self._alpha = 1.0
        self._layer = None

    def clear(self, width: int, height: int):
        self._layer = None
        self.surface.fill(self.background, pygame.Rect(0, 0, width, height))

    def fill_convex_polygon(self, points, color):
        target = self._layer if self._layer is not None else self.surface
        pygame.draw.polygon(target, color, points)

    def set_global_alpha(self, alpha: float):
        self.flush()
        self._alpha = max(0.0, min(1.0, alpha))
        if self._alpha < 1.0:
            self._layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)

    def flush(self):
        """Composites any pending translucent layer onto the target."""
        if self._layer is None:
            return
        self._layer.set_alpha(round(self._alpha * 255))
        self.surface.blit(self._layer, (0, 0))
        self._layer = None

    def set_target(self, surface: pygame.Surface):
        """Redirects drawing to a new target, e.g. after the window was resized."""
        self.flush()
        self.surface = surface
        self.logger.debug(f"Drawing target resized to {surface.get_size()}.")
