# voxel_world/runtime/__init__.py

# This file makes the 'runtime' directory a Python package.
# Everything in here depends on Pygame; the rest of voxel_world does not.

from .surface import PygameSurface

__all__ = ["PygameSurface"]
