# voxel_world/color_maps.py

"""
================================================================================
SHARED COLOR MAPPING UTILITIES
================================================================================
This module contains the voxel palette and the face-shading function that
turns a voxel type into the three colors of its visible faces.

It is designed to be a pure, stateless utility with no dependencies on Pygame,
allowing it to be used by both the renderer and headless tests.
================================================================================
"""
import math

from . import config as DEFAULTS

# --- Voxel Palette ---
# Each voxel type maps to exactly three base shades: (top, left face, right face).
VOXEL_PALETTE = {
    "grass": ((60, 179, 113), (46, 139, 87), (35, 107, 70)),
    "cherry_grass": ((242, 167, 198), (222, 143, 178), (199, 117, 156)),
    "sand": ((230, 214, 144), (209, 195, 122), (191, 174, 100)),
    "dirt": ((107, 79, 58), (90, 63, 43), (74, 51, 36)),
    "stone": ((143, 154, 163), (110, 119, 129), (86, 94, 102)),
    "water": ((77, 163, 255), (43, 120, 228), (30, 79, 145)),
    "wood": ((139, 90, 43), (111, 69, 30), (90, 55, 24)),
    "leaf": ((76, 175, 80), (62, 142, 65), (47, 107, 49)),
    "cherry_leaf": ((255, 183, 213), (232, 155, 189), (201, 127, 161)),
}

def shade(color: tuple, factor: float) -> tuple:
    """Darkens an RGB color by a uniform factor, flooring each channel."""
    return tuple(int(math.floor(channel * factor)) for channel in color)

def face_colors(voxel_type: str, left_shade: float = DEFAULTS.LEFT_FACE_SHADE,
                right_shade: float = DEFAULTS.RIGHT_FACE_SHADE) -> tuple:
    """
    Returns the (top, left, right) fill colors for a voxel type.
    The top face is unshaded; the side faces are darkened.
    """
    top, left, right = VOXEL_PALETTE[voxel_type]
    return top, shade(left, left_shade), shade(right, right_shade)
