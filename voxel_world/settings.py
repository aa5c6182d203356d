# voxel_world/settings.py

"""
================================================================================
SETTINGS CONSOLIDATION
================================================================================
Merges a user configuration dictionary over the internal defaults in
`config.py`, producing the flat `settings` dictionary every other component
reads from.

Data Contract:
---------------
- Inputs:
    - user_config (dict): Any subset of the keys below. Unknown keys are ignored.
- Outputs:
    - A new settings dictionary with every key present.
- Side Effects: None.
- Invariants: Raises ValueError for settings that cannot describe a world
  (non-positive extents, inverted height range, tree spacing wider than a
  tree cell). Valid settings never make terrain functions fail.
================================================================================
"""

from . import config as DEFAULTS

# Biome names accepted in user configs (JSON keys are always strings).
_BIOME_IDS_BY_NAME = {name: biome_id for biome_id, name in DEFAULTS.BIOME_NAMES.items()}

def _biome_table(table: dict) -> dict:
    """Normalizes a {biome: value} table so that keys are biome IDs."""
    normalized = {}
    for key, value in table.items():
        if isinstance(key, str):
            if key not in _BIOME_IDS_BY_NAME:
                raise ValueError(f"Unknown biome '{key}' in tree_accept_probability.")
            key = _BIOME_IDS_BY_NAME[key]
        normalized[key] = float(value)
    return normalized

def build_settings(user_config: dict = None) -> dict:
    """Returns the complete settings dictionary for the given overrides."""
    user_config = user_config or {}

    settings = {
        'world_width': user_config.get('world_width', DEFAULTS.DEFAULT_WORLD_WIDTH),
        'world_height': user_config.get('world_height', DEFAULTS.DEFAULT_WORLD_HEIGHT),
        'min_height': user_config.get('min_height', DEFAULTS.MIN_HEIGHT),
        'max_height': user_config.get('max_height', DEFAULTS.MAX_HEIGHT),
        'sea_level': user_config.get('sea_level', DEFAULTS.SEA_LEVEL),

        'height_low_frequency': user_config.get('height_low_frequency', DEFAULTS.HEIGHT_LOW_FREQUENCY),
        'height_high_frequency': user_config.get('height_high_frequency', DEFAULTS.HEIGHT_HIGH_FREQUENCY),
        'height_low_weight': user_config.get('height_low_weight', DEFAULTS.HEIGHT_LOW_WEIGHT),
        'height_high_weight': user_config.get('height_high_weight', DEFAULTS.HEIGHT_HIGH_WEIGHT),

        'biome_seed_offset': user_config.get('biome_seed_offset', DEFAULTS.BIOME_SEED_OFFSET),
        'biome_frequency': user_config.get('biome_frequency', DEFAULTS.BIOME_FREQUENCY),
        'biome_scale': user_config.get('biome_scale', DEFAULTS.BIOME_SCALE),

        'cave_frequency': user_config.get('cave_frequency', DEFAULTS.CAVE_FREQUENCY),
        'cave_depth_fold': user_config.get('cave_depth_fold', DEFAULTS.CAVE_DEPTH_FOLD),
        'cave_threshold': user_config.get('cave_threshold', DEFAULTS.CAVE_THRESHOLD),
        'cave_surface_margin': user_config.get('cave_surface_margin', DEFAULTS.CAVE_SURFACE_MARGIN),
        'world_floor': user_config.get('world_floor', DEFAULTS.WORLD_FLOOR),
        'dirt_depth': user_config.get('dirt_depth', DEFAULTS.DIRT_DEPTH),

        'tree_pick_seed_offset': user_config.get('tree_pick_seed_offset', DEFAULTS.TREE_PICK_SEED_OFFSET),
        'tree_accept_seed_offset': user_config.get('tree_accept_seed_offset', DEFAULTS.TREE_ACCEPT_SEED_OFFSET),
        'tree_cell_size': user_config.get('tree_cell_size', DEFAULTS.TREE_CELL_SIZE),
        'tree_min_spacing': user_config.get('tree_min_spacing', DEFAULTS.TREE_MIN_SPACING),
        'tree_accept_probability': _biome_table(
            user_config.get('tree_accept_probability', DEFAULTS.TREE_ACCEPT_PROBABILITY)
        ),

        'placed_block_type': user_config.get('placed_block_type', DEFAULTS.PLACED_BLOCK_TYPE),
    }

    if settings['world_width'] <= 0 or settings['world_height'] <= 0:
        raise ValueError(
            f"World extent must be positive, got {settings['world_width']}x{settings['world_height']}."
        )
    if settings['min_height'] > settings['max_height']:
        raise ValueError(
            f"min_height ({settings['min_height']}) exceeds max_height ({settings['max_height']})."
        )
    if not 1 <= settings['tree_min_spacing'] <= settings['tree_cell_size']:
        raise ValueError(
            f"tree_min_spacing must be in [1, tree_cell_size={settings['tree_cell_size']}], "
            f"got {settings['tree_min_spacing']}."
        )

    return settings

def build_render_settings(user_config: dict = None) -> dict:
    """Returns the renderer's settings for the given overrides."""
    user_config = user_config or {}

    render_settings = {
        'tile_size': user_config.get('tile_size', DEFAULTS.TILE_SIZE),
        'left_face_shade': user_config.get('left_face_shade', DEFAULTS.LEFT_FACE_SHADE),
        'right_face_shade': user_config.get('right_face_shade', DEFAULTS.RIGHT_FACE_SHADE),
        'water_alpha': user_config.get('water_alpha', DEFAULTS.WATER_ALPHA),
        'cursor_alpha': user_config.get('cursor_alpha', DEFAULTS.CURSOR_ALPHA),
        'background_color': tuple(user_config.get('background_color', DEFAULTS.BACKGROUND_COLOR)),
        'origin_mode': user_config.get('origin_mode', DEFAULTS.ORIGIN_MODE),
        'origin_top_margin': user_config.get('origin_top_margin', DEFAULTS.ORIGIN_TOP_MARGIN),
    }

    if render_settings['tile_size'] <= 0:
        raise ValueError(f"tile_size must be positive, got {render_settings['tile_size']}.")
    if render_settings['origin_mode'] not in ('center', 'margin'):
        raise ValueError(
            f"origin_mode must be 'center' or 'margin', got '{render_settings['origin_mode']}'."
        )

    return render_settings
