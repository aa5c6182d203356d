# FOLDER: /

# viewer.py

"""
================================================================================
ISOMETRIC VOXEL VIEWER
================================================================================
Interactive Pygame front-end for the voxel world.

    - Moving the mouse moves the cursor over the terrain.
    - Clicking (or tapping) picks the cell under the pointer and places a
      stone block on top of it.
    - The window is resizable; the projection origin follows its size.
    - Escape or closing the window quits.

Usage:
    python viewer.py [--config config.json] [--seed 42]
================================================================================
"""

import argparse
import json
import logging
import logging.config
import os
import sys

import pygame

from voxel_world.renderer import IsoRenderer
from voxel_world.runtime import PygameSurface
from voxel_world.world import WorldState

DEFAULT_CONFIG_PATH = 'config.json'
DEFAULT_LOGGING_CONFIG_PATH = 'logging_config.json'
LOG_DIR = 'logs'

class ViewerApp:
    """The main application class for the voxel viewer."""

    def __init__(self, config_path: str, seed: int = None):
        self._setup_logging()
        self.logger.info("Application starting.")

        self.config = self._load_config(config_path)
        world_params = dict(self.config.get('world_generation_parameters', {}))
        if seed is not None:
            world_params['seed'] = seed

        self._setup_pygame()

        # --- Dependency Injection ---
        self.world = WorldState(config=world_params, logger=self.logger)
        self.renderer = IsoRenderer(logger=self.logger, config=self.config.get('rendering', {}))
        self.target = PygameSurface(self.screen, self.renderer.settings['background_color'])
        # Events are handled before the first frame, so picking needs an origin now.
        self.renderer.update_origin(self.world, self.screen_width, self.screen_height)
        self.is_running = True

    def _setup_logging(self):
        """Initializes the logging system from a config file."""
        if not os.path.exists(LOG_DIR):
            os.makedirs(LOG_DIR)

        with open(DEFAULT_LOGGING_CONFIG_PATH, 'rt') as f:
            log_config = json.load(f)
        log_config['handlers']['file']['filename'] = os.path.join(LOG_DIR, 'viewer.log')
        logging.config.dictConfig(log_config)
        self.logger = logging.getLogger(__name__)

    def _load_config(self, config_path: str) -> dict:
        """Loads application parameters from the config file."""
        self.logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, 'r') as f:
                return json.load(f)
        except FileNotFoundError:
            self.logger.critical(f"Configuration file not found at {config_path}. Exiting.")
            sys.exit(1)
        except json.JSONDecodeError:
            self.logger.critical(f"Error decoding JSON from {config_path}. Exiting.")
            sys.exit(1)

    def _setup_pygame(self):
        """Initializes Pygame and the display window."""
        self.logger.info("Initializing Pygame...")
        pygame.init()
        display_config = self.config.get('display', {})
        self.screen_width = display_config.get('screen_width', 1280)
        self.screen_height = display_config.get('screen_height', 720)
        self.fps = display_config.get('fps', 60)

        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        pygame.display.set_caption("Isometric Voxel World")
        self.clock = pygame.time.Clock()

    def run(self):
        """The main application loop."""
        while self.is_running:
            self.handle_events()
            self.draw()
            self.clock.tick(self.fps)

        self.logger.info("Exiting viewer.")
        pygame.quit()

    def handle_events(self):
        """Processes user input and window events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.is_running = False
            elif event.type == pygame.VIDEORESIZE:
                self._on_resize(event.w, event.h)
            elif event.type == pygame.MOUSEMOTION:
                self._update_cursor(*event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                # A tap has no preceding motion, so pick at the press position first.
                self._update_cursor(*event.pos)
                self.world.commit()

    def _on_resize(self, width: int, height: int):
        self.screen_width, self.screen_height = width, height
        self.screen = pygame.display.get_surface()
        self.target.set_target(self.screen)
        self.renderer.update_origin(self.world, width, height)

    def _update_cursor(self, screen_x: int, screen_y: int):
        """Picks the column under the pointer using the latest frame's origin."""
        ix, iy = self.renderer.projection.pick_surface(
            screen_x, screen_y, self.world.width, self.world.height,
            self.world.terrain.height_at, self.world.settings['max_height'],
        )
        self.world.move_cursor(ix, iy)

    def draw(self):
        """Renders one frame."""
        self.renderer.draw(self.target, self.world, self.screen_width, self.screen_height)
        self.target.flush()
        pygame.display.set_caption(
            f"Isometric Voxel World | Seed {self.world.seed} | "
            f"Cursor ({self.world.cursor.ix}, {self.world.cursor.iy}) | Blocks {len(self.world.overlay)}"
        )
        pygame.display.flip()

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive isometric voxel world viewer.")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH,
                        help="Path to the JSON configuration file.")
    parser.add_argument("--seed", type=int, default=None,
                        help="World seed. Overrides the config; random if neither sets one.")
    return parser.parse_args(argv)

if __name__ == '__main__':
    args = parse_args()
    app = ViewerApp(config_path=args.config, seed=args.seed)
    app.run()
