# snapshot.py

"""
================================================================================
OFFLINE SNAPSHOT SCRIPT
================================================================================
Command-line tool that renders worlds headlessly and saves each frame as a
PNG. Useful for comparing seeds or tuning generation constants without
opening a window.

Usage:
    python snapshot.py --config config.json --seed 42 --count 8 --out snapshots
================================================================================
"""
import argparse
import json
import logging
import os
import sys

import numpy as np
import pygame
from PIL import Image
from tqdm import tqdm

from voxel_world.renderer import IsoRenderer
from voxel_world.runtime import PygameSurface
from voxel_world.world import WorldState, random_seed

def surface_to_image(surface: pygame.Surface) -> Image.Image:
    """Converts a pygame.Surface into a Pillow RGB image."""
    # surfarray is indexed (width, height, channels); Pillow expects (height, width, channels).
    pixels = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
    return Image.fromarray(pixels.astype(np.uint8), 'RGB')

def render_snapshot(world: WorldState, renderer: IsoRenderer, width: int, height: int) -> Image.Image:
    """Renders one frame of a world off-screen."""
    surface = pygame.Surface((width, height))
    target = PygameSurface(surface, renderer.settings['background_color'])
    renderer.draw(target, world, width, height)
    target.flush()
    return surface_to_image(surface)

def take_snapshots(config_path: str, out_dir: str, seed: int = None, count: int = 1,
                   width: int = 1280, height: int = 720):
    """
    Renders `count` consecutive seeds starting at `seed` (or a random seed)
    and writes one PNG per seed into `out_dir`.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger = logging.getLogger("Snapshot")

    logger.info(f"Loading configuration from: {config_path}")
    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.critical(f"Failed to load or parse config file: {e}")
        return []

    world_params = config.get('world_generation_parameters', {})
    if seed is None:
        seed = world_params.get('seed')
    if seed is None:
        seed = random_seed()

    os.makedirs(out_dir, exist_ok=True)
    renderer = IsoRenderer(logger=logger, config=config.get('rendering', {}))

    saved = []
    for offset in tqdm(range(count), desc="Rendering Snapshots"):
        world_seed = (seed + offset) % 2 ** 32
        world = WorldState(config={**world_params, 'seed': world_seed}, logger=logger)
        image = render_snapshot(world, renderer, width, height)
        path = os.path.join(out_dir, f"seed_{world_seed}.png")
        image.save(path, 'PNG')
        saved.append(path)

    logger.info(f"Saved {len(saved)} snapshot(s) to: {out_dir}")
    return saved

# --- Command-Line Interface ---
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Headless snapshot renderer for the voxel world.")
    parser.add_argument("--config", type=str, default="config.json",
                        help="Path to the JSON configuration file.")
    parser.add_argument("--seed", type=int, default=None, help="First seed to render.")
    parser.add_argument("--count", type=int, default=1, help="Number of consecutive seeds to render.")
    parser.add_argument("--out", type=str, default="snapshots", help="Output directory.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    args = parser.parse_args()

    take_snapshots(args.config, args.out, seed=args.seed, count=args.count,
                   width=args.width, height=args.height)
