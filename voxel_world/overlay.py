# voxel_world/overlay.py

"""
================================================================================
BLOCK OVERLAY STORE
================================================================================
A sparse map of player-placed voxels, drawn on top of the generated terrain.

Data Contract:
---------------
- Keys are exact (x, y, z) triples (`VoxelKey`).
- `place` inserts only if the key is absent: an occupied key is never
  overwritten, so a block keeps the type it was placed with.
- Iteration follows insertion order; `render_order` follows painter order.
================================================================================
"""

from typing import Iterator, NamedTuple

class VoxelKey(NamedTuple):
    x: int
    y: int
    z: int

def painter_key(key: VoxelKey) -> tuple[int, int, int]:
    """Sort key that paints voxels farther from the viewer first."""
    return key.z, key.y, key.x

class BlockOverlay:
    """Player-placed blocks keyed by VoxelKey."""

    def __init__(self):
        self._blocks: dict[VoxelKey, str] = {}

    def place(self, key: VoxelKey, voxel_type: str) -> bool:
        """Inserts a block if the key is free. Returns True if it was inserted."""
        if key in self._blocks:
            return False
        self._blocks[key] = voxel_type
        return True

    def get(self, key: VoxelKey) -> str | None:
        return self._blocks.get(key)

    def __contains__(self, key) -> bool:
        return key in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[tuple[VoxelKey, str]]:
        return iter(self._blocks.items())

    def render_order(self) -> list[tuple[VoxelKey, str]]:
        return sorted(self._blocks.items(), key=lambda item: painter_key(item[0]))
