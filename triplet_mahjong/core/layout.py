"""Pyramid layout generation for layered boards."""
import logging
import math
from typing import List, Tuple

from ..models.tile import LevelConfig, TilePosition

logger = logging.getLogger(__name__)

# Upper layers never shrink below this extent
MIN_LAYER_EXTENT = 2
# Each layer loses half a cell per axis
LAYER_SHRINK = 0.5


def layer_extent(full: int, layer: int) -> Tuple[int, int]:
    """
    Get the (size, offset) of one axis of a layer.

    Args:
        full: Base layer size along the axis.
        layer: Layer index (0 = base).

    Returns:
        Tuple of shrunk size and the offset that centres it in the base.
    """
    if layer == 0:
        return full, 0

    shrunk = max(MIN_LAYER_EXTENT, math.floor(full - layer * LAYER_SHRINK))
    shrunk = min(shrunk, full)
    offset = (full - shrunk) // 2
    return shrunk, offset


def generate_positions(config: LevelConfig) -> List[TilePosition]:
    """
    Generate tile positions for all layers of a level.

    Layer 0 is the full grid. Upper layers are centred, shrunk rectangles
    that only use checkerboard cells ((x + y) even). The list is truncated
    to a multiple of 3 because tiles are always dealt in triplets.

    Args:
        config: Level configuration.

    Returns:
        Positions in layer, row, column order (not shuffled).
    """
    positions: List[TilePosition] = []

    for z in range(config.layers):
        layer_rows, start_y = layer_extent(config.rows, z)
        layer_cols, start_x = layer_extent(config.cols, z)

        for row in range(layer_rows):
            for col in range(layer_cols):
                x = start_x + col
                y = start_y + row
                # Stagger upper layers
                if z > 0 and (x + y) % 2 != 0:
                    continue
                positions.append(TilePosition(x=x, y=y, z=z))

    while len(positions) % 3 != 0:
        positions.pop()

    logger.debug(
        "Generated %d positions for %dx%d board with %d layers",
        len(positions), config.cols, config.rows, config.layers,
    )
    return positions
