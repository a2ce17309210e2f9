"""Board generator with guaranteed triplet distribution."""
import logging
import random
from typing import Dict, List, Optional, Tuple

from ..models.tile import LevelConfig, Tile, TilePosition, TileType
from ..models.game_settings import TileDimensions, DEFAULT_TILE_DIMENSIONS
from ..utils.helpers import shuffle_in_place
from .layout import generate_positions

logger = logging.getLogger(__name__)

# A higher tile closer than this on both axes covers the tile below.
# Independent from any click tolerance used when rendering.
BLOCKING_TOLERANCE = 1.0


def is_tile_blocked(tile: Tile, all_tiles: List[Tile]) -> bool:
    """Check whether any live tile on a higher layer sits over this one."""
    x, y, z = tile.position.x, tile.position.y, tile.position.z

    for other in all_tiles:
        if other.id == tile.id:
            continue
        if other.is_in_hand or other.is_matched:
            continue
        if other.position.z <= z:
            continue

        dx = abs(other.position.x - x)
        dy = abs(other.position.y - y)
        if dx < BLOCKING_TOLERANCE and dy < BLOCKING_TOLERANCE:
            return True

    return False


def update_accessibility(tiles: List[Tile]) -> None:
    """
    Recompute accessibility of every tile in place.

    Must run after any tile enters or leaves the hand or gets matched.
    Tiles in hand or matched are never accessible and never block.

    Args:
        tiles: The full board, including tiles in hand and matched ones.
    """
    for tile in tiles:
        if tile.is_in_hand or tile.is_matched:
            tile.is_accessible = False
            continue
        tile.is_accessible = not is_tile_blocked(tile, tiles)


class BoardGenerator:
    """Generates solvable layered boards."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        tile_dimensions: TileDimensions = DEFAULT_TILE_DIMENSIONS,
    ):
        self._rng = rng or random.Random()
        self.tile_dimensions = tile_dimensions

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the generator (None = system entropy)."""
        self._rng.seed(seed)

    def generate_board(self, level_config: LevelConfig) -> List[Tile]:
        """
        Generate the board for a level.

        Positions and types are shuffled independently. The type list is
        built from complete triplets before shuffling, so every board can
        be cleared type-wise whatever the spatial outcome.

        Args:
            level_config: Level configuration.

        Returns:
            Tiles with ids tile-0..tile-(n-1) and initial accessibility.
        """
        positions = generate_positions(level_config)
        tile_types = self.generate_tile_types(len(positions), level_config.tile_types)

        shuffle_in_place(positions, self._rng)

        tiles: List[Tile] = []
        for i, (position, tile_type) in enumerate(zip(positions, tile_types)):
            tiles.append(Tile(
                id=f"tile-{i}",
                type=tile_type,
                position=position,
            ))

        update_accessibility(tiles)

        logger.info(
            "Generated board for level %d: %d tiles, %d accessible",
            level_config.level, len(tiles), sum(1 for t in tiles if t.is_accessible),
        )
        return tiles

    def generate_tile_types(self, count: int, max_types: int) -> List[TileType]:
        """
        Generate a shuffled type list made of complete triplets.

        Group i gets type i mod max_types, so with fewer types than groups
        the lowest types appear more than once.
        """
        if max_types < 1:
            raise ValueError(f"max_types must be positive, got {max_types}")

        types: List[TileType] = []
        for i in range(count // 3):
            tile_type = TileType(i % max_types)
            types.extend([tile_type] * 3)

        shuffle_in_place(types, self._rng)
        return types

    def screen_position(
        self,
        position: TilePosition,
        level_config: LevelConfig,
        bounds: Dict[str, float],
    ) -> Tuple[float, float]:
        """
        Map a board position to canvas coordinates.

        The cols x rows grid is centred inside the bounds; each layer is
        skewed up by the tile depth and left by half of it for the stacked
        look.

        Args:
            position: Tile position.
            level_config: Level configuration (grid size).
            bounds: Rectangle with x, y, width and height.

        Returns:
            (x, y) of the tile centre.
        """
        dims = self.tile_dimensions
        tile_w = dims.width + dims.padding
        tile_h = dims.height + dims.padding
        layer_offset = dims.depth

        board_width = level_config.cols * tile_w
        board_height = level_config.rows * tile_h

        start_x = bounds["x"] + (bounds["width"] - board_width) / 2 + tile_w / 2
        start_y = bounds["y"] + (bounds["height"] - board_height) / 2 + tile_h / 2

        x = start_x + position.x * tile_w - position.z * layer_offset * 0.5
        y = start_y + position.y * tile_h - position.z * layer_offset
        return x, y


# Singleton instance
_board_generator = None


def get_board_generator() -> BoardGenerator:
    """Get or create board generator singleton instance."""
    global _board_generator
    if _board_generator is None:
        _board_generator = BoardGenerator()
    return _board_generator
