"""Tile builders for tests."""
from triplet_mahjong.models.tile import Tile, TilePosition, TileType


def make_tile(tile_id: str, tile_type: int, x: int = 0, y: int = 0, z: int = 0) -> Tile:
    """Build an accessible board tile."""
    return Tile(
        id=tile_id,
        type=TileType(tile_type),
        position=TilePosition(x=x, y=y, z=z),
        is_accessible=True,
    )


def flat_board(types, row_width: int = 10):
    """Single-layer board with one tile per type entry, all accessible."""
    return [
        make_tile(f"t{i}", tile_type, x=i % row_width, y=i // row_width)
        for i, tile_type in enumerate(types)
    ]
