"""Hint solver: locate a resolvable triplet across hand and board."""
import logging
from typing import Dict, List

from ..models.tile import HintResult, HintSource, Tile, TileType
from ..utils.helpers import group_by_type

logger = logging.getLogger(__name__)


def find_hint(hand_tiles: List[Tile], board_tiles: List[Tile]) -> HintResult:
    """
    Find a triplet that can be resolved right now.

    Priority:
        1. two held tiles + one board tile
        2. one held tile + two board tiles
        3. three board tiles (accessible or not)

    Ties go to the type encountered first. Nothing is mutated; the caller
    resolves the triplet like a regular match.

    Args:
        hand_tiles: Held tiles in slot order.
        board_tiles: Board tiles; held or matched ones are ignored.

    Returns:
        HintResult with found=False when no triplet exists.
    """
    board = [t for t in board_tiles if t.is_on_board]
    held_by_type = group_by_type(hand_tiles)
    board_by_type = group_by_type(board)

    # Types in the order they reach two held tiles
    pair_order: List[TileType] = []
    counts: Dict[TileType, int] = {}
    for tile in hand_tiles:
        counts[tile.type] = counts.get(tile.type, 0) + 1
        if counts[tile.type] == 2:
            pair_order.append(tile.type)

    for tile_type in pair_order:
        on_board = board_by_type.get(tile_type, [])
        if on_board:
            held = held_by_type[tile_type]
            return _hint([held[0], held[1], on_board[0]], HintSource.HAND_PAIR)

    for tile_type, held in held_by_type.items():
        on_board = board_by_type.get(tile_type, [])
        if len(on_board) >= 2:
            return _hint([held[0], on_board[0], on_board[1]], HintSource.HAND_SINGLE)

    for tile_type, on_board in board_by_type.items():
        if len(on_board) >= 3:
            return _hint(on_board[:3], HintSource.BOARD_TRIPLET)

    logger.info("No hint available (%d held, %d on board)", len(hand_tiles), len(board))
    return HintResult(found=False)


def _hint(tiles: List[Tile], source: str) -> HintResult:
    logger.debug("Hint %s: %s", source, [t.id for t in tiles])
    return HintResult(found=True, tiles=tiles, source=source)
