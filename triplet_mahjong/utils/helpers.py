"""Utility helper functions."""
import random
from typing import Dict, Iterable, List, Optional, TypeVar

from ..models.tile import Tile, TileType

T = TypeVar("T")


def shuffle_in_place(items: List[T], rng: Optional[random.Random] = None) -> None:
    """
    Shuffle a list in place with Fisher-Yates.

    Args:
        items: List to shuffle.
        rng: Random source (module-level random when None).
    """
    rng = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def group_by_type(tiles: Iterable[Tile]) -> Dict[TileType, List[Tile]]:
    """
    Group tiles by type.

    The mapping keeps first-encountered order, which match and hint
    priority depend on.
    """
    groups: Dict[TileType, List[Tile]] = {}
    for tile in tiles:
        groups.setdefault(tile.type, []).append(tile)
    return groups
