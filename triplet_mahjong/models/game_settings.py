"""
Game constants and level progression.

Board width stays fixed at five columns; rows, layers and tile variety
grow with the level number.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .tile import LevelConfig


@dataclass(frozen=True)
class Canvas:
    """Logical canvas size the presentation layer renders into."""
    width: int = 720
    height: int = 1280


@dataclass(frozen=True)
class TileDimensions:
    """Tile footprint in canvas pixels."""
    width: int = 125
    height: int = 125
    depth: int = 10  # per-layer 3D skew
    padding: int = 2


@dataclass(frozen=True)
class HandLayout:
    """Accumulator row geometry."""
    slot_width: int = 130
    slot_height: int = 130
    slot_padding: int = 6
    bottom_margin: int = 120


@dataclass(frozen=True)
class GameRules:
    """Scoring and power-up budget."""
    hand_capacity: int = 7
    match_count: int = 3
    score_per_match: int = 100
    score_per_hint: int = 100
    bonus_per_level: int = 50
    undo_uses: int = 3
    hint_uses: int = 2


DEFAULT_CANVAS = Canvas()
DEFAULT_TILE_DIMENSIONS = TileDimensions()
DEFAULT_HAND_LAYOUT = HandLayout()
DEFAULT_RULES = GameRules()

BASE_COLS = 5

# (rows, layers, tile_types) per level; the last row repeats for level 10+
LEVEL_PROGRESSION: List[Tuple[int, int, int]] = [
    (4, 2, 5),  # 1: introduction with two layers
    (4, 3, 5),  # 2: third layer
    (5, 3, 6),  # 3: more rows
    (5, 4, 6),  # 4: fourth layer
    (5, 4, 7),  # 5: more suits
    (6, 4, 7),  # 6
    (6, 5, 8),  # 7: fifth layer
    (6, 5, 8),  # 8
    (7, 5, 8),  # 9
    (7, 6, 8),  # 10+: maximum difficulty
]


def get_level_config(level: int) -> LevelConfig:
    """Get the level configuration for a 1-based level number."""
    if level < 1:
        raise ValueError(f"Level must be >= 1, got {level}")

    index = min(level - 1, len(LEVEL_PROGRESSION) - 1)
    rows, layers, tile_types = LEVEL_PROGRESSION[index]

    return LevelConfig(
        level=level,
        rows=rows,
        cols=BASE_COLS,
        layers=layers,
        tile_types=tile_types,
        tiles_per_type=3,
    )


def get_level_table() -> List[Dict[str, int]]:
    """Return the progression table as dictionaries."""
    return [get_level_config(i + 1).to_dict() for i in range(len(LEVEL_PROGRESSION))]
