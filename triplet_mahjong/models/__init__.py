"""Data models package.

This package contains tile and board models, game constants and API schemas.
"""
from .tile import (
    TileType,
    TILE_ATTRIBUTES,
    TilePosition,
    Tile,
    LevelConfig,
    HandSlot,
    MatchResult,
    HintResult,
    HintSource,
)
from .game_settings import (
    Canvas,
    TileDimensions,
    HandLayout,
    GameRules,
    LEVEL_PROGRESSION,
    get_level_config,
    get_level_table,
)

__all__ = [
    # Tile models
    "TileType",
    "TILE_ATTRIBUTES",
    "TilePosition",
    "Tile",
    "LevelConfig",
    "HandSlot",
    "MatchResult",
    "HintResult",
    "HintSource",
    # Game settings
    "Canvas",
    "TileDimensions",
    "HandLayout",
    "GameRules",
    "LEVEL_PROGRESSION",
    "get_level_config",
    "get_level_table",
]
