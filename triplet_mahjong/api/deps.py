"""API dependencies."""
from typing import Optional

from ..models.tile import LevelConfig
from ..models.game_settings import get_level_config
from ..models.schemas import LevelConfigSchema
from ..core.board_generator import get_board_generator, BoardGenerator
from ..core.session import get_session_store, SessionStore
from ..core.simulator import get_simulator, LevelSimulator


def get_generator() -> BoardGenerator:
    """Dependency for board generator."""
    return get_board_generator()


def get_sessions() -> SessionStore:
    """Dependency for session store."""
    return get_session_store()


def get_level_simulator() -> LevelSimulator:
    """Dependency for level simulator."""
    return get_simulator()


def resolve_level_config(
    level: Optional[int], level_config: Optional[LevelConfigSchema]
) -> LevelConfig:
    """Build a LevelConfig from either a level number or explicit geometry."""
    if level_config is not None:
        return LevelConfig(
            level=level_config.level,
            rows=level_config.rows,
            cols=level_config.cols,
            layers=level_config.layers,
            tile_types=level_config.tile_types,
        )
    return get_level_config(level or 1)
