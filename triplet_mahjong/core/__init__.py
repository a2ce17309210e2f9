"""Core engine package.

This package contains board generation, the hand (accumulator), the hint
solver, the session host and the autoplay simulator.
"""
from .layout import generate_positions
from .board_generator import (
    BoardGenerator,
    get_board_generator,
    update_accessibility,
    is_tile_blocked,
)
from .hand_manager import HandManager, FULL
from .hint_solver import find_hint
from .session import GameSession, SessionStore, PickResult, PickStatus, get_session_store
from .simulator import LevelSimulator, SimulationResult, get_simulator
from .exceptions import TileNotFoundError, SessionNotFoundError

__all__ = [
    "generate_positions",
    "BoardGenerator",
    "get_board_generator",
    "update_accessibility",
    "is_tile_blocked",
    "HandManager",
    "FULL",
    "find_hint",
    "GameSession",
    "SessionStore",
    "PickResult",
    "PickStatus",
    "get_session_store",
    "LevelSimulator",
    "SimulationResult",
    "get_simulator",
    "TileNotFoundError",
    "SessionNotFoundError",
]
