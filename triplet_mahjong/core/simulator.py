"""Autoplay simulation to estimate how often a level gets cleared."""
import logging
import random
import statistics
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Any, Optional

from ..models.tile import LevelConfig, Tile
from ..models.game_settings import GameRules, DEFAULT_RULES
from .session import GameSession

logger = logging.getLogger(__name__)


class SimulationStrategy(str, Enum):
    """Simulation strategy enumeration."""
    RANDOM = "random"
    GREEDY = "greedy"


@dataclass
class SimulationResult:
    """Result of level simulation."""
    clear_rate: float
    avg_moves: float
    min_moves: int
    max_moves: int
    avg_score: float
    iterations: int
    strategy: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "clear_rate": round(self.clear_rate, 3),
            "avg_moves": round(self.avg_moves, 2),
            "min_moves": self.min_moves,
            "max_moves": self.max_moves,
            "avg_score": round(self.avg_score, 2),
            "iterations": self.iterations,
            "strategy": self.strategy,
        }


class LevelSimulator:
    """Plays levels automatically with simple strategies."""

    def __init__(self, rules: GameRules = DEFAULT_RULES):
        self.rules = rules

    def simulate(
        self,
        level_config: LevelConfig,
        iterations: int = 100,
        strategy: str = "greedy",
        seed: Optional[int] = None,
        use_powerups: bool = False,
    ) -> SimulationResult:
        """
        Run Monte Carlo simulation on a level.

        Args:
            level_config: Level to play.
            iterations: Number of games.
            strategy: Strategy to use (random/greedy).
            seed: Base seed; game i uses seed + i.
            use_powerups: Let the bot fall back to hints and undo when stuck.

        Returns:
            SimulationResult with statistics.
        """
        if iterations < 1:
            raise ValueError(f"iterations must be positive, got {iterations}")
        strategy_enum = SimulationStrategy(strategy)

        rng = random.Random(seed)
        sessions: List[GameSession] = []

        for i in range(iterations):
            game_seed = seed + i if seed is not None else None
            session = GameSession(rules=self.rules, seed=game_seed)
            session.start_level(level_config.level, level_config)
            self._play_game(session, strategy_enum, rng, use_powerups)
            sessions.append(session)

        moves_list = [s.moves for s in sessions]
        cleared = sum(1 for s in sessions if s.is_won)

        logger.info(
            "Simulated level %d x%d (%s): clear rate %.2f",
            level_config.level, iterations, strategy, cleared / iterations,
        )

        return SimulationResult(
            clear_rate=cleared / iterations,
            avg_moves=statistics.mean(moves_list),
            min_moves=min(moves_list),
            max_moves=max(moves_list),
            avg_score=statistics.mean(s.score for s in sessions),
            iterations=iterations,
            strategy=strategy_enum.value,
        )

    def _play_game(
        self,
        session: GameSession,
        strategy: SimulationStrategy,
        rng: random.Random,
        use_powerups: bool,
    ) -> None:
        """Play until the level is won or lost."""
        while session.is_playing:
            if use_powerups and self._hand_is_critical(session):
                if session.use_hint().found:
                    continue

            accessible = [t for t in session.tiles if t.is_accessible]
            if not accessible:
                if use_powerups and session.undo() is not None:
                    continue
                # Only reachable with an empty board and tiles still held,
                # which dealing in whole triplets rules out
                logger.warning("Session %s has no accessible tiles", session.id)
                break

            if strategy == SimulationStrategy.RANDOM:
                tile = rng.choice(accessible)
            else:
                tile = self._select_greedy_tile(accessible, session)

            session.pick_tile(tile.id)

    def _hand_is_critical(self, session: GameSession) -> bool:
        return session.hand.count() >= session.hand.capacity - 1

    def _select_greedy_tile(self, accessible: List[Tile], session: GameSession) -> Tile:
        """Prefer tiles whose type is already held, then higher layers."""
        held_counts: Dict[int, int] = {}
        for held in session.hand.tiles_in_hand():
            held_counts[held.type] = held_counts.get(held.type, 0) + 1

        return max(
            accessible,
            key=lambda t: (held_counts.get(t.type, 0), t.position.z),
        )


# Singleton instance
_simulator = None


def get_simulator() -> LevelSimulator:
    """Get or create simulator singleton instance."""
    global _simulator
    if _simulator is None:
        from ..config import get_settings

        _simulator = LevelSimulator(rules=get_settings().game_rules())
    return _simulator
