"""Game session host: drives board, hand and hint solver for one player."""
import logging
import random
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

from ..models.tile import HintResult, LevelConfig, MatchResult, Tile
from ..models.game_settings import GameRules, DEFAULT_RULES, get_level_config
from .board_generator import BoardGenerator, update_accessibility
from .hand_manager import HandManager, FULL
from .hint_solver import find_hint
from .exceptions import TileNotFoundError, SessionNotFoundError

logger = logging.getLogger(__name__)


class PickStatus:
    """Outcome of a pick request."""
    PICKED = "picked"
    MATCHED = "matched"
    HAND_FULL = "hand_full"
    BLOCKED = "blocked"
    NOT_PLAYING = "not_playing"


@dataclass
class PickResult:
    """Result of picking a board tile."""
    status: str
    slot_index: int = FULL
    match: MatchResult = field(default_factory=lambda: MatchResult(matched=False))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "status": self.status,
            "slot_index": self.slot_index,
            "match": self.match.to_dict(),
        }


class GameSession:
    """One player's run through consecutive levels.

    All mutations go through this class, one at a time: a pick resolves
    its match (if any) before returning, so a tile can never be picked
    twice and a hint never runs while a match is pending.
    """

    def __init__(
        self,
        rules: GameRules = DEFAULT_RULES,
        seed: Optional[int] = None,
        session_id: Optional[str] = None,
    ):
        self.id = session_id or uuid.uuid4().hex
        self.rules = rules
        self.seed = seed
        self._generator = BoardGenerator(rng=random.Random(seed))
        self.hand = HandManager(rules=rules)

        self.level = 1
        self.level_config: LevelConfig = get_level_config(1)
        self.score = 0
        self.tiles: List[Tile] = []
        self.undo_uses_left = rules.undo_uses
        self.hint_uses_left = rules.hint_uses
        self.moves = 0
        # Held tiles in pick order, for undo
        self._pick_order: List[Tile] = []
        self.is_playing = False
        self.is_game_over = False
        self.is_won = False

    def start_level(self, level: int, level_config: Optional[LevelConfig] = None) -> None:
        """Deal a fresh board for a level and empty the hand."""
        self.level_config = level_config or get_level_config(level)
        self.level = level
        self.hand.reset()
        self.tiles = self._generator.generate_board(self.level_config)
        self.moves = 0
        self._pick_order = []
        self.is_playing = True
        self.is_game_over = False
        self.is_won = False
        logger.info("Session %s started level %d (%d tiles)", self.id, level, len(self.tiles))
        # Boards too small for a single triplet start out cleared
        self._check_win()

    def next_level(self) -> None:
        """Advance after a win."""
        if not self.is_won:
            raise ValueError("Level is not cleared yet")
        self.start_level(self.level + 1)

    def restart(self) -> None:
        """Start over from level 1 with zero score and full power-ups."""
        self.score = 0
        self.undo_uses_left = self.rules.undo_uses
        self.hint_uses_left = self.rules.hint_uses
        self.start_level(1)

    def get_tile(self, tile_id: str) -> Tile:
        """Look up a tile of the current board."""
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        raise TileNotFoundError(tile_id)

    def remaining_tiles(self) -> List[Tile]:
        """Tiles still on the board."""
        return [t for t in self.tiles if t.is_on_board]

    def pick_tile(self, tile_id: str) -> PickResult:
        """
        Move a board tile into the hand and resolve any match.

        Args:
            tile_id: Id of the tile to pick.

        Returns:
            PickResult describing what happened.

        Raises:
            TileNotFoundError: If the id is not on the current board.
        """
        tile = self.get_tile(tile_id)

        if not self.is_playing:
            return PickResult(status=PickStatus.NOT_PLAYING)
        if not tile.is_on_board or not tile.is_accessible:
            return PickResult(status=PickStatus.BLOCKED)
        if self.hand.is_full():
            return PickResult(status=PickStatus.HAND_FULL)

        slot_index = self.hand.add(tile)
        self._pick_order.append(tile)
        self.moves += 1
        update_accessibility(self.tiles)

        match = self.hand.check_match()
        if match.matched:
            self.hand.remove_matched(match.tiles)
            self.score += match.score_gained
            logger.debug("Session %s matched %s", self.id, match.tiles[0].type.name)
            self._check_win()
            return PickResult(status=PickStatus.MATCHED, slot_index=slot_index, match=match)

        if self.hand.is_full():
            self._game_over()

        return PickResult(status=PickStatus.PICKED, slot_index=slot_index, match=match)

    def undo(self) -> Optional[Tile]:
        """
        Return the most recently picked tile that is still held.

        A use is consumed only when a tile actually came back.
        """
        if not self.is_playing or self.undo_uses_left <= 0:
            return None

        self._pick_order = [t for t in self._pick_order if t.is_in_hand]
        if not self._pick_order:
            return None

        tile = self._pick_order.pop()
        self.hand.remove_tile(tile)

        update_accessibility(self.tiles)
        self.undo_uses_left -= 1
        logger.debug("Session %s undo returned %s", self.id, tile.id)
        return tile

    def use_hint(self) -> HintResult:
        """
        Resolve a triplet found by the hint solver.

        The triplet goes through the same removal path as a manual match.
        Nothing changes when no triplet is found.
        """
        if not self.is_playing or self.hint_uses_left <= 0:
            return HintResult(found=False)

        hint = find_hint(self.hand.tiles_in_hand(), self.remaining_tiles())
        if not hint.found:
            return hint

        self.hand.remove_matched(hint.tiles)
        update_accessibility(self.tiles)
        self.score += self.rules.score_per_hint
        self.hint_uses_left -= 1
        logger.debug("Session %s used hint (%s)", self.id, hint.source)
        self._check_win()
        return hint

    def _check_win(self) -> None:
        if self.remaining_tiles() or not self.hand.is_empty():
            return

        self.is_won = True
        self.is_playing = False
        self.score += self.level * self.rules.bonus_per_level
        logger.info("Session %s cleared level %d (score %d)", self.id, self.level, self.score)

    def _game_over(self) -> None:
        self.is_game_over = True
        self.is_playing = False
        logger.info("Session %s game over on level %d (score %d)", self.id, self.level, self.score)

    def to_dict(self) -> Dict[str, Any]:
        """Convert session state to dictionary."""
        return {
            "session_id": self.id,
            "level": self.level,
            "level_config": self.level_config.to_dict(),
            "score": self.score,
            "moves": self.moves,
            "is_playing": self.is_playing,
            "is_game_over": self.is_game_over,
            "is_won": self.is_won,
            "undo_uses_left": self.undo_uses_left,
            "hint_uses_left": self.hint_uses_left,
            "tiles": [t.to_dict() for t in self.tiles],
            "hand": [slot.to_dict() for slot in self.hand.slots()],
            "remaining_tiles": len(self.remaining_tiles()),
        }


class SessionStore:
    """In-memory sessions, oldest evicted past the limit."""

    def __init__(self, max_sessions: int = 1000, rules: GameRules = DEFAULT_RULES):
        self.max_sessions = max_sessions
        self.rules = rules
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()

    def create(self, level: int = 1, seed: Optional[int] = None) -> GameSession:
        """Create a session and deal its first level."""
        session = GameSession(rules=self.rules, seed=seed)
        session.start_level(level)
        self._sessions[session.id] = session

        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted session %s", evicted_id)

        return session

    def get(self, session_id: str) -> GameSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)

    def __len__(self) -> int:
        return len(self._sessions)


# Singleton instance
_session_store = None


def get_session_store() -> SessionStore:
    """Get or create session store singleton instance."""
    global _session_store
    if _session_store is None:
        from ..config import get_settings

        settings = get_settings()
        _session_store = SessionStore(
            max_sessions=settings.max_sessions,
            rules=settings.game_rules(),
        )
    return _session_store
