"""Tests for the game session host and session store."""
import pytest

from triplet_mahjong.core.board_generator import update_accessibility
from triplet_mahjong.core.exceptions import SessionNotFoundError, TileNotFoundError
from triplet_mahjong.core.session import GameSession, PickStatus, SessionStore
from triplet_mahjong.models.game_settings import GameRules
from triplet_mahjong.models.tile import LevelConfig
from tests.helpers import flat_board, make_tile


def with_board(session, tiles):
    """Replace the session board with hand-built tiles."""
    session.tiles = tiles
    update_accessibility(session.tiles)
    return session


@pytest.fixture
def session():
    """Create a session on a seeded level 1 board."""
    game = GameSession(seed=123)
    game.start_level(1)
    return game


class TestStartLevel:
    """Test cases for dealing levels."""

    def test_level_one_board(self, session):
        """Level 1 deals 24 tiles and starts playing."""
        assert len(session.tiles) == 24
        assert session.is_playing
        assert session.hand.is_empty()
        assert session.level == 1

    def test_board_without_triplets_is_won(self):
        """A board too small to deal any tiles counts as cleared."""
        session = GameSession(seed=1)
        session.start_level(1, LevelConfig(rows=1, cols=2, layers=1, tile_types=1))

        assert session.tiles == []
        assert session.is_won
        assert not session.is_playing
        assert session.score == 50

    def test_next_level_requires_win(self, session):
        """Advancing before clearing the board is rejected."""
        with pytest.raises(ValueError):
            session.next_level()

    def test_restart_resets_progress(self, session):
        """Restart returns to level 1 with zero score and full budgets."""
        session.score = 500
        session.undo_uses_left = 0
        session.hint_uses_left = 0
        session.level = 4

        session.restart()

        assert session.level == 1
        assert session.score == 0
        assert session.undo_uses_left == 3
        assert session.hint_uses_left == 2
        assert session.is_playing


class TestPickTile:
    """Test cases for picking tiles."""

    def test_pick_accessible_tile(self, session):
        """A free tile moves to the hand."""
        tile = next(t for t in session.tiles if t.is_accessible)

        result = session.pick_tile(tile.id)

        assert result.status == PickStatus.PICKED
        assert result.slot_index == 0
        assert tile.is_in_hand
        assert session.moves == 1

    def test_pick_blocked_tile(self, session):
        """Covered tiles cannot be picked."""
        tile = next(t for t in session.tiles if not t.is_accessible)

        result = session.pick_tile(tile.id)

        assert result.status == PickStatus.BLOCKED
        assert not tile.is_in_hand
        assert session.moves == 0

    def test_pick_same_tile_twice(self, session):
        """A held tile is no longer pickable."""
        tile = next(t for t in session.tiles if t.is_accessible)
        session.pick_tile(tile.id)

        assert session.pick_tile(tile.id).status == PickStatus.BLOCKED
        assert session.hand.count() == 1

    def test_unknown_tile(self, session):
        """Unknown ids are a caller error."""
        with pytest.raises(TileNotFoundError):
            session.pick_tile("tile-999")

    def test_match_scores_and_wins(self):
        """Clearing the only triplet scores the match plus the level bonus."""
        session = with_board(GameSession(seed=1), flat_board([3, 3, 3]))
        session.is_playing = True

        session.pick_tile("t0")
        session.pick_tile("t1")
        result = session.pick_tile("t2")

        assert result.status == PickStatus.MATCHED
        assert result.match.matched
        assert session.hand.is_empty()
        assert session.is_won
        assert not session.is_playing
        assert session.score == 100 + 50

    def test_match_without_win(self):
        """A match with tiles left keeps the game going."""
        session = with_board(GameSession(seed=1), flat_board([3, 3, 3, 4, 4, 4]))
        session.is_playing = True

        for tile_id in ["t0", "t1", "t2"]:
            session.pick_tile(tile_id)

        assert session.score == 100
        assert session.is_playing
        assert not session.is_won

    def test_full_hand_is_game_over(self):
        """Filling the hand without a match ends the game."""
        session = GameSession(rules=GameRules(hand_capacity=3), seed=1)
        with_board(session, flat_board([0, 1, 2, 0, 1, 2, 0, 1, 2]))
        session.is_playing = True

        for tile_id in ["t0", "t1", "t2"]:
            session.pick_tile(tile_id)

        assert session.is_game_over
        assert not session.is_playing
        assert session.pick_tile("t3").status == PickStatus.NOT_PLAYING

    def test_picking_frees_tile_below(self):
        """Accessibility is refreshed after every pick."""
        base = make_tile("base", 0, x=0, y=0, z=0)
        top = make_tile("top", 1, x=0, y=0, z=1)
        session = with_board(GameSession(seed=1), [base, top, make_tile("x", 2, x=2)])
        session.is_playing = True

        assert not base.is_accessible
        session.pick_tile("top")
        assert base.is_accessible


class TestUndo:
    """Test cases for the undo power-up."""

    def test_undo_returns_tile(self, session):
        """Undo puts the tile back on the board and uses one charge."""
        tile = next(t for t in session.tiles if t.is_accessible)
        session.pick_tile(tile.id)

        returned = session.undo()

        assert returned is tile
        assert tile.is_accessible
        assert not tile.is_in_hand
        assert session.hand.is_empty()
        assert session.undo_uses_left == 2

    def test_undo_returns_latest_pick(self):
        """The last picked tile comes back even when it sorts lower."""
        session = with_board(GameSession(seed=1), flat_board([5, 2, 7, 7]))
        session.is_playing = True
        first, second = session.tiles[0], session.tiles[1]
        session.pick_tile("t0")
        session.pick_tile("t1")

        returned = session.undo()

        assert returned is second
        assert second.is_accessible
        assert not second.is_in_hand
        assert first.is_in_hand
        assert session.hand.tiles_in_hand() == [first]
        assert session.undo_uses_left == 2

    def test_undo_skips_matched_tiles(self):
        """Tiles cleared by a match are not undone."""
        session = with_board(GameSession(seed=1), flat_board([4, 3, 3, 3, 8, 8, 8]))
        session.is_playing = True
        for tile_id in ["t0", "t1", "t2", "t3"]:
            session.pick_tile(tile_id)

        returned = session.undo()

        assert returned is session.tiles[0]
        assert session.hand.is_empty()
        assert session.undo() is None
        assert session.undo_uses_left == 2

    def test_undo_empty_hand(self, session):
        """Nothing to undo keeps the charge."""
        assert session.undo() is None
        assert session.undo_uses_left == 3

    def test_undo_budget(self, session):
        """No undo once the charges are spent."""
        session.undo_uses_left = 0
        tile = next(t for t in session.tiles if t.is_accessible)
        session.pick_tile(tile.id)

        assert session.undo() is None
        assert tile.is_in_hand


class TestHint:
    """Test cases for the hint power-up."""

    def test_hint_resolves_triplets(self):
        """Hints clear triplets, score them and can win the level."""
        session = with_board(GameSession(seed=1), flat_board([0, 1, 0, 1, 0, 1]))
        session.is_playing = True

        first = session.use_hint()
        assert first.found
        assert [t.id for t in first.tiles] == ["t0", "t2", "t4"]
        assert session.score == 100
        assert session.hint_uses_left == 1

        second = session.use_hint()
        assert second.found
        assert session.is_won
        assert session.hint_uses_left == 0
        assert session.score == 100 + 100 + 50

    def test_hint_uses_held_tiles(self):
        """Held tiles are taken out of the hand by the hint."""
        session = with_board(GameSession(seed=1), flat_board([2, 2, 2, 5, 5, 5]))
        session.is_playing = True
        session.pick_tile("t3")
        session.pick_tile("t4")

        hint = session.use_hint()

        assert [t.id for t in hint.tiles] == ["t3", "t4", "t5"]
        assert session.hand.is_empty()
        assert all(session.get_tile(i).is_matched for i in ["t3", "t4", "t5"])

    def test_hint_not_found_changes_nothing(self):
        """A failed hint keeps the score and the charge."""
        session = with_board(GameSession(seed=1), flat_board([0, 1]))
        session.is_playing = True

        hint = session.use_hint()

        assert not hint.found
        assert session.score == 0
        assert session.hint_uses_left == 2

    def test_hint_budget(self, session):
        """No hint once the charges are spent."""
        session.hint_uses_left = 0

        assert not session.use_hint().found


class TestWinAndNextLevel:
    """Test cases for level progression."""

    def test_next_level_after_win(self):
        """Winning allows moving to level 2."""
        session = with_board(GameSession(seed=1), flat_board([3, 3, 3]))
        session.is_playing = True
        for tile_id in ["t0", "t1", "t2"]:
            session.pick_tile(tile_id)

        session.next_level()

        assert session.level == 2
        assert session.is_playing
        assert len(session.tiles) == 30
        assert session.score == 150


class TestSessionStore:
    """Test cases for the in-memory session store."""

    def test_create_and_get(self):
        """Created sessions can be fetched by id."""
        store = SessionStore()
        session = store.create(level=2, seed=5)

        assert store.get(session.id) is session
        assert session.level == 2

    def test_unknown_session(self):
        """Unknown ids raise SessionNotFoundError."""
        with pytest.raises(SessionNotFoundError):
            SessionStore().get("missing")

    def test_delete(self):
        """Deleted sessions are gone."""
        store = SessionStore()
        session = store.create()
        store.delete(session.id)

        with pytest.raises(SessionNotFoundError):
            store.get(session.id)

    def test_oldest_session_evicted(self):
        """The store keeps at most max_sessions sessions."""
        store = SessionStore(max_sessions=2)
        first = store.create()
        store.create()
        store.create()

        assert len(store) == 2
        with pytest.raises(SessionNotFoundError):
            store.get(first.id)
