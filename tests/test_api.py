"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient
from triplet_mahjong.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def session_state(client):
    """Create a seeded session and return its state."""
    response = client.post("/api/sessions", json={"level": 1, "seed": 99})
    assert response.status_code == 200
    return response.json()


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root_returns_info(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert "version" in data
        assert "endpoints" in data


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_check(self, client):
        """Test health endpoint returns healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestBoardEndpoints:
    """Tests for board endpoints."""

    def test_generate_level_board(self, client):
        """Test generating the level 1 board."""
        response = client.post("/api/board/generate", json={"level": 1, "seed": 1})

        assert response.status_code == 200
        data = response.json()
        assert len(data["tiles"]) == 24
        assert data["level_config"]["rows"] == 4
        assert 0 < data["accessible_count"] < 24

    def test_generate_explicit_config(self, client):
        """Test generating from explicit geometry."""
        response = client.post(
            "/api/board/generate",
            json={"level_config": {"rows": 4, "cols": 4, "layers": 1, "tile_types": 4}},
        )

        data = response.json()
        assert len(data["tiles"]) == 15
        assert data["accessible_count"] == 15

    def test_generate_is_reproducible_with_seed(self, client):
        """Test same seed returns same board."""
        first = client.post("/api/board/generate", json={"level": 3, "seed": 5}).json()
        second = client.post("/api/board/generate", json={"level": 3, "seed": 5}).json()

        assert first["tiles"] == second["tiles"]

    def test_generate_rejects_too_many_types(self, client):
        """Test validation of tile type count."""
        response = client.post(
            "/api/board/generate",
            json={"level_config": {"rows": 4, "cols": 4, "layers": 1, "tile_types": 13}},
        )

        assert response.status_code == 422

    def test_screen_position(self, client):
        """Test board-to-canvas mapping."""
        response = client.post(
            "/api/board/screen-position",
            json={
                "position": {"x": 1, "y": 2, "z": 2},
                "level_config": {"rows": 4, "cols": 5, "layers": 3, "tile_types": 5},
                "bounds": {"x": 0, "y": 0, "width": 720, "height": 1000},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["x"] == pytest.approx(223.0)
        assert data["y"] == pytest.approx(543.5)

    def test_level_table(self, client):
        """Test progression table listing."""
        response = client.get("/api/board/levels")

        assert response.status_code == 200
        assert len(response.json()["levels"]) == 10


class TestSessionEndpoints:
    """Tests for session endpoints."""

    def test_create_session(self, session_state):
        """Test new session state."""
        assert session_state["level"] == 1
        assert session_state["score"] == 0
        assert session_state["is_playing"]
        assert len(session_state["tiles"]) == 24
        assert len(session_state["hand"]) == 7

    def test_get_session(self, client, session_state):
        """Test fetching a session."""
        response = client.get(f"/api/sessions/{session_state['session_id']}")

        assert response.status_code == 200
        assert response.json()["session_id"] == session_state["session_id"]

    def test_unknown_session(self, client):
        """Test unknown session returns 404."""
        response = client.get("/api/sessions/does-not-exist")

        assert response.status_code == 404

    def test_pick_accessible_tile(self, client, session_state):
        """Test picking a free tile."""
        tile = next(t for t in session_state["tiles"] if t["is_accessible"])
        response = client.post(
            f"/api/sessions/{session_state['session_id']}/pick",
            json={"tile_id": tile["id"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "picked"
        assert data["slot_index"] == 0
        assert data["state"]["hand"][0]["tile"]["id"] == tile["id"]

    def test_pick_blocked_tile(self, client, session_state):
        """Test picking a covered tile."""
        tile = next(t for t in session_state["tiles"] if not t["is_accessible"])
        response = client.post(
            f"/api/sessions/{session_state['session_id']}/pick",
            json={"tile_id": tile["id"]},
        )

        assert response.json()["status"] == "blocked"

    def test_pick_unknown_tile(self, client, session_state):
        """Test picking an unknown tile returns 404."""
        response = client.post(
            f"/api/sessions/{session_state['session_id']}/pick",
            json={"tile_id": "tile-999"},
        )

        assert response.status_code == 404

    def test_undo(self, client, session_state):
        """Test undo after a pick."""
        session_id = session_state["session_id"]
        tile = next(t for t in session_state["tiles"] if t["is_accessible"])
        client.post(f"/api/sessions/{session_id}/pick", json={"tile_id": tile["id"]})

        response = client.post(f"/api/sessions/{session_id}/undo")

        data = response.json()
        assert data["success"]
        assert data["tile_id"] == tile["id"]
        assert data["state"]["undo_uses_left"] == 2

    def test_hint(self, client, session_state):
        """Test hint resolves a triplet on a fresh board."""
        response = client.post(f"/api/sessions/{session_state['session_id']}/hint")

        data = response.json()
        assert data["found"]
        assert data["source"] == "board_triplet"
        assert len(data["tile_ids"]) == 3
        assert data["state"]["score"] == 100
        assert data["state"]["remaining_tiles"] == 21

    def test_next_level_before_win(self, client, session_state):
        """Test advancing early is rejected."""
        response = client.post(f"/api/sessions/{session_state['session_id']}/next-level")

        assert response.status_code == 400

    def test_restart(self, client, session_state):
        """Test restarting a session."""
        response = client.post(f"/api/sessions/{session_state['session_id']}/restart")

        assert response.status_code == 200
        assert response.json()["level"] == 1

    def test_delete_session(self, client, session_state):
        """Test deleting a session."""
        session_id = session_state["session_id"]

        assert client.delete(f"/api/sessions/{session_id}").status_code == 200
        assert client.get(f"/api/sessions/{session_id}").status_code == 404


class TestSimulateEndpoint:
    """Tests for simulation endpoint."""

    def test_simulate_level(self, client):
        """Test simulation statistics."""
        response = client.post(
            "/api/simulate",
            json={"level": 1, "iterations": 5, "strategy": "greedy", "seed": 1},
        )

        assert response.status_code == 200
        data = response.json()
        assert 0 <= data["clear_rate"] <= 1
        assert data["iterations"] == 5

    def test_simulate_invalid_strategy(self, client):
        """Test invalid strategy is rejected."""
        response = client.post(
            "/api/simulate",
            json={"level": 1, "iterations": 5, "strategy": "optimal"},
        )

        assert response.status_code == 400
