"""Errors raised when callers and engine state disagree."""


class TileNotFoundError(KeyError):
    """A tile id is not part of the current board."""

    def __init__(self, tile_id: str):
        super().__init__(tile_id)
        self.tile_id = tile_id

    def __str__(self) -> str:
        return f"Tile not found: {self.tile_id}"


class SessionNotFoundError(KeyError):
    """A session id is unknown (expired or never created)."""

    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Session not found: {self.session_id}"
