"""Game session API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import (
    CreateSessionRequest,
    SessionStateResponse,
    PickRequest,
    PickResponse,
    UndoResponse,
    HintResponse,
)
from ...core.session import GameSession, SessionStore
from ...core.exceptions import SessionNotFoundError, TileNotFoundError
from ..deps import get_sessions

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _get_session(store: SessionStore, session_id: str) -> GameSession:
    try:
        return store.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _state(session: GameSession) -> SessionStateResponse:
    return SessionStateResponse(**session.to_dict())


@router.post("", response_model=SessionStateResponse)
async def create_session(
    request: CreateSessionRequest,
    store: SessionStore = Depends(get_sessions),
) -> SessionStateResponse:
    """Start a new session at the requested level."""
    session = store.create(level=request.level, seed=request.seed)
    return _state(session)


@router.get("/{session_id}", response_model=SessionStateResponse)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> SessionStateResponse:
    """Current session state."""
    return _state(_get_session(store, session_id))


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
):
    """End a session."""
    try:
        store.delete(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"deleted": session_id}


@router.post("/{session_id}/pick", response_model=PickResponse)
async def pick_tile(
    session_id: str,
    request: PickRequest,
    store: SessionStore = Depends(get_sessions),
) -> PickResponse:
    """
    Pick a board tile into the hand.

    Matches resolve immediately; the response carries the match and the
    resulting state.
    """
    session = _get_session(store, session_id)
    try:
        result = session.pick_tile(request.tile_id)
    except TileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return PickResponse(**result.to_dict(), state=_state(session))


@router.post("/{session_id}/undo", response_model=UndoResponse)
async def undo(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> UndoResponse:
    """Return the last held tile to the board."""
    session = _get_session(store, session_id)
    tile = session.undo()
    return UndoResponse(
        success=tile is not None,
        tile_id=tile.id if tile else None,
        state=_state(session),
    )


@router.post("/{session_id}/hint", response_model=HintResponse)
async def hint(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> HintResponse:
    """Resolve a triplet suggested by the hint solver."""
    session = _get_session(store, session_id)
    result = session.use_hint()
    return HintResponse(**result.to_dict(), state=_state(session))


@router.post("/{session_id}/next-level", response_model=SessionStateResponse)
async def next_level(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> SessionStateResponse:
    """Advance to the next level after a win."""
    session = _get_session(store, session_id)
    try:
        session.next_level()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _state(session)


@router.post("/{session_id}/restart", response_model=SessionStateResponse)
async def restart(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> SessionStateResponse:
    """Restart from level 1."""
    session = _get_session(store, session_id)
    session.restart()
    return _state(session)
