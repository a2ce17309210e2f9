"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional


class LevelConfigSchema(BaseModel):
    """Explicit level geometry."""
    level: int = Field(default=1, ge=1, description="Level number")
    rows: int = Field(..., ge=1, le=20, description="Base layer rows")
    cols: int = Field(..., ge=1, le=20, description="Base layer columns")
    layers: int = Field(..., ge=1, le=10, description="Number of layers")
    tile_types: int = Field(..., ge=1, le=12, description="Distinct tile types in play")


class PositionSchema(BaseModel):
    """Board position."""
    x: int = Field(..., description="Column")
    y: int = Field(..., description="Row")
    z: int = Field(..., ge=0, description="Layer (0 = base)")


class BoundsSchema(BaseModel):
    """Target rectangle on the canvas."""
    x: float = Field(default=0.0, description="Left")
    y: float = Field(default=0.0, description="Top")
    width: float = Field(..., gt=0, description="Width")
    height: float = Field(..., gt=0, description="Height")


class GenerateBoardRequest(BaseModel):
    """Request schema for board generation."""
    level: Optional[int] = Field(default=None, ge=1, description="Use the progression table for this level")
    level_config: Optional[LevelConfigSchema] = Field(default=None, description="Explicit configuration")
    seed: Optional[int] = Field(default=None, description="Random seed for reproducible boards")


class GenerateBoardResponse(BaseModel):
    """Response schema for board generation."""
    level_config: Dict[str, int] = Field(..., description="Configuration used")
    tiles: List[Dict[str, Any]] = Field(..., description="Generated tiles")
    accessible_count: int = Field(..., description="Tiles pickable at start")


class ScreenPositionRequest(BaseModel):
    """Request schema for board-to-canvas mapping."""
    position: PositionSchema
    level_config: LevelConfigSchema
    bounds: BoundsSchema


class ScreenPositionResponse(BaseModel):
    """Canvas coordinates."""
    x: float
    y: float


class CreateSessionRequest(BaseModel):
    """Request schema for starting a session."""
    level: int = Field(default=1, ge=1, description="Starting level")
    seed: Optional[int] = Field(default=None, description="Random seed for reproducible boards")


class SessionStateResponse(BaseModel):
    """Full session state."""
    session_id: str
    level: int
    level_config: Dict[str, int]
    score: int
    moves: int
    is_playing: bool
    is_game_over: bool
    is_won: bool
    undo_uses_left: int
    hint_uses_left: int
    tiles: List[Dict[str, Any]]
    hand: List[Dict[str, Any]]
    remaining_tiles: int


class PickRequest(BaseModel):
    """Request schema for picking a tile."""
    tile_id: str = Field(..., description="Id of the board tile")


class PickResponse(BaseModel):
    """Response schema for picking a tile."""
    status: str = Field(..., description="picked/matched/hand_full/blocked/not_playing")
    slot_index: int = Field(..., description="Slot of the tile, -1 if not added")
    match: Dict[str, Any] = Field(..., description="Match result")
    state: SessionStateResponse


class UndoResponse(BaseModel):
    """Response schema for undo."""
    success: bool
    tile_id: Optional[str] = None
    state: SessionStateResponse


class HintResponse(BaseModel):
    """Response schema for a hint."""
    found: bool
    tile_ids: List[str] = Field(default=[], description="Resolved triplet")
    source: Optional[str] = Field(default=None, description="hand_pair/hand_single/board_triplet")
    state: SessionStateResponse


class SimulateRequest(BaseModel):
    """Request schema for autoplay simulation."""
    level: Optional[int] = Field(default=None, ge=1, description="Use the progression table for this level")
    level_config: Optional[LevelConfigSchema] = Field(default=None, description="Explicit configuration")
    iterations: int = Field(default=100, ge=1, le=2000, description="Number of games")
    strategy: str = Field(default="greedy", description="Strategy (random/greedy)")
    seed: Optional[int] = Field(default=None, description="Base random seed")
    use_powerups: bool = Field(default=False, description="Allow hints and undo")


class SimulateResponse(BaseModel):
    """Response schema for simulation."""
    clear_rate: float = Field(..., ge=0, le=1, description="Clear rate (0-1)")
    avg_moves: float = Field(..., description="Average picks per game")
    min_moves: int = Field(..., description="Minimum picks")
    max_moves: int = Field(..., description="Maximum picks")
    avg_score: float = Field(..., description="Average final score")
    iterations: int
    strategy: str


class ErrorResponse(BaseModel):
    """Error response schema."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(default=None, description="Detailed error information")
