"""Board generation API routes."""
import random

from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import (
    GenerateBoardRequest,
    GenerateBoardResponse,
    ScreenPositionRequest,
    ScreenPositionResponse,
)
from ...models.tile import TilePosition
from ...models.game_settings import get_level_table
from ...core.board_generator import BoardGenerator
from ..deps import get_generator, resolve_level_config

router = APIRouter(prefix="/api/board", tags=["board"])


@router.post("/generate", response_model=GenerateBoardResponse)
async def generate_board(
    request: GenerateBoardRequest,
    generator: BoardGenerator = Depends(get_generator),
) -> GenerateBoardResponse:
    """
    Generate a solvable board.

    Args:
        request: Level number or explicit configuration, optional seed.
        generator: BoardGenerator dependency.

    Returns:
        GenerateBoardResponse with tiles and initial accessibility.
    """
    try:
        level_config = resolve_level_config(request.level, request.level_config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid level config: {str(e)}")

    if request.seed is not None:
        generator = BoardGenerator(rng=random.Random(request.seed))

    tiles = generator.generate_board(level_config)

    return GenerateBoardResponse(
        level_config=level_config.to_dict(),
        tiles=[t.to_dict() for t in tiles],
        accessible_count=sum(1 for t in tiles if t.is_accessible),
    )


@router.post("/screen-position", response_model=ScreenPositionResponse)
async def screen_position(
    request: ScreenPositionRequest,
    generator: BoardGenerator = Depends(get_generator),
) -> ScreenPositionResponse:
    """Map a board position to canvas coordinates."""
    try:
        level_config = resolve_level_config(None, request.level_config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid level config: {str(e)}")

    position = TilePosition(x=request.position.x, y=request.position.y, z=request.position.z)
    x, y = generator.screen_position(position, level_config, request.bounds.model_dump())
    return ScreenPositionResponse(x=x, y=y)


@router.get("/levels")
async def list_levels():
    """Level progression table."""
    return {"levels": get_level_table()}
