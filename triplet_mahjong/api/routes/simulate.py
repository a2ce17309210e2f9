"""Autoplay simulation API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import SimulateRequest, SimulateResponse
from ...core.simulator import LevelSimulator, SimulationStrategy
from ..deps import get_level_simulator, resolve_level_config

router = APIRouter(prefix="/api", tags=["simulate"])


@router.post("/simulate", response_model=SimulateResponse)
async def simulate_level(
    request: SimulateRequest,
    simulator: LevelSimulator = Depends(get_level_simulator),
) -> SimulateResponse:
    """
    Run Monte Carlo autoplay on a level.

    Args:
        request: SimulateRequest with level and simulation parameters.
        simulator: LevelSimulator dependency.

    Returns:
        SimulateResponse with simulation statistics.
    """
    valid_strategies = [s.value for s in SimulationStrategy]
    if request.strategy not in valid_strategies:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid strategy. Must be one of: {valid_strategies}",
        )

    try:
        level_config = resolve_level_config(request.level, request.level_config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid level config: {str(e)}")

    result = simulator.simulate(
        level_config,
        iterations=request.iterations,
        strategy=request.strategy,
        seed=request.seed,
        use_powerups=request.use_powerups,
    )
    return SimulateResponse(**result.to_dict())
