"""HTTP routes of the leaderboard service.

Two routers share one ``GameResultService`` stored on ``app.state``:

- ``/game-results``: create, list, fetch and delete single results
- ``/leaderboard``: all results in ranking order
"""

from fastapi import APIRouter, Depends, Request

from submission_validator.leaderboard.models import GameResult
from submission_validator.leaderboard.service import (
    GameResultService,
    get_leaderboard,
)


def get_service(request: Request) -> GameResultService:
    """Return the result store of the app handling ``request``.

    Args:
        request: Incoming request

    Returns:
        The app-wide ``GameResultService``

    """
    return request.app.state.game_result_service


game_results_router = APIRouter(prefix="/game-results", tags=["game-results"])
leaderboard_router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@game_results_router.get("/{game_result_id}")
def get_game_result(
    game_result_id: int,
    service: GameResultService = Depends(get_service),
) -> GameResult | None:
    """Return one result, or ``null`` when the id is unknown."""
    return service.get_game_result(game_result_id)


@game_results_router.get("")
def get_all_game_results(
    service: GameResultService = Depends(get_service),
) -> list[GameResult]:
    """Return every stored result in insertion order."""
    return service.get_game_results()


@game_results_router.post("")
def add_game_result(
    game_result: GameResult,
    service: GameResultService = Depends(get_service),
) -> None:
    """Store a result; any ``id`` in the body is replaced."""
    service.add_game_result(game_result)


@game_results_router.delete("/{game_result_id}")
def delete_game_result(
    game_result_id: int,
    service: GameResultService = Depends(get_service),
) -> None:
    """Remove a result; unknown ids are ignored."""
    service.delete_game_result(game_result_id)


@leaderboard_router.get("")
def leaderboard(
    service: GameResultService = Depends(get_service),
) -> list[GameResult]:
    """Return results by score descending, then time ascending."""
    return get_leaderboard(service)
