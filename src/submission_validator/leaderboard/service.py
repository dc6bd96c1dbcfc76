"""In-memory storage of game results."""

import itertools
import threading

from submission_validator.leaderboard.models import GameResult
from submission_validator.logger import get_logger

logger = get_logger(__name__)


class GameResultService:
    """Keeps game results in a list for the lifetime of the process."""

    def __init__(self) -> None:
        """Initialize an empty store; ids start at 1."""
        self._game_results: list[GameResult] = []
        self._next_id = itertools.count(1)
        self._id_lock = threading.Lock()

    def add_game_result(self, game_result: GameResult) -> GameResult:
        """Assign the next id to ``game_result`` and store it.

        Args:
            game_result: Result to store; its ``id`` is overwritten

        Returns:
            The stored result

        """
        with self._id_lock:
            game_result.id = next(self._next_id)
        self._game_results.append(game_result)
        logger.debug(
            "Stored game result %s for %s",
            game_result.id,
            game_result.player_name,
        )
        return game_result

    def get_game_result(self, game_result_id: int) -> GameResult | None:
        """Return the result with ``game_result_id`` or None."""
        return next(
            (r for r in self._game_results if r.id == game_result_id), None
        )

    def get_game_results(self) -> list[GameResult]:
        """Return a copy of all stored results in insertion order."""
        return list(self._game_results)

    def delete_game_result(self, game_result_id: int) -> bool:
        """Remove the result with ``game_result_id``.

        Returns:
            True if a result was removed

        """
        remaining = [r for r in self._game_results if r.id != game_result_id]
        removed = len(remaining) != len(self._game_results)
        self._game_results[:] = remaining
        return removed


def get_leaderboard(service: GameResultService) -> list[GameResult]:
    """Return results by score descending, then time ascending."""
    return sorted(
        service.get_game_results(),
        key=lambda r: (-r.score, r.time_in_seconds),
    )
