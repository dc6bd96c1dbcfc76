"""In-memory game-result store and leaderboard HTTP service."""

from submission_validator.leaderboard.models import GameResult
from submission_validator.leaderboard.service import (
    GameResultService,
    get_leaderboard,
)

__all__ = ["GameResult", "GameResultService", "get_leaderboard"]
