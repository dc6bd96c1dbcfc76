"""Request and response models of the leaderboard service."""

from pydantic import BaseModel, ConfigDict, Field


class GameResult(BaseModel):
    """A finished game as submitted by a client.

    ``id`` is assigned by the service; a client-supplied value is
    overwritten on insert.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = 0
    player_name: str = Field(..., alias="playerName")
    score: int
    time_in_seconds: float = Field(..., alias="timeInSeconds")
