"""FastAPI application for the game-result leaderboard."""

from fastapi import FastAPI

from submission_validator import __version__
from submission_validator.config import load_settings
from submission_validator.leaderboard.routes import (
    game_results_router,
    leaderboard_router,
)
from submission_validator.leaderboard.service import GameResultService
from submission_validator.logger import apply_logging_settings, get_logger

logger = get_logger(__name__)


def create_app(service: GameResultService | None = None) -> FastAPI:
    """Build the app around one in-memory result store.

    Args:
        service: Store to serve; a fresh empty one when None

    """
    app = FastAPI(title="Game Result Leaderboard", version=__version__)
    app.state.game_result_service = service or GameResultService()

    @app.get("/")
    def root():
        """Report that the service is up."""
        return {"service": "leaderboard", "status": "ok"}

    app.include_router(game_results_router)
    app.include_router(leaderboard_router)
    return app


def main() -> None:
    """Serve the leaderboard with uvicorn on the configured address."""
    import uvicorn  # noqa: PLC0415

    settings = load_settings()
    apply_logging_settings(settings)
    logger.info(
        "Starting leaderboard on %s:%s",
        settings.server.host,
        settings.server.port,
    )
    uvicorn.run(create_app(), host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    main()
