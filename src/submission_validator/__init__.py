"""Top-level package for submission-validator.

Validates XML submission files against the bundled schema and confirms the
referenced GitHub repository and commit exist. Also ships a small in-memory
game-result leaderboard service.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("submission-validator")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
