"""Command-line interface for submission-validator."""

from submission_validator.cli.parser import CLIParser
from submission_validator.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
