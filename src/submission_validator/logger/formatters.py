"""Console formatters.

- ColoredConsoleFormatter: ANSI colour on the level name
- HybridConsoleFormatter: bare message for INFO, coloured structured
  output for every other level
"""

import logging

from submission_validator.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that colours the level name.

    The record's levelname is swapped only for the duration of
    ``format()`` so other handlers see the original value.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with a coloured level name."""
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class HybridConsoleFormatter(logging.Formatter):
    """Plain message for INFO records, structured for the rest.

    Example Output:
        INFO:     "Validating abgabe.xml"
        WARNING:  "12:30:45 - submission_validator - WARNING - Bad value"
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize with the structured format used above INFO.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record depending on its level."""
        if record.levelno == logging.INFO:
            return record.getMessage()
        return self._colored_formatter.format(record)
