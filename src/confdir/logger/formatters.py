"""Console formatter for the confdir CLI.

INFO records are printed as the bare message so command output stays
clean; every other level gets a timestamp, the logger name and a
colored level name.
"""

import logging

from confdir.constants import LOG_COLORS


class HybridConsoleFormatter(logging.Formatter):
    """Bare message for INFO, colored structured line for other levels.

    Example Output:
        INFO:     "/home/alice/.config/myapp"
        WARNING:  "12:30:45 - confdir.store - WARNING - Could not read ..."
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a record according to its level.

        The colored level name only lives for this call, so other
        handlers sharing the record see the plain name.
        """
        if record.levelno == logging.INFO:
            return record.getMessage()

        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname
