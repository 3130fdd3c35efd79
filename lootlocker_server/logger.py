"""Level-filtered logging for the server client."""

from __future__ import annotations

import enum
import logging

VERY_VERBOSE = 5


class LogLevel(enum.IntEnum):
    """Severity of a single message."""

    IGNORE = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    DISPLAY = 4
    LOG = 5
    VERBOSE = 6
    VERY_VERBOSE = 7


class LogLevelLimit(enum.IntEnum):
    """The most detailed level that is still written out."""

    NO_LOGGING = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    DISPLAY = 4
    LOG = 5
    VERBOSE = 6
    VERY_VERBOSE = 7
    ALL_AS_NORMAL = 8


_PY_LEVELS = {
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.DISPLAY: logging.INFO,
    LogLevel.LOG: logging.INFO,
    LogLevel.VERBOSE: logging.DEBUG,
    LogLevel.VERY_VERBOSE: VERY_VERBOSE,
}


class ServerLogger:
    """Writes messages to a standard logger, filtered by a configured limit."""

    def __init__(
        self,
        limit: LogLevelLimit = LogLevelLimit.LOG,
        enabled: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self.limit = limit
        self.enabled = enabled
        self.logger = logger or logging.getLogger("lootlocker_server")

    def should_emit(self, level: LogLevel) -> bool:
        """Whether a message of this level passes the configured limit."""
        if level is LogLevel.IGNORE or not self.enabled:
            return False
        return self.limit is not LogLevelLimit.NO_LOGGING and self.limit >= level

    def log(self, message: str, level: LogLevel = LogLevel.DISPLAY) -> bool:
        """Write the message if its level passes; return whether it was written."""
        if not self.should_emit(level):
            return False
        if self.limit is LogLevelLimit.ALL_AS_NORMAL:
            level = LogLevel.DISPLAY
        self.logger.log(_PY_LEVELS[level], "%s", message)
        return True