from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides the severity levels understood by the logger, the terminal
palette used for console output, the file categories and the default
retention limits applied to persisted logs.
"""

import logging
from enum import Enum
from typing import Dict, Union

from rotalog.domain.exceptions import ConfigurationError

DEFAULT_MAX_LOG_FILES = 5
DEFAULT_MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
LOG_DIR_NAME = "logs"
LOG_EXTENSION = ".log"

# -----------------------------------------------------------------------------
# SEVERITY LEVELS
# -----------------------------------------------------------------------------

class LogLevel(str, Enum):
    """Severity attached to every emitted message. The value is the printed tag."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"

    @property
    def priority(self) -> int:
        return _PRIORITIES[self]

    @property
    def severity(self) -> int:
        """Numeric level used when the record travels through ``logging``."""
        return _SEVERITIES[self]

    @classmethod
    def parse(cls, value: Union["LogLevel", str]) -> "LogLevel":
        """
        Resolve a level from an instance or a case-insensitive name.

        Args:
            value: LogLevel member or its name ('warning' and 'critical' accepted).

        Returns:
            LogLevel: The matching member.

        Raises:
            ConfigurationError: If the name is unknown.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ConfigurationError(f"Unknown log level: '{value}'") from None


_PRIORITIES: Dict[LogLevel, int] = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
    LogLevel.FATAL: 4,
}

_SEVERITIES: Dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}

_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}

# -----------------------------------------------------------------------------
# CONSOLE PALETTE
# -----------------------------------------------------------------------------

RESET = "\x1b[0m"

LEVEL_PALETTE: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "\x1b[37m",  # White
    LogLevel.INFO: "\x1b[32m",  # Green
    LogLevel.WARN: "\x1b[33m",  # Yellow
    LogLevel.ERROR: "\x1b[31m",  # Red
    LogLevel.FATAL: "\x1b[41m",  # Red background
}

# -----------------------------------------------------------------------------
# FILE CATEGORIES
# -----------------------------------------------------------------------------

class LogCategory(str, Enum):
    """Partition of persisted files by severity class."""
    APP = "app"
    ERROR = "error"

    @classmethod
    def for_severity(cls, levelno: int) -> "LogCategory":
        return cls.ERROR if levelno >= logging.ERROR else cls.APP
