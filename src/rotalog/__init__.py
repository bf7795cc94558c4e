from __future__ import annotations

"""
rotalog: leveled console logging with dated, rotating log files.
"""

import logging

from rotalog.config.environment import EnvironmentVariables, get_environment
from rotalog.core.formatting import format_message
from rotalog.core.logger import Logger
from rotalog.domain.constants import LEVEL_PALETTE, LogCategory, LogLevel
from rotalog.domain.exceptions import ConfigurationError
from rotalog.domain.models import LoggerConfig

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "EnvironmentVariables",
    "LEVEL_PALETTE",
    "LogCategory",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "format_message",
    "get_environment",
]
