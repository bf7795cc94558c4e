from __future__ import annotations

"""
Logger Configuration Model.

Immutable options captured when a Logger is constructed. Values are
validated once here so the runtime path never has to second-guess them.
"""

from dataclasses import dataclass
from typing import Optional, Union

from rotalog.domain.constants import (
    DEFAULT_MAX_LOG_FILES,
    DEFAULT_MAX_LOG_SIZE,
    LogLevel,
)
from rotalog.domain.exceptions import ConfigurationError


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable options for a Logger instance.

    Attributes:
        context: Optional label prefixed to every message.
        log_to_file: Enable persistence to dated files under the log directory.
        log_level: Accepted for compatibility; messages are never filtered by it.
        max_log_files: Retention cap per file category.
        max_log_size: Byte threshold that triggers an extra rotation pass.
        log_dir: Override for the log directory (defaults to '<cwd>/logs').
    """
    context: Optional[str] = None
    log_to_file: bool = False
    log_level: Union[LogLevel, str] = LogLevel.INFO

    max_log_files: int = DEFAULT_MAX_LOG_FILES
    max_log_size: int = DEFAULT_MAX_LOG_SIZE

    log_dir: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "log_level", LogLevel.parse(self.log_level))
        _require_positive_int("max_log_files", self.max_log_files)
        _require_positive_int("max_log_size", self.max_log_size)


def _require_positive_int(field: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"Field '{field}' must be an integer, got {type(value).__name__}."
        )
    if value < 1:
        raise ConfigurationError(f"Field '{field}' must be >= 1, got {value}.")
