from __future__ import annotations

"""
Environment-derived Logger settings.

Recognized variables: LOG_TO_FILE, LOG_LEVEL, LOG_MAX_FILES,
LOG_MAX_SIZE, LOG_DIR. Explicit overrides take precedence over them.
"""

from typing import Any, Dict, Optional

from rotalog.config.environment import EnvironmentVariables
from rotalog.domain.constants import DEFAULT_MAX_LOG_FILES, DEFAULT_MAX_LOG_SIZE
from rotalog.domain.exceptions import ConfigurationError
from rotalog.domain.models import LoggerConfig


def logger_config_from_env(
        env: EnvironmentVariables,
        context: Optional[str] = None,
        **overrides: Any,
) -> LoggerConfig:
    """
    Build a LoggerConfig from environment values.

    Args:
        env: Accessor the values are read from.
        context: Label for the resulting Logger.
        **overrides: LoggerConfig fields; None values are ignored.

    Returns:
        LoggerConfig: Validated configuration.

    Raises:
        ConfigurationError: On malformed values.
    """
    values: Dict[str, Any] = {
        "context": context,
        "log_to_file": env.get("LOG_TO_FILE", False),
        "log_level": env.get("LOG_LEVEL", "INFO"),
        "max_log_files": env.get("LOG_MAX_FILES", DEFAULT_MAX_LOG_FILES),
        "max_log_size": env.get("LOG_MAX_SIZE", DEFAULT_MAX_LOG_SIZE),
        "log_dir": env.get("LOG_DIR", "") or None,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return LoggerConfig(**values)
    except TypeError as e:
        raise ConfigurationError(str(e)) from None
