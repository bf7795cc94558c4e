from __future__ import annotations

from .config import DiagnosticsConfig
from .core import (
    PACKAGE_LOGGER_NAME,
    configure_diagnostics,
    get_logger,
)
from .handlers import (
    ConsoleHandler,
    DatedCategoryFileHandler,
)

__all__ = [
    "DiagnosticsConfig",
    "ConsoleHandler",
    "DatedCategoryFileHandler",
    "PACKAGE_LOGGER_NAME",
    "configure_diagnostics",
    "get_logger",
]
