from __future__ import annotations

"""
Diagnostics Configuration Model.

Options for the package's own diagnostic output: the messages modules
emit through logging.getLogger(__name__) about directory creation,
pruning and environment resolution. Independent from LoggerConfig.
"""

import logging
from dataclasses import dataclass
from typing import Dict

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Immutable options for the diagnostics bootstrap.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        fmt: Structural format for diagnostic lines.
    """
    level: str = "WARNING"
    console: bool = True

    fmt: str = "%(levelname)s | %(name)s | %(message)s"
