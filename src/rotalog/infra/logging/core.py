from __future__ import annotations

"""
Diagnostics Core Orchestrator.

Maintains the idempotent lifecycle of the package diagnostics. Handlers
are attached to the 'rotalog' package logger only; the root logger and
handlers installed by the host application are never touched.
"""

import logging
import sys

from rotalog.infra.logging.config import _LEVEL_MAP, DiagnosticsConfig
from rotalog.infra.logging.handlers import _is_our_handler, _tag_handler

PACKAGE_LOGGER_NAME: str = "rotalog"

# Internal state flag for idempotency tracking
_CONFIGURED_FLAG_ATTR: str = "_rotalog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(cfg: DiagnosticsConfig, *, force: bool = False) -> logging.Logger:
    """
    Execute idempotent configuration of the package diagnostics logger.

    Args:
        cfg: Structural configuration for diagnostics.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The package logger.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER_NAME)

    already_configured = bool(getattr(pkg, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return pkg

    level_int = _parse_level(cfg.level)
    pkg.setLevel(level_int)
    _remove_our_handlers(pkg)

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.fmt))
        _tag_handler(sh)
        pkg.addHandler(sh)

    setattr(pkg, _CONFIGURED_FLAG_ATTR, True)
    return pkg


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named diagnostics logger.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(pkg: logging.Logger) -> None:
    """Detach all internally-managed handlers from the package logger."""
    for h in list(pkg.handlers):
        if _is_our_handler(h):
            pkg.removeHandler(h)
            h.close()
