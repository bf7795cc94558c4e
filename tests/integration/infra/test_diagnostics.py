from __future__ import annotations

"""
Integration tests for the diagnostics bootstrap.

Verifies idempotency of configuration, handler tagging and that the
root logger is left untouched.
"""

import logging

import pytest

from rotalog.infra import fs
from rotalog.infra.logging import (
    PACKAGE_LOGGER_NAME,
    DiagnosticsConfig,
    configure_diagnostics,
)
from rotalog.infra.logging.core import _CONFIGURED_FLAG_ATTR
from rotalog.infra.logging.handlers import _HANDLER_TAG_ATTR


def _tagged(logger: logging.Logger):
    return [h for h in logger.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


@pytest.fixture(autouse=True)
def reset_diagnostics():
    """Clean up tagged package handlers before and after each test."""
    def _reset():
        pkg = logging.getLogger(PACKAGE_LOGGER_NAME)
        for h in _tagged(pkg):
            pkg.removeHandler(h)
            h.close()
        if hasattr(pkg, _CONFIGURED_FLAG_ATTR):
            delattr(pkg, _CONFIGURED_FLAG_ATTR)
        pkg.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()


def test_diagnostics_idempotency() -> None:
    """Multiple configuration calls do not duplicate handlers."""
    cfg = DiagnosticsConfig(level="DEBUG")
    pkg = configure_diagnostics(cfg)
    configure_diagnostics(cfg)

    assert len(_tagged(pkg)) == 1


def test_force_reconfigures_level() -> None:
    pkg = configure_diagnostics(DiagnosticsConfig(level="INFO"))
    configure_diagnostics(DiagnosticsConfig(level="DEBUG"), force=True)

    assert pkg.level == logging.DEBUG
    assert len(_tagged(pkg)) == 1


def test_root_logger_untouched() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    configure_diagnostics(DiagnosticsConfig(level="DEBUG"))
    assert root.handlers == before


def test_unknown_level_falls_back_to_warning() -> None:
    pkg = configure_diagnostics(DiagnosticsConfig(level="chatty"))
    assert pkg.level == logging.WARNING


def test_pruning_is_reported(tmp_path, caplog) -> None:
    for i in range(3):
        (tmp_path / f"app-2024-01-0{i + 1}.log").write_text("x")

    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
        fs.prune_category_files(str(tmp_path), "app", 2)

    assert any("Pruned 2 'app' log file(s)" in r.getMessage() for r in caplog.records)
