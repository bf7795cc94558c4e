from __future__ import annotations

"""
Unit tests for the Domain layer.

Verifies:
1. LogLevel parsing, ordering and stdlib severity mapping.
2. Palette completeness.
3. Category routing by severity.
4. LoggerConfig defaults and validation.
"""

import logging

import pytest

from rotalog.domain.constants import (
    DEFAULT_MAX_LOG_FILES,
    DEFAULT_MAX_LOG_SIZE,
    LEVEL_PALETTE,
    LogCategory,
    LogLevel,
)
from rotalog.domain.exceptions import ConfigurationError
from rotalog.domain.models import LoggerConfig

# -----------------------------------------------------------------------------
# LOG LEVEL TESTS
# -----------------------------------------------------------------------------

def test_levels_are_ordered_by_priority() -> None:
    ordered = sorted(LogLevel, key=lambda lvl: lvl.priority)
    assert ordered == [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL]


def test_level_severity_matches_stdlib() -> None:
    assert LogLevel.WARN.severity == logging.WARNING
    assert LogLevel.FATAL.severity == logging.CRITICAL


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("debug", LogLevel.DEBUG),
        (" Info ", LogLevel.INFO),
        ("warning", LogLevel.WARN),
        ("critical", LogLevel.FATAL),
        (LogLevel.ERROR, LogLevel.ERROR),
    ],
)
def test_level_parse_accepts_names_and_aliases(raw, expected) -> None:
    assert LogLevel.parse(raw) is expected


def test_level_parse_rejects_unknown_name() -> None:
    with pytest.raises(ConfigurationError, match="Unknown log level"):
        LogLevel.parse("verbose")


def test_palette_covers_every_level() -> None:
    assert set(LEVEL_PALETTE) == set(LogLevel)
    assert LEVEL_PALETTE[LogLevel.FATAL] == "\x1b[41m"
    assert all(code.startswith("\x1b[") for code in LEVEL_PALETTE.values())

# -----------------------------------------------------------------------------
# CATEGORY TESTS
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "level, category",
    [
        (LogLevel.DEBUG, LogCategory.APP),
        (LogLevel.INFO, LogCategory.APP),
        (LogLevel.WARN, LogCategory.APP),
        (LogLevel.ERROR, LogCategory.ERROR),
        (LogLevel.FATAL, LogCategory.ERROR),
    ],
)
def test_category_routing(level, category) -> None:
    assert LogCategory.for_severity(level.severity) is category

# -----------------------------------------------------------------------------
# CONFIG TESTS
# -----------------------------------------------------------------------------

def test_config_defaults() -> None:
    cfg = LoggerConfig()
    assert cfg.context is None
    assert cfg.log_to_file is False
    assert cfg.log_level is LogLevel.INFO
    assert cfg.max_log_files == DEFAULT_MAX_LOG_FILES == 5
    assert cfg.max_log_size == DEFAULT_MAX_LOG_SIZE == 10 * 1024 * 1024


def test_config_normalizes_level_name() -> None:
    assert LoggerConfig(log_level="warn").log_level is LogLevel.WARN


def test_config_is_immutable() -> None:
    cfg = LoggerConfig(context="Main")
    with pytest.raises(AttributeError):
        cfg.context = "Other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_log_files": 0},
        {"max_log_size": -1},
        {"max_log_files": "5"},
        {"max_log_size": True},
        {"max_log_files": 2.5},
    ],
)
def test_config_rejects_invalid_limits(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        LoggerConfig(**kwargs)
