from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the shared Logger / EnvironmentVariables instances.
3. A working directory per test so '<cwd>/logs' never touches the repo.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from rotalog.config.environment import EnvironmentVariables  # noqa: E402
from rotalog.core.logger import Logger  # noqa: E402

_LOG_ENV_KEYS = ("APP_ENV", "LOG_TO_FILE", "LOG_LEVEL", "LOG_MAX_FILES", "LOG_MAX_SIZE", "LOG_DIR")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_shared_instances() -> Iterator[None]:
    """Drop the process-wide instances before and after each test."""
    Logger._instance = None
    EnvironmentVariables._instance = None
    yield
    Logger._instance = None
    EnvironmentVariables._instance = None


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run the test inside an empty temporary directory.

    Also clears the LOG_* variables so the host environment cannot leak
    into configuration resolution.

    Returns:
        Path: The new current working directory.
    """
    monkeypatch.chdir(tmp_path)
    for key in _LOG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return tmp_path
