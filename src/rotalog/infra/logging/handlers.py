from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the two sinks behind every Logger instance: a palette-aware
console handler and a dated, category-partitioned file handler with
retention pruning. Both let I/O errors propagate to the caller instead
of routing them through Handler.handleError.
"""

import logging
import os
import sys
import threading
from datetime import datetime, timezone
from typing import Dict, Optional, TextIO

from rotalog.domain.constants import LEVEL_PALETTE, RESET, LogCategory, LogLevel
from rotalog.infra import fs

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_rotalog_handler"

# One lock per '<log_dir>/<category>' shared by every handler in the process
_CATEGORY_LOCKS: Dict[str, threading.RLock] = {}
_CATEGORY_LOCKS_GUARD = threading.Lock()


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as an internally-managed handler.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was installed by this package.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _category_lock(log_dir: str, category: LogCategory) -> threading.RLock:
    key = os.path.join(os.path.abspath(log_dir), LogCategory(category).value)
    with _CATEGORY_LOCKS_GUARD:
        lock = _CATEGORY_LOCKS.get(key)
        if lock is None:
            lock = _CATEGORY_LOCKS[key] = threading.RLock()
        return lock


def _utc_date(created: float) -> str:
    """ISO calendar date (UTC) of a record creation time."""
    return datetime.fromtimestamp(created, tz=timezone.utc).date().isoformat()


def dated_path(log_dir: str, category: LogCategory, created: float) -> str:
    """Absolute path of the category file for the UTC day of 'created'."""
    return os.path.join(log_dir, fs.dated_file_name(category, _utc_date(created)))


def _level_of(record: logging.LogRecord) -> Optional[LogLevel]:
    tag = getattr(record, "level_tag", None)
    try:
        return LogLevel(tag) if tag else None
    except ValueError:
        return None


# ==============================================================================
# HANDLERS
# ==============================================================================

class ConsoleHandler(logging.Handler):
    """
    Write palette-wrapped lines to the standard streams.

    DEBUG and INFO go to stdout, WARN and above to stderr. Streams are
    looked up at emit time so redirections made after construction
    (pytest capture, contextlib.redirect_stdout) are honoured.
    """

    def emit(self, record: logging.LogRecord) -> None:
        line = self.format(record)
        level = _level_of(record)
        color = LEVEL_PALETTE.get(level, "") if level else ""

        stream = self._stream_for(record)
        stream.write(f"{color}{line}{RESET}\n")
        stream.flush()

    @staticmethod
    def _stream_for(record: logging.LogRecord) -> TextIO:
        return sys.stderr if record.levelno >= logging.WARNING else sys.stdout


class DatedCategoryFileHandler(logging.Handler):
    """
    Append records to '<log_dir>/<category>-<YYYY-MM-DD>.log'.

    ERROR and FATAL records land in the 'error' category, everything else
    in 'app'. Before each append the category is pruned to the retention
    cap; if today's file already exceeds max_bytes the pruning runs a
    second time. The current file itself is never split or truncated.
    Files are opened and closed on every write.
    """

    def __init__(self, log_dir: str, max_files: int, max_bytes: int) -> None:
        super().__init__()
        self.log_dir = log_dir
        self.max_files = max_files
        self.max_bytes = max_bytes

    def path_for(self, category: LogCategory, created: float) -> str:
        return dated_path(self.log_dir, category, created)

    def rotate(self, category: LogCategory) -> None:
        fs.prune_category_files(self.log_dir, category, self.max_files)

    def emit(self, record: logging.LogRecord) -> None:
        category = LogCategory.for_severity(record.levelno)
        line = self.format(record)
        log_path = self.path_for(category, record.created)

        with _category_lock(self.log_dir, category):
            self.rotate(category)

            if os.path.exists(log_path) and os.path.getsize(log_path) > self.max_bytes:
                self.rotate(category)

            fs.append_line(log_path, line)
