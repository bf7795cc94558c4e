from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Directory creation, category listing and retention pruning for the
dated log files. Every call reads the directory fresh; no state is
cached between log calls.
"""

import logging
import os
from typing import List

from rotalog.domain.constants import LOG_DIR_NAME, LOG_EXTENSION, LogCategory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def default_log_dir() -> str:
    """Resolve '<current working directory>/logs' as an absolute path."""
    return os.path.abspath(os.path.join(os.getcwd(), LOG_DIR_NAME))


def dated_file_name(category: LogCategory, date_str: str) -> str:
    """
    Build the file name of a category for a given calendar day.

    Args:
        category: Target file category.
        date_str: ISO date ('YYYY-MM-DD').

    Returns:
        str: '<category>-<date><ext>'.
    """
    return f"{LogCategory(category).value}-{date_str}{LOG_EXTENSION}"


def ensure_log_dir(path: str) -> None:
    """Create the directory hierarchy if missing. Errors propagate."""
    if not os.path.isdir(path):
        os.makedirs(path, exist_ok=True)
        logger.debug(f"Created log directory: {path}")

# -----------------------------------------------------------------------------
# RETENTION API
# -----------------------------------------------------------------------------

def list_category_files(log_dir: str, category: LogCategory) -> List[str]:
    """
    List the files of one category, most recently modified first.

    Args:
        log_dir: Directory holding the log files.
        category: Category whose files are collected.

    Returns:
        List[str]: Absolute paths sorted by descending modification time.
    """
    prefix = f"{LogCategory(category).value}-"
    paths = [
        os.path.join(log_dir, name)
        for name in os.listdir(log_dir)
        if name.startswith(prefix) and name.endswith(LOG_EXTENSION)
    ]
    return sorted(paths, key=os.path.getmtime, reverse=True)


def prune_category_files(log_dir: str, category: LogCategory, max_files: int) -> List[str]:
    """
    Delete the oldest files of a category once the retention cap is reached.

    When the category holds max_files or more files, only the newest
    max_files - 1 are kept, leaving room for the write that follows.

    Args:
        log_dir: Directory holding the log files.
        category: Category to prune.
        max_files: Retention cap.

    Returns:
        List[str]: Paths that were removed.
    """
    files = list_category_files(log_dir, category)
    if len(files) < max_files:
        return []

    removed: List[str] = []
    for path in files[max_files - 1:]:
        try:
            os.remove(path)
        except FileNotFoundError:
            # Another writer got there first
            continue
        removed.append(path)

    if removed:
        logger.debug(f"Pruned {len(removed)} '{LogCategory(category).value}' log file(s) in {log_dir}")
    return removed


def append_line(path: str, line: str) -> None:
    """Append one newline-terminated UTF-8 line, creating the file if absent."""
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")
