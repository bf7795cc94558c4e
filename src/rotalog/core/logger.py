from __future__ import annotations

"""
Logger Orchestrator.

Formats leveled messages and dispatches them to the console and,
optionally, to dated category files. Each instance owns a private
logging.Logger that is not registered in the global logger hierarchy,
so several instances with the same context never share handlers and
records never reach the root logger.

Everything runs synchronously on the calling thread: formatting,
console output, pruning and the file append complete before a log
call returns. Filesystem errors propagate to the caller.
"""

import itertools
import logging
import os
import time
from typing import Any, ClassVar, Optional

from rotalog.core.formatting import LineFormatter, format_message
from rotalog.domain.constants import LogCategory, LogLevel
from rotalog.domain.models import LoggerConfig
from rotalog.infra import fs
from rotalog.infra.logging.handlers import (
    ConsoleHandler,
    DatedCategoryFileHandler,
    _tag_handler,
    dated_path,
)

_instance_ids = itertools.count(1)


class Logger:
    """
    Leveled console logger with optional rotating file persistence.

    Attributes:
        config: Options captured at construction.
        log_dir: Absolute directory receiving the dated files.
    """

    _instance: ClassVar[Optional["Logger"]] = None

    def __init__(self, config: Optional[LoggerConfig] = None) -> None:
        self.config = config or LoggerConfig()
        self.log_dir = os.path.abspath(self.config.log_dir or fs.default_log_dir())

        self._logger = logging.Logger(
            f"rotalog.instance.{next(_instance_ids)}", logging.DEBUG
        )
        self._logger.propagate = False

        formatter = LineFormatter(self.config.context)

        console = ConsoleHandler()
        console.setFormatter(formatter)
        _tag_handler(console)
        self._logger.addHandler(console)

        self._file_handler: Optional[DatedCategoryFileHandler] = None
        if self.config.log_to_file:
            fs.ensure_log_dir(self.log_dir)
            fh = DatedCategoryFileHandler(
                self.log_dir,
                self.config.max_log_files,
                self.config.max_log_size,
            )
            fh.setFormatter(formatter)
            _tag_handler(fh)
            self._logger.addHandler(fh)
            self._file_handler = fh

    def __repr__(self) -> str:
        return (
            f"Logger(context={self.config.context!r}, "
            f"log_to_file={self.config.log_to_file}, log_dir={self.log_dir!r})"
        )

    # --------------------------------------------------------------------------
    # SHARED INSTANCE
    # --------------------------------------------------------------------------

    @classmethod
    def get_instance(cls, config: Optional[LoggerConfig] = None) -> "Logger":
        """
        Return the process-wide shared Logger.

        The configuration passed on the first call wins for the lifetime of
        the process; later configurations are ignored. Prefer constructing
        one Logger at start-up and passing it to its consumers.

        Args:
            config: Options used only if the shared instance does not exist yet.

        Returns:
            Logger: The shared instance.
        """
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    # --------------------------------------------------------------------------
    # EMISSION API
    # --------------------------------------------------------------------------

    def log(self, level: LogLevel, *args: Any) -> None:
        """
        Format and emit one message.

        Args:
            level: Severity tag printed on the line and used for routing.
            *args: Message parts; see rotalog.core.formatting.format_message.
        """
        level = LogLevel.parse(level)
        message = format_message(*args)
        # handle() skips isEnabledFor, so a host's logging.disable() cannot drop lines
        record = self._logger.makeRecord(
            self._logger.name,
            level.severity,
            "(unknown file)",
            0,
            message,
            (),
            None,
            extra={"level_tag": level.value},
        )
        self._logger.handle(record)

    def debug(self, *args: Any) -> None:
        self.log(LogLevel.DEBUG, *args)

    def info(self, *args: Any) -> None:
        self.log(LogLevel.INFO, *args)

    def warn(self, *args: Any) -> None:
        self.log(LogLevel.WARN, *args)

    warning = warn

    def error(self, *args: Any) -> None:
        self.log(LogLevel.ERROR, *args)

    def fatal(self, *args: Any) -> None:
        """Emit at ERROR severity; the line carries the ERROR tag."""
        self.log(LogLevel.ERROR, *args)

    # --------------------------------------------------------------------------
    # FILE INSPECTION
    # --------------------------------------------------------------------------

    def log_path(self, category: LogCategory, when: Optional[float] = None) -> str:
        """
        Resolve the dated file a record of this category would be written to.

        Args:
            category: 'app' or 'error'.
            when: Epoch seconds; defaults to now.

        Returns:
            str: Absolute path of the target file.
        """
        moment = time.time() if when is None else when
        return dated_path(self.log_dir, LogCategory(category), moment)
