from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Resolves configuration (environment first, CLI flags on top), builds a
Logger and emits the requested message. Exit codes: 0 on success, 2 on
configuration errors. Filesystem errors are not caught.
"""

import sys
from typing import List, Optional

from rotalog.config.environment import EnvironmentVariables
from rotalog.config.settings import logger_config_from_env
from rotalog.core.logger import Logger
from rotalog.domain.constants import LogLevel
from rotalog.domain.exceptions import ConfigurationError
from rotalog.infra.logging import DiagnosticsConfig, configure_diagnostics, get_logger
from rotalog.interface.cli import args as cli_args

diagnostics = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        configure_diagnostics(DiagnosticsConfig(level="DEBUG"), force=True)

    try:
        env = EnvironmentVariables()
        config = logger_config_from_env(
            env,
            context=args.context,
            **cli_args.args_to_overrides(args),
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    diagnostics.debug(f"Resolved configuration: {config}")
    logger = Logger(config)
    _emit(logger, LogLevel.parse(args.level), args.message)
    return 0


def _emit(logger: Logger, level: LogLevel, message: List[str]) -> None:
    if level is LogLevel.FATAL:
        logger.fatal(*message)
    else:
        logger.log(level, *message)
