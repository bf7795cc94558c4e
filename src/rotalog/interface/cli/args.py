from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace
into LoggerConfig overrides.
"""

import argparse
from typing import Any, Dict

from rotalog.domain.constants import LogLevel

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rotalog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rotalog",
        description="Emit a leveled log line to the console and optional dated log files.",
    )

    p.add_argument(
        "message",
        nargs="+",
        help="Message parts. The first may contain printf-style directives.",
    )

    # --- Line Content ---
    p.add_argument(
        "-c", "--context",
        dest="context",
        default=None,
        help="Label prefixed to the line.",
    )
    p.add_argument(
        "-l", "--level",
        dest="level",
        default="info",
        choices=[lvl.value.lower() for lvl in LogLevel],
        help="Severity of the message (default: info).",
    )

    # --- Persistence ---
    p.add_argument(
        "--file",
        dest="log_to_file",
        action="store_true",
        default=None,
        help="Also append the line to the dated log files.",
    )
    p.add_argument(
        "--log-dir",
        dest="log_dir",
        default=None,
        help="Directory for log files (default: ./logs).",
    )
    p.add_argument(
        "--max-files",
        dest="max_log_files",
        type=int,
        default=None,
        help="Retention cap per category.",
    )
    p.add_argument(
        "--max-size",
        dest="max_log_size",
        type=int,
        default=None,
        help="Size threshold in bytes triggering an extra rotation pass.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Print internal diagnostics to stderr.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into LoggerConfig overrides.

    Unset options map to None so environment values stay in effect.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    return {
        "log_to_file": args.log_to_file,
        "log_dir": args.log_dir,
        "max_log_files": args.max_log_files,
        "max_log_size": args.max_log_size,
    }
