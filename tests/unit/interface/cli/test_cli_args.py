from __future__ import annotations

"""
Unit tests for CLI Argument Parsing and the CLI controller.

Verifies:
1. Mapping of CLI flags to LoggerConfig overrides.
2. Level selection and stream routing through main().
3. Exit codes on configuration errors.
"""

from pathlib import Path

import pytest

from rotalog.interface.cli.app import main
from rotalog.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_defaults_leave_overrides_unset():
    args = parse_args(["hello"])
    overrides = args_to_overrides(args)

    assert args.level == "info"
    assert args.message == ["hello"]
    assert all(v is None for v in overrides.values())


def test_cli_persistence_flags_mapping():
    args = parse_args([
        "--file",
        "--log-dir", "/tmp/logs",
        "--max-files", "3",
        "--max-size", "1024",
        "msg",
    ])
    overrides = args_to_overrides(args)

    assert overrides == {
        "log_to_file": True,
        "log_dir": "/tmp/logs",
        "max_log_files": 3,
        "max_log_size": 1024,
    }


def test_cli_rejects_unknown_level():
    with pytest.raises(SystemExit):
        parse_args(["-l", "verbose", "msg"])


def test_main_emits_info_line(workdir: Path, capsys):
    code = main(["-c", "Main", "Application", "started"])
    captured = capsys.readouterr()

    assert code == 0
    assert "| Main | INFO | Application started" in captured.out
    assert not (workdir / "logs").exists()


def test_main_error_level_goes_to_stderr_and_file(workdir: Path, capsys):
    code = main(["-l", "error", "--file", "Something went wrong"])
    captured = capsys.readouterr()

    assert code == 0
    assert "| ERROR | Something went wrong" in captured.err
    assert [p.name.split("-")[0] for p in (workdir / "logs").iterdir()] == ["error"]


def test_main_fatal_uses_error_tag(workdir: Path, capsys):
    main(["-l", "fatal", "boom"])
    assert "| ERROR | boom" in capsys.readouterr().err


def test_main_template_message(workdir: Path, capsys):
    main(["%s has %d items", "cart", "3"])
    assert "| INFO | cart has 3 items" in capsys.readouterr().out


def test_main_reads_environment(workdir: Path, capsys, monkeypatch):
    monkeypatch.setenv("LOG_TO_FILE", "true")
    main(["persisted"])
    assert (workdir / "logs").is_dir()


def test_main_configuration_error_exit_code(workdir: Path, capsys):
    code = main(["--max-files", "0", "msg"])
    captured = capsys.readouterr()

    assert code == 2
    assert "Configuration error" in captured.err
    assert captured.out == ""
