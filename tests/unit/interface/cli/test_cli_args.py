from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.
"""

import pytest

from runsettings.interface.cli.args import args_to_logging_config, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_defaults() -> None:
    args = parse_args(["tests.runsettings"])

    assert args.settings_file == "tests.runsettings"
    assert args.base_directory is None
    assert args.json_output is False
    assert args.debug is False
    assert args.log_file is None


def test_cli_options() -> None:
    args = parse_args(["-b", "/srv/base", "--json", "--debug", "--log-file", "/tmp/rs.log", "a.runsettings"])

    assert args.base_directory == "/srv/base"
    assert args.json_output is True
    assert args.debug is True
    assert args.log_file == "/tmp/rs.log"


def test_settings_file_is_required() -> None:
    with pytest.raises(SystemExit):
        parse_args([])


def test_logging_config_mapping() -> None:
    quiet = args_to_logging_config(parse_args(["a.runsettings"]))
    verbose = args_to_logging_config(parse_args(["--debug", "--log-file", "x.log", "a.runsettings"]))

    assert quiet.level == "WARNING"
    assert quiet.log_file is None
    assert verbose.level == "DEBUG"
    assert verbose.log_file == "x.log"
    assert verbose.console is True
