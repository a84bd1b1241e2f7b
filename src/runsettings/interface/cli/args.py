from __future__ import annotations

"""
CLI Argument Definition.

Command-line schema of the 'runsettings' tool and the mapping from the
parsed namespace to the logging setup.
"""

import argparse

from runsettings.infra.logging import LoggingConfig

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the runsettings CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="runsettings",
        description="Resolve the adapter section of a test run settings file.",
    )

    p.add_argument(
        "settings_file",
        help="Path to the .runsettings document.",
    )
    p.add_argument(
        "-b", "--base-dir",
        dest="base_directory",
        default=None,
        help="Directory relative search paths resolve against (default: the settings file's directory).",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the resolved settings as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_logging_config(args: argparse.Namespace) -> LoggingConfig:
    """Translate diagnostic flags into a LoggingConfig."""
    level = "DEBUG" if args.debug else "WARNING"
    return LoggingConfig(level=level, console=True, log_file=args.log_file)
