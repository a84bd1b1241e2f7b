from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Loads a run settings file, resolves its adapter section and renders the
result. Configuration problems are reported as distinct exit codes so
build scripts can tell a missing file from an invalid one.
"""

import json
import os
import sys
from typing import List, Optional

from runsettings.core.services.provider import SettingsProvider
from runsettings.domain.errors import SettingsException, SettingsSectionNotFound
from runsettings.domain.models import Settings
from runsettings.infra.logging import configure_logging, get_logger
from runsettings.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FILE_NOT_FOUND = 2
EXIT_INVALID_SETTINGS = 3
EXIT_SECTION_NOT_FOUND = 4

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, provider: Optional[SettingsProvider] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.
        provider: Settings provider to load into. A fresh one by default.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(cli_args.args_to_logging_config(args))

    settings_file = args.settings_file
    if not os.path.isfile(settings_file):
        logger.error(f"Settings file not found: {settings_file}")
        print(f"ERROR: settings file not found: {settings_file}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND

    provider = provider or SettingsProvider()
    try:
        settings = provider.load_file(settings_file, args.base_directory)
    except SettingsException as e:
        logger.error(f"Invalid run settings: {e}")
        print(f"ERROR: invalid run settings: {e}", file=sys.stderr)
        return EXIT_INVALID_SETTINGS
    except SettingsSectionNotFound as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_SECTION_NOT_FOUND
    except OSError as e:
        logger.error(f"Cannot read settings file: {e}")
        print(f"ERROR: cannot read settings file: {e}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND

    if args.json_output:
        print(json.dumps(settings.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(settings_file, settings)

    return EXIT_OK

# -----------------------------------------------------------------------------
# OUTPUT RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(settings_file: str, settings: Settings) -> None:
    print(f"Settings file: {os.path.abspath(settings_file)}")
    print(f"DeploymentEnabled: {settings.deployment_enabled}")
    print(f"DeployTestSourceDependencies: {settings.deploy_test_source_dependencies}")
    print(
        "DeleteDeploymentDirectoryAfterTestRunIsComplete: "
        f"{settings.delete_deployment_directory_after_test_run_is_complete}"
    )
    print(f"Search directories ({len(settings.search_directories)}):")
    for entry in settings.search_directories:
        scope = "recursive" if entry.include_sub_directories else "top-level only"
        print(f"  {entry.directory_path} ({scope})")
