from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Default implementations of the capabilities consumed by the path resolver:
environment expansion, directory existence and the process working
directory. Each one is a thin wrapper over the 'os' module so tests can
substitute it without touching the real filesystem or environment.
"""

import logging
import os
import re
from typing import Optional

logger = logging.getLogger(__name__)

# %NAME% placeholders, expanded on every platform
_PERCENT_VAR_RX = re.compile(r"%([^%\s]+)%")

# -----------------------------------------------------------------------------
# CAPABILITY DEFAULTS
# -----------------------------------------------------------------------------

def expand_environment_variables(path: str) -> str:
    """
    Expand environment variable references and user home shortcuts.

    Both $VAR / ${VAR} and %VAR% forms are expanded regardless of the host
    OS. References to variables that are not set are left as written.

    Args:
        path: Raw path expression.

    Returns:
        str: The expanded expression.
    """
    expanded = os.path.expandvars(os.path.expanduser(path))
    return _PERCENT_VAR_RX.sub(_substitute_percent_var, expanded)


def does_directory_exist(path: str) -> bool:
    """Return True if the path names an existing directory."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError) as e:
        logger.debug(f"Directory probe failed for '{path}': {e}")
        return False


def get_current_directory() -> str:
    """Return the working directory of the current process."""
    return os.getcwd()


# -----------------------------------------------------------------------------
# FILE HELPERS
# -----------------------------------------------------------------------------

def get_containing_directory(file_path: Optional[str]) -> Optional[str]:
    """
    Resolve the absolute directory that holds a file.

    Args:
        file_path: Path to a file, or None.

    Returns:
        Optional[str]: Absolute parent directory, or None when no path is given.
    """
    if not file_path:
        return None
    return os.path.dirname(os.path.abspath(file_path))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _substitute_percent_var(match: re.Match) -> str:
    return os.environ.get(match.group(1), match.group(0))
