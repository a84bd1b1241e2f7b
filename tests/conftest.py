from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   being installed.
2. Provides resolver factories with injected capabilities, so path tests
   never depend on the host filesystem, environment or OS flavour.
"""

import ntpath
import os
import posixpath
import sys
from typing import Callable, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from runsettings.core.services.path_resolver import PathResolver  # noqa: E402

WINDOWS_CWD = r"D:\work\tests"
POSIX_CWD = "/home/runner/work"

ResolverFactory = Callable[..., PathResolver]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def windows_resolver() -> ResolverFactory:
    """
    Build resolvers with Windows path semantics.

    Expansion defaults to identity, every directory exists and the process
    runs from D:\\work\\tests unless overridden.
    """
    def factory(
            expand: Optional[Callable[[str], str]] = None,
            exists: Optional[Callable[[str], bool]] = None,
            cwd: str = WINDOWS_CWD,
    ) -> PathResolver:
        return PathResolver(
            expand_environment_variables=expand or (lambda s: s),
            does_directory_exist=exists or (lambda p: True),
            path_module=ntpath,
            get_current_directory=lambda: cwd,
        )
    return factory


@pytest.fixture
def posix_resolver() -> ResolverFactory:
    """Same as windows_resolver, with POSIX path semantics."""
    def factory(
            expand: Optional[Callable[[str], str]] = None,
            exists: Optional[Callable[[str], bool]] = None,
            cwd: str = POSIX_CWD,
    ) -> PathResolver:
        return PathResolver(
            expand_environment_variables=expand or (lambda s: s),
            does_directory_exist=exists or (lambda p: True),
            path_module=posixpath,
            get_current_directory=lambda: cwd,
        )
    return factory


@pytest.fixture
def temp_expansion() -> Callable[[str], str]:
    """Expansion double mapping %temp% to C:\\foo."""
    return lambda s: s.replace("%temp%", "C:\\foo")
