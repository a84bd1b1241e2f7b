from __future__ import annotations

"""
Path Expression Resolution Service.

Turns user-supplied directory expressions into absolute, existing
directory paths. Environment expansion, the existence probe, the working
directory lookup and the path flavour are injected so the resolver can be
exercised with Windows semantics on any host.
"""

import logging
import os
from types import ModuleType
from typing import Callable, Optional

from runsettings.domain.constants import WILDCARD_CHARACTERS
from runsettings.infra import fs

logger = logging.getLogger(__name__)

ExpandFn = Callable[[str], str]
ExistsFn = Callable[[str], bool]
CwdFn = Callable[[], str]


class PathResolver:
    """
    Resolve path expressions against a base directory.

    Args:
        expand_environment_variables: Textual placeholder expansion.
        does_directory_exist: Existence probe for the final path.
        path_module: Path flavour ('ntpath' or 'posixpath'). Defaults to os.path.
        get_current_directory: Supplies the working directory used for
            root-relative paths and for relative paths without a base.
    """

    def __init__(
            self,
            expand_environment_variables: Optional[ExpandFn] = None,
            does_directory_exist: Optional[ExistsFn] = None,
            path_module: Optional[ModuleType] = None,
            get_current_directory: Optional[CwdFn] = None,
    ) -> None:
        self.expand_environment_variables = expand_environment_variables or fs.expand_environment_variables
        self.does_directory_exist = does_directory_exist or fs.does_directory_exist
        self.path_module = path_module or os.path
        self.get_current_directory = get_current_directory or fs.get_current_directory

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def resolve_environment_variable_and_return_full_path_if_exist(
            self,
            path: Optional[str],
            base_directory: Optional[str] = None,
    ) -> Optional[str]:
        """
        Expand, classify, normalize and existence-check a path expression.

        Root-relative input (a single leading separator without a drive) is
        anchored to the drive of the current directory, never to
        base_directory. Network paths keep their host prefix.

        Args:
            path: Raw path expression from the settings document.
            base_directory: Directory relative paths are joined with.

        Returns:
            Optional[str]: The normalized absolute path, or None if the
                expression contains a wildcard or the directory is missing.
        """
        if path is None or not path.strip():
            return None

        expanded = self.expand_environment_variables(path)

        if self.has_wildcard(expanded):
            logger.debug(f"Wildcards are not supported in directory paths: '{expanded}'.")
            return None

        full_path = self.get_full_path(expanded, base_directory)

        if not self.does_directory_exist(full_path):
            logger.debug(f"Directory '{full_path}' (from '{path}') does not exist.")
            return None

        return full_path

    def get_full_path(self, path: str, base_directory: Optional[str] = None) -> str:
        """
        Produce the normalized absolute form of an already expanded path.

        No filesystem access happens here; '.' and '..' are removed lexically.
        """
        pm = self.path_module
        drive, rest = pm.splitdrive(path)

        if self.is_network_path(path):
            candidate = path
        elif drive:
            # Drive-relative input ('C:foo') is anchored at that drive's root.
            candidate = path if self._starts_with_separator(rest) else drive + pm.sep + rest
        elif self._starts_with_separator(path):
            current_drive = pm.splitdrive(self.get_current_directory())[0]
            candidate = current_drive + path
        else:
            root = base_directory or self.get_current_directory()
            if not pm.isabs(root):
                root = pm.join(self.get_current_directory(), root)
            candidate = pm.join(root, path)

        return pm.normpath(candidate)

    def is_network_path(self, path: str) -> bool:
        """True for UNC-style paths that start with two separators."""
        return len(path) >= 2 and self._is_separator(path[0]) and self._is_separator(path[1])

    @staticmethod
    def has_wildcard(path: str) -> bool:
        return any(ch in WILDCARD_CHARACTERS for ch in path)

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _is_separator(self, ch: str) -> bool:
        pm = self.path_module
        return ch == pm.sep or (pm.altsep is not None and ch == pm.altsep)

    def _starts_with_separator(self, path: str) -> bool:
        return bool(path) and self._is_separator(path[0])
