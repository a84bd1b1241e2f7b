from __future__ import annotations

"""
Adapter Settings Parsing Service.

Reads the adapter section of a run settings document into an immutable
Settings value. Expected shape:

    <MSTestV2>
        <DeploymentEnabled>true</DeploymentEnabled>
        <AssemblyResolution>
            <Directory path="%HOMEDRIVE%\\directory" includeSubDirectories="true" />
            <Directory path="C:\\windows\\abc" includeSubDirectories="false" />
            <Directory path=".\\abc\\123" />
        </AssemblyResolution>
    </MSTestV2>

Unknown elements directly under the root are skipped. Unknown elements
inside AssemblyResolution abort the parse with SettingsException.
Directory entries that do not resolve to an existing directory are dropped.
"""

import logging
from typing import Dict, Iterable, List, Optional

from runsettings.core.services.path_resolver import PathResolver
from runsettings.domain.constants import (
    ASSEMBLY_RESOLUTION,
    BOOLEAN_FLAGS,
    DEFAULT_FLAG_VALUE,
    DEFAULT_INCLUDE_SUB_DIRECTORIES,
    DIRECTORY,
    INCLUDE_SUB_DIRECTORIES_ATTRIBUTE,
    PATH_ATTRIBUTE,
)
from runsettings.domain.errors import SettingsException, missing_attribute, unexpected_element
from runsettings.domain.models import RecursiveDirectoryPath, Settings
from runsettings.infra.xml_reader import NodeType, SettingsReader

logger = logging.getLogger(__name__)

_FLAGS_BY_UPPER_NAME: Dict[str, str] = {k.upper(): v for k, v in BOOLEAN_FLAGS.items()}


# ==============================================================================
# SETTINGS BUILDER
# ==============================================================================

class AdapterSettings:
    """
    Mutable accumulator for one parse.

    Directory entries are stored as written in the document and only
    resolved when the settings are frozen, so the same instance can be
    resolved against different base directories.

    Args:
        resolver: Path resolver used for directory entries.
        search_directories: Initial raw entries, in order.
    """

    def __init__(
            self,
            resolver: Optional[PathResolver] = None,
            search_directories: Optional[Iterable[RecursiveDirectoryPath]] = None,
    ) -> None:
        self.resolver = resolver or PathResolver()
        self.search_directories: List[RecursiveDirectoryPath] = list(search_directories or [])
        self.flags: Dict[str, bool] = {field: DEFAULT_FLAG_VALUE for field in BOOLEAN_FLAGS.values()}

    def get_directory_list_with_recursive_property(
            self,
            base_directory: Optional[str],
    ) -> List[RecursiveDirectoryPath]:
        """
        Resolve the configured directories against base_directory.

        Args:
            base_directory: Directory that relative entries are joined with.

        Returns:
            List[RecursiveDirectoryPath]: Existing directories in document
                order. Entries that fail to resolve are left out.
        """
        resolved: List[RecursiveDirectoryPath] = []
        for entry in self.search_directories:
            path = self.resolver.resolve_environment_variable_and_return_full_path_if_exist(
                entry.directory_path, base_directory
            )
            if path is None:
                logger.debug(f"Dropping search directory '{entry.directory_path}': not resolvable.")
                continue
            resolved.append(RecursiveDirectoryPath(path, entry.include_sub_directories))
        return resolved

    def to_settings(self, base_directory: Optional[str]) -> Settings:
        """Freeze the accumulated state into an immutable Settings value."""
        return Settings(
            search_directories=tuple(self.get_directory_list_with_recursive_property(base_directory)),
            **self.flags,
        )

    # -------------------------------------------------------------------------
    # DOCUMENT READERS
    # -------------------------------------------------------------------------

    def read_assembly_resolution_path(self, reader: SettingsReader) -> None:
        """
        Consume an AssemblyResolution container, reader positioned on its start tag.

        Leaves the reader on the node following the container.

        Raises:
            SettingsException: On any child other than Directory, or a
                Directory without a path.
        """
        if reader.is_empty_element:
            reader.skip()
            return

        reader.read()
        while reader.node_type is NodeType.ELEMENT:
            if not reader.is_element(DIRECTORY):
                raise unexpected_element(reader.name, ASSEMBLY_RESOLUTION)

            path = reader.get_attribute(PATH_ATTRIBUTE)
            if path is None or not path.strip():
                raise missing_attribute(PATH_ATTRIBUTE, reader.name, ASSEMBLY_RESOLUTION)

            recursive = parse_bool(reader.get_attribute(INCLUDE_SUB_DIRECTORIES_ATTRIBUTE))
            if recursive is None:
                recursive = DEFAULT_INCLUDE_SUB_DIRECTORIES

            self.search_directories.append(RecursiveDirectoryPath(path, recursive))
            reader.skip()

        # Past the container's end tag
        if reader.node_type is NodeType.END_ELEMENT:
            reader.read()

    def read_flag(self, reader: SettingsReader, field: str) -> None:
        """Read a boolean flag element; unparseable text keeps the current value."""
        name = reader.name
        value = parse_bool(reader.read_element_text())
        if value is None:
            logger.warning(f"Ignoring '{name}': expected 'true' or 'false'.")
            return
        self.flags[field] = value


# ==============================================================================
# PUBLIC API
# ==============================================================================

def to_settings(
        reader: SettingsReader,
        base_directory: Optional[str] = None,
        resolver: Optional[PathResolver] = None,
) -> Settings:
    """
    Parse the adapter settings section the reader is positioned on.

    Args:
        reader: Cursor positioned on the settings root element.
        base_directory: Directory of the settings file; relative directory
            entries are resolved against it.
        resolver: Path resolver override (capabilities injected by tests).

    Returns:
        Settings: The resolved, immutable settings.

    Raises:
        SettingsException: On structural errors. No partial result is produced.
    """
    if not reader.is_element():
        raise SettingsException("Reader must be positioned on the settings root element.")

    settings = AdapterSettings(resolver)
    root_name = reader.name
    logger.debug(f"Reading adapter settings from <{root_name}>.")

    empty = reader.is_empty_element
    reader.read()
    if not empty:
        while reader.node_type is NodeType.ELEMENT:
            element_name = reader.name.upper()
            if element_name == ASSEMBLY_RESOLUTION.upper():
                settings.read_assembly_resolution_path(reader)
            elif element_name in _FLAGS_BY_UPPER_NAME:
                settings.read_flag(reader, _FLAGS_BY_UPPER_NAME[element_name])
            else:
                logger.debug(f"Skipping unrecognized element <{reader.name}> under <{root_name}>.")
                reader.skip()

    return settings.to_settings(base_directory)


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """
    Case-insensitive 'true'/'false' parsing.

    Returns:
        Optional[bool]: None for missing or unrecognized text.
    """
    if value is None:
        return None
    s = value.strip().lower()
    if s == "true":
        return True
    if s == "false":
        return False
    return None
