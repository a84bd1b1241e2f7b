from __future__ import annotations

"""
Run Settings Document Loader.

Locates the adapter section inside a complete run settings document
(or a document whose root is the section itself) and hands the positioned
reader to the settings parser.
"""

import logging
from typing import Optional

from runsettings.core.services.path_resolver import PathResolver
from runsettings.core.services.settings_parser import to_settings
from runsettings.domain.constants import SETTINGS_NAME
from runsettings.domain.errors import SettingsSectionNotFound
from runsettings.domain.models import Settings
from runsettings.infra.fs import get_containing_directory
from runsettings.infra.xml_reader import SettingsReader

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_settings_section(
        reader: SettingsReader,
        base_directory: Optional[str] = None,
        resolver: Optional[PathResolver] = None,
        section_name: str = SETTINGS_NAME,
) -> Settings:
    """
    Advance the reader to the adapter section and parse it.

    Raises:
        SettingsSectionNotFound: If the document has no such section.
        SettingsException: If the section is structurally invalid.
    """
    while reader.read():
        if reader.is_element(section_name):
            return to_settings(reader, base_directory, resolver)
    raise SettingsSectionNotFound(f"No <{section_name}> section found in run settings.")


def load_settings_from_string(
        xml: str,
        base_directory: Optional[str] = None,
        resolver: Optional[PathResolver] = None,
) -> Settings:
    """Parse adapter settings from in-memory XML text."""
    return read_settings_section(SettingsReader(xml), base_directory, resolver)


def load_settings_file(
        path: str,
        base_directory: Optional[str] = None,
        resolver: Optional[PathResolver] = None,
) -> Settings:
    """
    Parse adapter settings from a run settings file.

    Args:
        path: Path to the .runsettings file.
        base_directory: Overrides the directory relative entries resolve
            against. Defaults to the file's own directory.
        resolver: Path resolver override.

    Raises:
        OSError: If the file cannot be opened.
    """
    base = base_directory or get_containing_directory(path)
    logger.debug(f"Loading run settings from '{path}' (base directory: '{base}').")
    with open(path, "rb") as f:
        return read_settings_section(SettingsReader(f), base, resolver)
