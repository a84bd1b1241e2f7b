from __future__ import annotations

"""
Settings Provider.

Keeps the adapter settings most recently loaded by the host so that later
stages of a run can read them without re-parsing the document.
"""

import logging
from typing import Optional

from runsettings.core.services.loader import load_settings_file, read_settings_section
from runsettings.core.services.path_resolver import PathResolver
from runsettings.domain.models import Settings
from runsettings.infra.xml_reader import SettingsReader

logger = logging.getLogger(__name__)


class SettingsProvider:
    """
    Holder for the active Settings.

    Until something is loaded, settings returns the defaults.
    """

    def __init__(self, resolver: Optional[PathResolver] = None) -> None:
        self.resolver = resolver
        self._settings: Optional[Settings] = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            return Settings()
        return self._settings

    @property
    def is_loaded(self) -> bool:
        return self._settings is not None

    def load(self, reader: SettingsReader, base_directory: Optional[str] = None) -> Settings:
        """Load the section the reader leads to; the previous settings are kept on failure."""
        self._settings = read_settings_section(reader, base_directory, self.resolver)
        return self._settings

    def load_file(self, path: str, base_directory: Optional[str] = None) -> Settings:
        self._settings = load_settings_file(path, base_directory, self.resolver)
        logger.info(f"Loaded adapter settings from '{path}'.")
        return self._settings

    def reset(self) -> None:
        self._settings = None

