from __future__ import annotations

"""
Integration tests for loading run settings documents from disk.

Uses real directories under tmp_path with the default resolver
capabilities (real environment, real filesystem).
"""

import os
from pathlib import Path

import pytest

from runsettings.core.services.loader import (
    load_settings_file,
    load_settings_from_string,
    read_settings_section,
)
from runsettings.core.services.provider import SettingsProvider
from runsettings.domain.errors import SettingsException, SettingsSectionNotFound
from runsettings.domain.models import RecursiveDirectoryPath, Settings
from runsettings.infra.xml_reader import SettingsReader

RUN_SETTINGS = """<?xml version="1.0" encoding="utf-8"?>
<RunSettings>
  <RunConfiguration>
    <ResultsDirectory>.\\TestResults</ResultsDirectory>
  </RunConfiguration>
  <MSTestV2>
    <DeploymentEnabled>false</DeploymentEnabled>
    <AssemblyResolution>
      <Directory path="libs" includeSubDirectories="false" />
      <Directory path="missing" />
      <Directory path="$RUNSETTINGS_SHARED" />
      <Directory path="libs/*" />
    </AssemblyResolution>
  </MSTestV2>
</RunSettings>
"""


@pytest.fixture
def settings_dir(tmp_path: Path, monkeypatch) -> Path:
    """Directory holding a settings file plus the directories it references."""
    (tmp_path / "libs").mkdir()
    shared = tmp_path / "shared"
    shared.mkdir()
    monkeypatch.setenv("RUNSETTINGS_SHARED", str(shared))
    (tmp_path / "test.runsettings").write_text(RUN_SETTINGS, encoding="utf-8")
    return tmp_path


def test_load_file_resolves_against_file_directory(settings_dir: Path, monkeypatch) -> None:
    monkeypatch.chdir(settings_dir.parent)

    settings = load_settings_file(str(settings_dir / "test.runsettings"))

    assert settings.deployment_enabled is False
    assert settings.search_directories == (
        RecursiveDirectoryPath(str(settings_dir / "libs"), False),
        RecursiveDirectoryPath(str(settings_dir / "shared"), True),
    )


def test_load_file_with_explicit_base_directory(settings_dir: Path, tmp_path_factory) -> None:
    other = tmp_path_factory.mktemp("other")
    (other / "libs").mkdir()

    settings = load_settings_file(str(settings_dir / "test.runsettings"), base_directory=str(other))

    assert settings.search_directories[0] == RecursiveDirectoryPath(str(other / "libs"), False)


def test_load_from_string_with_section_as_root(tmp_path: Path) -> None:
    (tmp_path / "bin").mkdir()
    xml = f'<MSTestV2><AssemblyResolution><Directory path="{tmp_path / "bin"}"/></AssemblyResolution></MSTestV2>'

    settings = load_settings_from_string(xml)

    assert settings.search_directories == (RecursiveDirectoryPath(str(tmp_path / "bin"), True),)


def test_missing_section_raises() -> None:
    xml = "<RunSettings><RunConfiguration /></RunSettings>"

    with pytest.raises(SettingsSectionNotFound):
        load_settings_from_string(xml)


def test_structural_error_propagates_from_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.runsettings"
    path.write_text(
        "<RunSettings><MSTestV2><AssemblyResolution><Dir path='x'/></AssemblyResolution></MSTestV2></RunSettings>",
        encoding="utf-8",
    )

    with pytest.raises(SettingsException, match="Dir"):
        load_settings_file(str(path))


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_settings_file(str(tmp_path / "absent.runsettings"))


def test_read_settings_section_custom_name() -> None:
    reader = SettingsReader("<RunSettings><Adapter><DeploymentEnabled>false</DeploymentEnabled></Adapter></RunSettings>")

    settings = read_settings_section(reader, section_name="Adapter")

    assert settings.deployment_enabled is False


# -----------------------------------------------------------------------------
# PROVIDER
# -----------------------------------------------------------------------------

def test_provider_defaults_before_load() -> None:
    provider = SettingsProvider()

    assert provider.is_loaded is False
    assert provider.settings == Settings()


def test_provider_load_and_reset(settings_dir: Path) -> None:
    provider = SettingsProvider()

    loaded = provider.load_file(str(settings_dir / "test.runsettings"))

    assert provider.is_loaded is True
    assert provider.settings is loaded
    assert provider.settings.deployment_enabled is False

    provider.reset()

    assert provider.is_loaded is False
    assert provider.settings.deployment_enabled is True


def test_provider_keeps_previous_settings_on_failure(windows_resolver) -> None:
    provider = SettingsProvider(resolver=windows_resolver())
    provider.load(SettingsReader("<MSTestV2><DeploymentEnabled>false</DeploymentEnabled></MSTestV2>"))

    with pytest.raises(SettingsException):
        provider.load(SettingsReader("<MSTestV2><AssemblyResolution><Bad/></AssemblyResolution></MSTestV2>"))

    assert provider.settings.deployment_enabled is False


def test_provider_load_uses_injected_resolver(windows_resolver) -> None:
    provider = SettingsProvider(resolver=windows_resolver())
    reader = SettingsReader(
        '<MSTestV2><AssemblyResolution><Directory path="libs"/></AssemblyResolution></MSTestV2>'
    )

    settings = provider.load(reader, base_directory=r"C:\settings")

    assert settings.search_directories == (RecursiveDirectoryPath(r"C:\settings\libs", True),)


def test_relative_settings_path_uses_absolute_base(settings_dir: Path, monkeypatch) -> None:
    monkeypatch.chdir(settings_dir)

    settings = load_settings_file("test.runsettings")

    assert os.path.isabs(settings.search_directories[0].directory_path)
    assert settings.search_directories[0].directory_path == str(settings_dir / "libs")


def test_providers_do_not_share_state(windows_resolver) -> None:
    first = SettingsProvider(resolver=windows_resolver())
    second = SettingsProvider(resolver=windows_resolver())

    first.load(SettingsReader("<MSTestV2><DeploymentEnabled>false</DeploymentEnabled></MSTestV2>"))

    assert first.settings.deployment_enabled is False
    assert second.is_loaded is False
    assert second.settings == Settings()
