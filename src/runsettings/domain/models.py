from __future__ import annotations

"""
Settings Domain Data Models.

Immutable value objects produced by the settings parser and handed to the
hosting test framework.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from runsettings.domain.constants import DEFAULT_FLAG_VALUE

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RecursiveDirectoryPath:
    """
    A configured search directory.

    Attributes:
        directory_path: Directory path. Absolute and existing once resolved.
        include_sub_directories: Whether nested directories are searched too.
    """
    directory_path: str
    include_sub_directories: bool = True


@dataclass(frozen=True)
class Settings:
    """
    Resolved adapter settings for a single test run.

    Attributes:
        search_directories: Resolved directories, in document order.
        deployment_enabled: Whether test deployment is performed.
        deploy_test_source_dependencies: Whether dependencies of the test
            source are deployed alongside it.
        delete_deployment_directory_after_test_run_is_complete: Whether the
            deployment directory is removed at the end of the run.
    """
    search_directories: Tuple[RecursiveDirectoryPath, ...] = ()
    deployment_enabled: bool = DEFAULT_FLAG_VALUE
    deploy_test_source_dependencies: bool = DEFAULT_FLAG_VALUE
    delete_deployment_directory_after_test_run_is_complete: bool = DEFAULT_FLAG_VALUE

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view used for JSON rendering."""
        data = asdict(self)
        data["search_directories"] = [asdict(d) for d in self.search_directories]
        return data
