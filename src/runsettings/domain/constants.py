from __future__ import annotations

"""
Domain Constants.

Element and attribute names recognized inside the adapter settings section,
together with the default values applied when an element is absent.
"""

from typing import Dict, FrozenSet

# -----------------------------------------------------------------------------
# Document Schema
# -----------------------------------------------------------------------------
SETTINGS_NAME = "MSTestV2"

ASSEMBLY_RESOLUTION = "AssemblyResolution"
DIRECTORY = "Directory"
PATH_ATTRIBUTE = "path"
INCLUDE_SUB_DIRECTORIES_ATTRIBUTE = "includeSubDirectories"

DEPLOYMENT_ENABLED = "DeploymentEnabled"
DEPLOY_TEST_SOURCE_DEPENDENCIES = "DeployTestSourceDependencies"
DELETE_DEPLOYMENT_DIRECTORY = "DeleteDeploymentDirectoryAfterTestRunIsComplete"

# Element name -> Settings field. Defaults apply when the element is absent.
BOOLEAN_FLAGS: Dict[str, str] = {
    DEPLOYMENT_ENABLED: "deployment_enabled",
    DEPLOY_TEST_SOURCE_DEPENDENCIES: "deploy_test_source_dependencies",
    DELETE_DEPLOYMENT_DIRECTORY: "delete_deployment_directory_after_test_run_is_complete",
}

DEFAULT_INCLUDE_SUB_DIRECTORIES = True
DEFAULT_FLAG_VALUE = True

# -----------------------------------------------------------------------------
# Path Resolution
# -----------------------------------------------------------------------------
WILDCARD_CHARACTERS: FrozenSet[str] = frozenset({"*", "?"})
