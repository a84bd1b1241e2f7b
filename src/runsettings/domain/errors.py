from __future__ import annotations

"""
Domain Exceptions.

Only structural problems with a settings document are raised to callers.
Directory entries that cannot be resolved are dropped by the parser and
never surface as exceptions.
"""

from typing import Optional


class SettingsException(ValueError):
    """
    Raised when the settings document violates the recognized schema.

    Attributes:
        element: Name of the offending element, when known.
        container: Name of the structural container it appeared in.
    """

    def __init__(
            self,
            message: str,
            *,
            element: Optional[str] = None,
            container: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.element = element
        self.container = container


class SettingsSectionNotFound(LookupError):
    """Raised when a run settings document has no adapter settings section."""


def unexpected_element(element: str, container: str) -> SettingsException:
    """Build the error reported for an unknown element inside a container."""
    return SettingsException(
        f"Invalid settings '{container}'. Unexpected XmlElement: '{element}'.",
        element=element,
        container=container,
    )


def missing_attribute(attribute: str, element: str, container: str) -> SettingsException:
    """Build the error reported for a mandatory attribute that is absent or blank."""
    return SettingsException(
        f"Invalid settings '{container}'. Element '{element}' requires a non-empty "
        f"'{attribute}' attribute.",
        element=element,
        container=container,
    )
