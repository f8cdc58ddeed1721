# ABOUTME: Models package initialization
# ABOUTME: Exports configuration containers and settings document types

from .configuration import ACCESSOR_KEY, ENV_KEY, ConfigList, ConfigMapping, Configuration
from .document import CONFIG_DOCUMENT_NAME, SECTION_SUFFIX, SETTINGS_EXTENSION, Scalar, SettingsDocument, section_key

__all__ = [
    "ACCESSOR_KEY",
    "ENV_KEY",
    "ConfigList",
    "ConfigMapping",
    "Configuration",
    "CONFIG_DOCUMENT_NAME",
    "SECTION_SUFFIX",
    "SETTINGS_EXTENSION",
    "Scalar",
    "SettingsDocument",
    "section_key",
]
