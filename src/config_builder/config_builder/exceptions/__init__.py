# ABOUTME: Exceptions package exports
# ABOUTME: Exports the configuration builder error taxonomy

from config_builder.exceptions.base import (
    ConfigBuilderException,
    UnknownEnvironmentError,
    DirectoryReadError,
    InvalidSettingsDocumentError,
    UnknownSectionError,
    FileAccessError,
    FrozenConfigurationError,
)

__all__ = [
    "ConfigBuilderException",
    "UnknownEnvironmentError",
    "DirectoryReadError",
    "InvalidSettingsDocumentError",
    "UnknownSectionError",
    "FileAccessError",
    "FrozenConfigurationError",
]
