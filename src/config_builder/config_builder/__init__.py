# ABOUTME: Package initialization for the layered configuration builder
# ABOUTME: Exports the builder, configuration containers, components and exceptions

"""
Layered, environment-specific configuration builder.

Assembles one read-only configuration per environment by applying a
directory of JSON settings documents over a directory of defaults,
resolving ``$env:<NAME>`` tokens against environment variables.
"""

from config_builder.builder import ConfigBuilder
from config_builder.components import EnvFileReader, deep_freeze, interpolate, is_frozen, thaw
from config_builder.config.settings import DEFAULTS_ENVIRONMENT, ConfigBuilderOptions, ConfigBuilderSettings
from config_builder.exceptions import (
    ConfigBuilderException,
    UnknownEnvironmentError,
    DirectoryReadError,
    InvalidSettingsDocumentError,
    UnknownSectionError,
    FileAccessError,
    FrozenConfigurationError,
)
from config_builder.models.configuration import ConfigList, ConfigMapping, Configuration

__version__ = "0.1.0"

__all__ = [
    "ConfigBuilder",
    "ConfigBuilderOptions",
    "ConfigBuilderSettings",
    "DEFAULTS_ENVIRONMENT",
    "Configuration",
    "ConfigMapping",
    "ConfigList",
    "EnvFileReader",
    "deep_freeze",
    "is_frozen",
    "thaw",
    "interpolate",
    "ConfigBuilderException",
    "UnknownEnvironmentError",
    "DirectoryReadError",
    "InvalidSettingsDocumentError",
    "UnknownSectionError",
    "FileAccessError",
    "FrozenConfigurationError",
]
