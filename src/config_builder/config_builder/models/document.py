# ABOUTME: Type definitions for parsed settings documents
# ABOUTME: Describes the closed set of JSON values a settings file may contain

from typing import Dict, List, Union

Scalar = Union[str, int, float, bool, None]
"""A JSON leaf value."""

SettingsDocument = Union[Dict[str, "SettingsDocument"], List["SettingsDocument"], Scalar]
"""A parsed settings file: an object, an array or a scalar, nested arbitrarily."""

CONFIG_DOCUMENT_NAME = "config"
"""Base name of the document whose keys are merged into the configuration root."""

SECTION_SUFFIX = "Config"
"""Suffix appended to a document's base name to form its section key."""

SETTINGS_EXTENSION = "json"
"""Extension segment identifying a settings document."""


def section_key(name: str) -> str:
    """Return the configuration key under which document ``name`` is merged."""
    return f"{name}{SECTION_SUFFIX}"
