# ABOUTME: Discovers and parses the settings documents of one environment directory
# ABOUTME: Hands each parsed document to the SectionApplier under its base file name

import json
from pathlib import Path
from typing import Iterator, Tuple

from loguru import logger

from config_builder.components.section_applier import SectionApplier
from config_builder.exceptions import (
    DirectoryReadError,
    InvalidSettingsDocumentError,
    UnknownEnvironmentError,
)
from config_builder.models.configuration import Configuration
from config_builder.models.document import SETTINGS_EXTENSION, SettingsDocument

ENVS_DIRECTORY = "envs"


def is_valid_environment_name(environment: str) -> bool:
    """Return True if ``environment`` can name a directory directly under ``envs/``."""
    if not isinstance(environment, str) or not environment:
        return False
    if environment in (".", ".."):
        return False
    return "/" not in environment and "\\" not in environment and "\x00" not in environment


def environment_dir(config_path: Path, environment: str) -> Path:
    """Return ``<config_path>/envs/<environment>``."""
    return Path(config_path) / ENVS_DIRECTORY / environment


def split_file_name(file_name: str) -> Tuple[str, str]:
    """Split ``file_name`` into its base name and extension segment.

    The base name is everything before the first dot and the extension is
    the segment after it, so ``db.json`` gives ``("db", "json")`` and
    ``db.local.json`` gives ``("db", "local")``.
    """
    parts = file_name.split(".")
    return parts[0], parts[1] if len(parts) > 1 else ""


def parse_settings_file(path: Path) -> SettingsDocument:
    """Read ``path`` as UTF-8 JSON.

    Raises:
        InvalidSettingsDocumentError: If the file cannot be read or parsed.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidSettingsDocumentError(str(path), {"reason": str(e)}) from e


class SettingsLoader:
    """Loads every settings document of an environment into a configuration.

    A file is a settings document when its extension segment is ``json``.
    Any other entry in the directory (data files read through
    ``readEnvFile``, subdirectories) is ignored. Documents are applied in
    file-name order; the result does not depend on that order apart from
    the usual last-writer-wins on duplicate root keys.
    """

    def __init__(self, config_path: Path, section_applier: SectionApplier):
        """
        Args:
            config_path: The configuration root containing ``envs/``.
            section_applier: Merges each parsed document.
        """
        self.config_path = Path(config_path)
        self.section_applier = section_applier
        self._logger = logger.bind(name=__name__)

    def resolve(self, environment: str) -> Path:
        """Return the settings directory of ``environment``.

        Raises:
            UnknownEnvironmentError: If the name is empty or invalid, or the
                directory does not exist.
        """
        if not is_valid_environment_name(environment):
            raise UnknownEnvironmentError(environment)
        path = environment_dir(self.config_path, environment)
        if not path.is_dir():
            raise UnknownEnvironmentError(environment, {"path": str(path)})
        return path

    def documents(self, environment: str) -> Iterator[Tuple[str, Path]]:
        """Yield ``(base name, path)`` for each settings document of ``environment``.

        Raises:
            UnknownEnvironmentError: If the environment cannot be resolved.
            DirectoryReadError: If the directory cannot be listed.
        """
        path = self.resolve(environment)
        try:
            entries = sorted(path.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise DirectoryReadError(str(path), {"reason": str(e)}) from e

        for entry in entries:
            name, extension = split_file_name(entry.name)
            if not name or extension != SETTINGS_EXTENSION or not entry.is_file():
                continue
            yield name, entry

    def load(self, config: Configuration, environment: str, is_defaults: bool) -> None:
        """Apply every settings document of ``environment`` to ``config``.

        Args:
            config: The configuration being assembled.
            environment: The environment to load.
            is_defaults: True when loading the defaults environment.

        Raises:
            UnknownEnvironmentError: If the environment cannot be resolved.
            DirectoryReadError: If the directory cannot be listed.
            InvalidSettingsDocumentError: If a document cannot be parsed.
            UnknownSectionError: If a section was not declared by the defaults.
        """
        count = 0
        for name, path in self.documents(environment):
            document = parse_settings_file(path)
            self.section_applier.apply(config, name, document, environment, is_defaults, source=str(path))
            count += 1
        self._logger.debug(f"Loaded {count} settings document(s) for environment '{environment}'")
