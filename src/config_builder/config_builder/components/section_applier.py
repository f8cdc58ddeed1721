# ABOUTME: Interpolates a parsed settings document and merges it into the configuration
# ABOUTME: Routes config.json to the root and every other document to its <name>Config section

from typing import Any, Dict

from loguru import logger

from config_builder.components.interpolation import interpolate
from config_builder.exceptions import InvalidSettingsDocumentError, UnknownSectionError
from config_builder.interfaces.config import AbstractEnvironmentProvider
from config_builder.models.configuration import ConfigList, ConfigMapping, Configuration
from config_builder.models.document import CONFIG_DOCUMENT_NAME, SettingsDocument, section_key


def interpolate_document(document: SettingsDocument, environ: AbstractEnvironmentProvider) -> Any:
    """Return a copy of ``document`` with every scalar leaf interpolated.

    Objects become ``ConfigMapping`` with their keys preserved and arrays
    become ``ConfigList`` with their positions preserved, at any depth
    (arrays of arrays included). The input is not modified.

    Args:
        document: A parsed JSON value.
        environ: The variable source for ``$env:`` tokens.

    Returns:
        The interpolated value.
    """
    if isinstance(document, dict):
        return ConfigMapping((key, interpolate_document(item, environ)) for key, item in document.items())
    if isinstance(document, list):
        return ConfigList(interpolate_document(item, environ) for item in document)
    return interpolate(document, environ)


class SectionApplier:
    """Merges interpolated settings documents into a configuration.

    The merge is shallow: each top-level key of a document overwrites the
    same key in its destination, and nested values are replaced wholesale.
    Only the defaults pass may create a ``<name>Config`` section; any other
    environment that ships an undeclared section fails.
    """

    def __init__(self, environ: AbstractEnvironmentProvider):
        """
        Args:
            environ: The variable source for ``$env:`` tokens.
        """
        self.environ = environ
        self._logger = logger.bind(name=__name__)

    def apply(
        self,
        config: Configuration,
        name: str,
        document: SettingsDocument,
        environment: str,
        is_defaults: bool,
        source: str | None = None,
    ) -> None:
        """Merge one document into ``config``.

        Args:
            config: The configuration being assembled.
            name: The document's base name.
            document: The parsed document.
            environment: The environment the document belongs to.
            is_defaults: True during the defaults pass.
            source: The file the document came from, used in error details.

        Raises:
            InvalidSettingsDocumentError: If the document is not a JSON object.
            UnknownSectionError: If a non-default environment supplies an
                undeclared section.
        """
        if not isinstance(document, dict):
            raise InvalidSettingsDocumentError(
                source or name,
                {"reason": f"top-level value must be an object, got {type(document).__name__}"},
            )

        fields: Dict[str, Any] = interpolate_document(document, self.environ)

        if name == CONFIG_DOCUMENT_NAME:
            config.update(fields)
            destination = "root"
        else:
            key = section_key(name)
            if key not in config:
                if not is_defaults:
                    raise UnknownSectionError(name, environment)
                config[key] = ConfigMapping()
            section = config[key]
            if not isinstance(section, dict):
                raise InvalidSettingsDocumentError(
                    source or name, {"reason": f"'{key}' is already set to a non-object value"}
                )
            section.update(fields)
            destination = key

        self._logger.debug(
            f"Merged {len(fields)} key(s) from '{name}' into {destination} (environment '{environment}')"
        )

