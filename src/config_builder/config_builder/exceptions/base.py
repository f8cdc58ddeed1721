# ABOUTME: Exception classes raised while assembling an environment configuration
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class ConfigBuilderException(Exception):
    """Base exception class for the configuration builder.

    Provides structured error handling with optional error codes and contextual
    details. Every failure raised by a build, a settings load or a frozen
    configuration inherits from this class so callers can treat them uniformly
    as fatal startup errors.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize ConfigBuilderException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class UnknownEnvironmentError(ConfigBuilderException):
    """Exception raised when an environment cannot be resolved.

    Used when a build or settings load targets an environment that does not
    exist, such as:
    - An empty environment name
    - A name with no matching directory under ``envs/``
    - A name that would escape the ``envs/`` directory

    Should include the environment name in ``details``.
    """

    def __init__(self, environment: str, details: Dict[str, Any] | None = None):
        super().__init__(
            f"Unknown environment '{environment}'",
            "UNKNOWN_ENVIRONMENT",
            {"environment": environment, **(details or {})},
        )
        self.environment = environment


class DirectoryReadError(ConfigBuilderException):
    """Exception raised when an environment directory exists but cannot be listed."""

    def __init__(self, path: str, details: Dict[str, Any] | None = None):
        super().__init__(
            f"Unable to read environments config directory: '{path}'",
            "DIRECTORY_READ_FAILED",
            {"path": path, **(details or {})},
        )
        self.path = path


class InvalidSettingsDocumentError(ConfigBuilderException):
    """Exception raised when a settings document cannot be used.

    Used when a file with the settings extension fails to load, such as:
    - Malformed JSON
    - Unreadable file contents
    - A top-level value that is not a JSON object
    - A malformed ``.env`` document

    Should include the offending file path.
    """

    def __init__(self, path: str, details: Dict[str, Any] | None = None):
        super().__init__(
            f"{path} is not a valid JSON file",
            "INVALID_SETTINGS_DOCUMENT",
            {"path": path, **(details or {})},
        )
        self.path = path


class UnknownSectionError(ConfigBuilderException):
    """Exception raised when an environment supplies a section missing from the defaults.

    Sections may only be introduced by the defaults environment. Any other
    environment that ships ``<name>.json`` without a matching defaults
    document triggers this error.
    """

    def __init__(self, section: str, environment: str):
        super().__init__(
            f"Unknown config section '{section}' in environment '{environment}'",
            "UNKNOWN_SECTION",
            {"section": section, "environment": environment},
        )
        self.section = section
        self.environment = environment


class FileAccessError(ConfigBuilderException):
    """Exception raised when ``readEnvFile`` finds the file in neither environment."""

    def __init__(self, file_name: str, details: Dict[str, Any] | None = None):
        super().__init__(
            f"Unable to read file from config: '{file_name}'",
            "FILE_ACCESS_FAILED",
            {"file_name": file_name, **(details or {})},
        )
        self.file_name = file_name


class FrozenConfigurationError(ConfigBuilderException, TypeError):
    """Exception raised on any write to a frozen configuration.

    Raised at the write site for assignments, deletions and in-place list
    operations on a frozen ``Configuration`` or any container nested in it.
    It is also a ``TypeError`` so it reads like the error raised by other
    immutable built-ins.
    """

    def __init__(self, key: Any = None, operation: str = "assign to"):
        if key is None:
            message = f"Cannot {operation} a read only configuration"
        else:
            message = f"Cannot {operation} read only property '{key}'"
        super().__init__(message, "FROZEN_CONFIGURATION", {"key": key, "operation": operation})
        self.key = key
        self.operation = operation
