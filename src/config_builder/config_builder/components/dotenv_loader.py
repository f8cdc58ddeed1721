# ABOUTME: Loads the optional .env file at the configuration root into an environment provider
# ABOUTME: Accepts KEY=VALUE lines (python-dotenv) or a flat JSON object

import io
import json
from pathlib import Path
from typing import Dict

from dotenv import dotenv_values
from loguru import logger

from config_builder.exceptions import InvalidSettingsDocumentError
from config_builder.interfaces.config import AbstractEnvironmentProvider

DOTENV_FILE_NAME = ".env"


def _json_variables(path: Path, text: str) -> Dict[str, str]:
    try:
        fields = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidSettingsDocumentError(str(path), {"reason": str(e)}) from e

    variables = {}
    for key, value in fields.items():
        if value is None:
            continue
        # Non-string values keep their JSON spelling ("true", "3")
        variables[key] = value if isinstance(value, str) else json.dumps(value)
    return variables


def read_dotenv_file(path: Path) -> Dict[str, str]:
    """Parse ``path`` into a flat name/value mapping.

    A file whose first non-blank character is ``{`` is read as a JSON object;
    anything else is parsed as ``KEY=VALUE`` lines by python-dotenv. Keys
    without a value are dropped.

    Raises:
        InvalidSettingsDocumentError: If the file cannot be read, or looks like
            JSON but is not a JSON object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidSettingsDocumentError(str(path), {"reason": str(e)}) from e

    if text.lstrip().startswith("{"):
        return _json_variables(path, text)

    values = dotenv_values(stream=io.StringIO(text), interpolate=False)
    return {key: value for key, value in values.items() if value is not None}


def load_dotenv_file(config_path: Path, environ: AbstractEnvironmentProvider) -> int:
    """Write the variables of ``<config_path>/.env`` into ``environ``.

    Existing variables with the same name are overwritten. A missing file is
    not an error.

    Args:
        config_path: The configuration root.
        environ: The provider to write into.

    Returns:
        The number of variables written.
    """
    path = Path(config_path) / DOTENV_FILE_NAME
    if not path.is_file():
        return 0

    variables = read_dotenv_file(path)
    for key, value in variables.items():
        environ.set(key, value)

    logger.bind(name=__name__).debug(f"Loaded {len(variables)} variable(s) from {path}")
    return len(variables)
