# ABOUTME: Environment-bound reader for data files stored next to the settings documents
# ABOUTME: Reads from the environment directory first and falls back to the defaults directory

from dataclasses import dataclass
from pathlib import Path

from config_builder.components.settings_loader import environment_dir
from config_builder.exceptions import FileAccessError


@dataclass(frozen=True)
class EnvFileReader:
    """Reads raw text files from an environment's settings directory.

    An instance is attached to every built configuration under
    ``readEnvFile``. It is immutable, so it stays valid (and safe to share)
    after the configuration is frozen, and it can be called any number of
    times.

    Attributes:
        config_path: The configuration root containing ``envs/``.
        environment: The environment the configuration was built for.
        defaults: The defaults environment used as fallback.
    """

    config_path: Path
    environment: str
    defaults: str

    def path_for(self, file_name: str) -> Path:
        """Return the path ``file_name`` would be read from.

        The environment's copy wins when it exists; otherwise the defaults
        copy is returned whether or not it exists.
        """
        candidate = environment_dir(self.config_path, self.environment) / file_name
        if candidate.exists():
            return candidate
        return environment_dir(self.config_path, self.defaults) / file_name

    def __call__(self, file_name: str, encoding: str = "utf-8") -> str:
        """Return the text content of ``file_name``.

        Args:
            file_name: A file name relative to the environment directory.
            encoding: Text encoding of the file.

        Raises:
            FileAccessError: If neither the environment nor the defaults
                directory holds a readable copy.
        """
        path = self.path_for(file_name)
        try:
            return path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(file_name, {"path": str(path), "reason": str(e)}) from e
