# ABOUTME: Environment provider backed by the real process environment
# ABOUTME: Default provider used by ConfigBuilder for interpolation and .env loading

import os
from typing import Optional

from config_builder.interfaces.config import AbstractEnvironmentProvider


class ProcessEnvironmentProvider(AbstractEnvironmentProvider):
    """
    Reads and writes ``os.environ``.

    Writes are process-wide and visible to every other component (and child
    process) reading the environment, which is what applications expect from
    a ``.env`` file.
    """

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value
