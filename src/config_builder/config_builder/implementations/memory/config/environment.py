# ABOUTME: In-memory implementation of AbstractEnvironmentProvider
# ABOUTME: Provides an isolated, thread-safe variable table for tests and embedded use

import threading
from typing import Dict, Mapping, Optional

from config_builder.interfaces.config import AbstractEnvironmentProvider


class InMemoryEnvironmentProvider(AbstractEnvironmentProvider):
    """
    In-memory implementation of AbstractEnvironmentProvider.

    Keeps variables in a private dictionary instead of ``os.environ``, so a
    builder can interpolate against a fixed mapping and load ``.env`` files
    without leaking values into the process.

    Features:
    - Seeded from any mapping
    - Thread-safe reads and writes
    - Snapshot of the current table via ``as_dict``
    """

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        """
        Initialize the provider.

        Args:
            variables: Initial variables. The mapping is copied.
        """
        self._variables: Dict[str, str] = dict(variables or {})
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional[str]:
        with self._lock:
            return self._variables.get(name)

    def set(self, name: str, value: str) -> None:
        with self._lock:
            self._variables[name] = value

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of every variable currently set."""
        with self._lock:
            return dict(self._variables)
