# ABOUTME: In-memory implementation of AbstractConfigCache with per-environment locks
# ABOUTME: Memoizes built configurations for the lifetime of the cache object

import threading
from contextlib import AbstractContextManager
from typing import Callable, Dict, List, Optional

from config_builder.interfaces.config import AbstractConfigCache
from config_builder.models.configuration import Configuration


class InMemoryConfigCache(AbstractConfigCache):
    """
    In-memory implementation of AbstractConfigCache.

    Stores one configuration per environment name in a dictionary and hands
    out a dedicated lock per environment. Builders hold that lock around the
    "check, build, store" sequence, so two threads asking for the same
    environment for the first time run the load pipeline once and both
    receive the same stored instance. Builds of different environments do
    not block each other.

    Features:
    - Per-environment mutual exclusion with an injectable lock factory
    - Thread-safe table access
    - No eviction; entries and locks live until ``clear`` or process exit
    - Can be shared by several builders on purpose (same config root only)
    """

    def __init__(self, lock_factory: Callable[[], AbstractContextManager] = threading.Lock):
        """
        Initialize the cache.

        Args:
            lock_factory: Callable returning a new context-manager lock. Called
                once per distinct environment name.
        """
        self._lock_factory = lock_factory
        self._entries: Dict[str, Configuration] = {}
        self._key_locks: Dict[str, AbstractContextManager] = {}
        self._lock = threading.RLock()

    def get(self, environment: str) -> Optional[Configuration]:
        with self._lock:
            return self._entries.get(environment)

    def set(self, environment: str, config: Configuration) -> None:
        with self._lock:
            self._entries[environment] = config

    def lock(self, environment: str) -> AbstractContextManager:
        with self._lock:
            key_lock = self._key_locks.get(environment)
            if key_lock is None:
                key_lock = self._lock_factory()
                self._key_locks[environment] = key_lock
            return key_lock

    def clear(self) -> None:
        """Remove every stored configuration and every per-environment lock.

        Builds already running keep the lock they hold; later builds of the
        same environment get a fresh one.
        """
        with self._lock:
            self._entries.clear()
            self._key_locks.clear()

    def environments(self) -> List[str]:
        """Return the names of every cached environment, in insertion order."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, environment: object) -> bool:
        with self._lock:
            return environment in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
