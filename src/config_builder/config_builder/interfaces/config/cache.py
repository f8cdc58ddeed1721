# ABOUTME: Abstract cache interface for memoizing built configurations per environment
# ABOUTME: Defines lookup, storage and per-key mutual exclusion for the build sequence

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional

from config_builder.models.configuration import Configuration


class AbstractConfigCache(ABC):
    """
    Abstract store of built configurations keyed by environment name.

    A builder consults the cache before touching the file system and stores
    the result of every successful build. The whole "check, build, store"
    sequence runs inside ``lock(environment)`` so that concurrent first builds
    of one environment produce a single canonical instance.

    Entries are never evicted implicitly; only ``clear`` removes them.
    """

    @abstractmethod
    def get(self, environment: str) -> Optional[Configuration]:
        """
        Return the cached configuration for ``environment``.

        Args:
            environment (str): The environment name.

        Returns:
            Optional[Configuration]: The stored configuration, or None on a miss.
        """
        pass

    @abstractmethod
    def set(self, environment: str, config: Configuration) -> None:
        """
        Store ``config`` as the result for ``environment``.

        Args:
            environment (str): The environment name.
            config (Configuration): The built configuration.
        """
        pass

    @abstractmethod
    def lock(self, environment: str) -> AbstractContextManager:
        """
        Return the mutual-exclusion guard for ``environment``.

        Args:
            environment (str): The environment name.

        Returns:
            AbstractContextManager: A context manager held around the build sequence.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored configuration."""
        pass

    @abstractmethod
    def __contains__(self, environment: object) -> bool:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
