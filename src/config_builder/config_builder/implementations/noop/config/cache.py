# ABOUTME: NoOp implementation of AbstractConfigCache that never stores anything
# ABOUTME: Used by builders constructed with caching disabled

from contextlib import AbstractContextManager, nullcontext
from typing import Optional

from config_builder.interfaces.config import AbstractConfigCache
from config_builder.models.configuration import Configuration


class NoOpConfigCache(AbstractConfigCache):
    """
    No-operation implementation of AbstractConfigCache.

    Every lookup misses and every store is discarded, so each ``build`` call
    goes back to the file system. The per-environment lock is a null context
    because there is no shared state to protect.

    Use Cases:
    - Builders created with ``cache=False``
    - Tests that edit the config tree between builds
    """

    def get(self, environment: str) -> Optional[Configuration]:
        return None

    def set(self, environment: str, config: Configuration) -> None:
        # Nothing is stored in NoOp implementation
        pass

    def lock(self, environment: str) -> AbstractContextManager:
        return nullcontext()

    def clear(self) -> None:
        pass

    def __contains__(self, environment: object) -> bool:
        return False

    def __len__(self) -> int:
        return 0
