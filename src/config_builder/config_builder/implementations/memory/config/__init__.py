# ABOUTME: In-memory configuration collaborators
# ABOUTME: Exports the memoizing cache and the isolated environment provider

from .cache import InMemoryConfigCache
from .environment import InMemoryEnvironmentProvider

__all__ = [
    "InMemoryConfigCache",
    "InMemoryEnvironmentProvider",
]
