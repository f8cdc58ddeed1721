# ABOUTME: In-memory implementations package
# ABOUTME: Zero-dependency implementations using Python standard library only

from .config.cache import InMemoryConfigCache
from .config.environment import InMemoryEnvironmentProvider

__all__ = [
    "InMemoryConfigCache",
    "InMemoryEnvironmentProvider",
]
