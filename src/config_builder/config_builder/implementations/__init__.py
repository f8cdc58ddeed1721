# ABOUTME: Implementations package exports
# ABOUTME: Contains concrete implementations of the builder's collaborator interfaces

"""
Implementations

In-memory, no-op and process-backed implementations of the cache and
environment provider interfaces.
"""

from .memory import InMemoryConfigCache, InMemoryEnvironmentProvider
from .noop import NoOpConfigCache
from .process import ProcessEnvironmentProvider

__all__ = [
    "InMemoryConfigCache",
    "InMemoryEnvironmentProvider",
    "NoOpConfigCache",
    "ProcessEnvironmentProvider",
]
