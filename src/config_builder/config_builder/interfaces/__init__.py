# ABOUTME: Interfaces package exports
# ABOUTME: Exports the abstract collaborators of the configuration builder

from .config import AbstractConfigCache, AbstractEnvironmentProvider

__all__ = [
    "AbstractConfigCache",
    "AbstractEnvironmentProvider",
]
