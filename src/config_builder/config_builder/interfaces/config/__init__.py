# ABOUTME: Configuration collaborator interfaces
# ABOUTME: Includes the environment variable provider and the configuration cache contracts

from .cache import AbstractConfigCache
from .environment import AbstractEnvironmentProvider

__all__ = [
    "AbstractConfigCache",
    "AbstractEnvironmentProvider",
]
