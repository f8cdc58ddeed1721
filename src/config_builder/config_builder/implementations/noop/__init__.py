# ABOUTME: NoOp implementations package
# ABOUTME: Contains no-operation implementations for disabled features and testing

from .config.cache import NoOpConfigCache

__all__ = [
    "NoOpConfigCache",
]
