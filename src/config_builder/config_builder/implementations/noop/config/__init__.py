# ABOUTME: NoOp configuration collaborators
# ABOUTME: Exports the non-storing configuration cache

from .cache import NoOpConfigCache

__all__ = [
    "NoOpConfigCache",
]
