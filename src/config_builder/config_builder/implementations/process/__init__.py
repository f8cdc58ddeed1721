# ABOUTME: Process-backed implementations package
# ABOUTME: Implementations that talk to the real operating-system process state

from .environment import ProcessEnvironmentProvider

__all__ = [
    "ProcessEnvironmentProvider",
]
