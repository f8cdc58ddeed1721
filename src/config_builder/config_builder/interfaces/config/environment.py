# ABOUTME: Abstract environment variable provider interface used for interpolation
# ABOUTME: Defines the contract for reading and writing environment-style key/value pairs

from abc import ABC, abstractmethod
from typing import Optional


class AbstractEnvironmentProvider(ABC):
    """
    Abstract source of environment variables.

    ``$env:<NAME>`` tokens in settings documents are resolved against a
    provider, and the pairs found in a ``.env`` file are written into it
    before any document is interpolated. Injecting a provider keeps the
    builder from coupling to the process-wide ``os.environ`` table.
    """

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """
        Return the value of variable ``name``.

        Args:
            name (str): The variable name.

        Returns:
            Optional[str]: The current value, or None when the variable is unset.
        """
        pass

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """
        Set variable ``name`` to ``value``, overwriting any previous value.

        Args:
            name (str): The variable name.
            value (str): The new value.
        """
        pass

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None
