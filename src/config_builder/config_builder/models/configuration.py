# ABOUTME: Container types for an assembled configuration
# ABOUTME: Dict and list subclasses with attribute access and a one-way frozen marker

from typing import Any, NoReturn

from config_builder.exceptions import FrozenConfigurationError

ENV_KEY = "ENV"
ACCESSOR_KEY = "readEnvFile"


def _rebuild(cls: type, items: Any, frozen: bool) -> Any:
    """Recreate a container from its items, restoring the frozen marker last."""
    container = cls(items)
    if frozen:
        container._mark_frozen()
    return container


class ConfigMapping(dict):
    """A JSON object inside an assembled configuration.

    Behaves exactly like a ``dict`` (and compares equal to one) while it is
    mutable. Keys can also be read and written as attributes, so
    ``section.host`` is ``section["host"]``.

    Once ``_mark_frozen`` has been called, every mutating operation raises
    ``FrozenConfigurationError`` at the write site. The marker can never be
    cleared; use ``config_builder.components.freezer.thaw`` to obtain a
    mutable copy.
    """

    __slots__ = ("_frozen",)

    def __init__(self, *args: Any, **kwargs: Any):
        object.__setattr__(self, "_frozen", False)
        super().__init__(*args, **kwargs)

    def _mark_frozen(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def _ensure_writable(self, key: Any = None, operation: str = "assign to") -> None:
        if getattr(self, "_frozen", False):
            raise FrozenConfigurationError(key, operation)

    # Attribute access

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'") from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    # Guarded dict mutators

    def __setitem__(self, key: Any, value: Any) -> None:
        self._ensure_writable(key)
        super().__setitem__(key, value)

    def __delitem__(self, key: Any) -> None:
        self._ensure_writable(key, "delete")
        super().__delitem__(key)

    def __ior__(self, other: Any) -> "ConfigMapping":
        self._ensure_writable(operation="update")
        return super().__ior__(other)

    def update(self, *args: Any, **kwargs: Any) -> None:
        self._ensure_writable(operation="update")
        super().update(*args, **kwargs)

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if key not in self:
            self._ensure_writable(key)
        return super().setdefault(key, default)

    def pop(self, key: Any, *default: Any) -> Any:
        self._ensure_writable(key, "delete")
        return super().pop(key, *default)

    def popitem(self) -> Any:
        self._ensure_writable(operation="delete from")
        return super().popitem()

    def clear(self) -> None:
        self._ensure_writable(operation="clear")
        super().clear()

    # copy, deepcopy and pickle rebuild through __init__; the slot never becomes a key
    def __reduce__(self) -> tuple:
        return _rebuild, (type(self), dict(self), getattr(self, "_frozen", False))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__repr__()})"


class ConfigList(list):
    """A JSON array inside an assembled configuration.

    Positions and nesting are preserved as parsed. Like ``ConfigMapping`` it
    compares equal to a plain ``list`` and rejects in-place changes once
    frozen.
    """

    __slots__ = ("_frozen",)

    def __init__(self, *args: Any):
        object.__setattr__(self, "_frozen", False)
        super().__init__(*args)

    def _mark_frozen(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def _ensure_writable(self, index: Any = None, operation: str = "assign to") -> None:
        if getattr(self, "_frozen", False):
            raise FrozenConfigurationError(index, operation)

    def __setitem__(self, index: Any, value: Any) -> None:
        self._ensure_writable(index)
        super().__setitem__(index, value)

    def __delitem__(self, index: Any) -> None:
        self._ensure_writable(index, "delete")
        super().__delitem__(index)

    def __iadd__(self, other: Any) -> "ConfigList":
        self._ensure_writable(operation="extend")
        return super().__iadd__(other)

    def __imul__(self, count: Any) -> "ConfigList":
        self._ensure_writable(operation="extend")
        return super().__imul__(count)

    def append(self, value: Any) -> None:
        self._ensure_writable(len(self))
        super().append(value)

    def extend(self, values: Any) -> None:
        self._ensure_writable(operation="extend")
        super().extend(values)

    def insert(self, index: Any, value: Any) -> None:
        self._ensure_writable(index)
        super().insert(index, value)

    def pop(self, index: Any = -1) -> Any:
        self._ensure_writable(index, "delete")
        return super().pop(index)

    def remove(self, value: Any) -> None:
        self._ensure_writable(operation="delete from")
        super().remove(value)

    def clear(self) -> None:
        self._ensure_writable(operation="clear")
        super().clear()

    def sort(self, *args: Any, **kwargs: Any) -> None:
        self._ensure_writable(operation="reorder")
        super().sort(*args, **kwargs)

    def reverse(self) -> None:
        self._ensure_writable(operation="reorder")
        super().reverse()

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"'{type(self).__name__}' object attribute '{name}' is read-only")

    def __reduce__(self) -> tuple:
        return _rebuild, (type(self), list(self), getattr(self, "_frozen", False))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__repr__()})"


class Configuration(ConfigMapping):
    """The assembled configuration for one environment.

    Holds ``ENV`` (the environment name), the root keys contributed by
    ``config.json`` documents, one ``<name>Config`` section per other
    document, and the ``readEnvFile`` accessor attached by the builder.

    Example:
        >>> config = builder.build("production")
        >>> config.ENV
        'production'
        >>> config.databaseConfig.host
        'db.internal'
        >>> config.readEnvFile("ca.pem")
        '-----BEGIN CERTIFICATE-----...'
    """

    __slots__ = ()
