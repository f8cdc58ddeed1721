# ABOUTME: Recursive freezing and thawing of assembled configurations
# ABOUTME: Marks every reachable container read-only so later writes fail at the write site

from typing import Any

from config_builder.models.configuration import ConfigList, ConfigMapping


def is_frozen(value: Any) -> bool:
    """Return True if ``value`` is a frozen configuration container."""
    return isinstance(value, (ConfigMapping, ConfigList)) and getattr(value, "_frozen", False)


def deep_freeze(value: Any) -> Any:
    """Make ``value`` and every container reachable from it read-only.

    ``ConfigMapping`` and ``ConfigList`` instances are frozen in place and
    returned as the same object. Plain ``dict`` and ``list`` values are
    converted to their configuration counterparts first, so that no mutable
    container remains reachable; when ``value`` itself is a plain container
    the converted copy is returned. Scalars and the immutable ``readEnvFile``
    accessor are returned unchanged.

    Children are frozen before their parent, so a frozen container only ever
    holds frozen containers and freezing it again is a no-op. Cyclic inputs
    are not supported.

    Args:
        value: The value to freeze.

    Returns:
        The frozen value.
    """
    if is_frozen(value):
        return value

    if isinstance(value, dict):
        mapping = value if isinstance(value, ConfigMapping) else ConfigMapping(value)
        for key, item in mapping.items():
            frozen = deep_freeze(item)
            if frozen is not item:
                dict.__setitem__(mapping, key, frozen)
        mapping._mark_frozen()
        return mapping

    if isinstance(value, list):
        sequence = value if isinstance(value, ConfigList) else ConfigList(value)
        for index, item in enumerate(sequence):
            frozen = deep_freeze(item)
            if frozen is not item:
                list.__setitem__(sequence, index, frozen)
        sequence._mark_frozen()
        return sequence

    return value


def thaw(value: Any) -> Any:
    """Return a fully mutable deep copy of ``value``.

    Container types are kept (a ``Configuration`` thaws to a new
    ``Configuration``); plain containers become configuration containers.
    Scalars and the accessor are shared, not copied.
    """
    if isinstance(value, dict):
        mapping_type = type(value) if isinstance(value, ConfigMapping) else ConfigMapping
        return mapping_type((key, thaw(item)) for key, item in value.items())
    if isinstance(value, list):
        return ConfigList(thaw(item) for item in value)
    return value
