# ABOUTME: Resolution of $env:<NAME> tokens in settings scalars
# ABOUTME: Substitutes whole-string tokens with environment variable values

from typing import Any

from config_builder.interfaces.config import AbstractEnvironmentProvider

ENV_TOKEN_PREFIX = "$env:"


def interpolate(value: Any, environ: AbstractEnvironmentProvider) -> Any:
    """Resolve a single scalar against ``environ``.

    A string that starts with ``$env:`` is replaced by the current value of
    the variable named by the text after the prefix, up to the next colon:
    ``$env:HOME`` and ``$env:HOME:fallback`` both read ``HOME``. The result is
    None when the variable is unset, and ``$env:`` alone names no variable.
    Anything else, including strings that merely contain a token, is
    returned as is.

    Args:
        value: A JSON scalar.
        environ: The variable source.

    Returns:
        The substituted value, or ``value`` unchanged.
    """
    if isinstance(value, str) and value.startswith(ENV_TOKEN_PREFIX):
        name = value[len(ENV_TOKEN_PREFIX):].split(":", 1)[0]
        return environ.get(name) if name else None
    return value
