# ABOUTME: Validated options for ConfigBuilder instances
# ABOUTME: Provides a pydantic options model and environment-driven builder settings

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULTS_ENVIRONMENT = "__defaults__"


def _validate_defaults_name(v: str) -> str:
    if not v or v in (".", "..") or "/" in v or "\\" in v or "\x00" in v:
        raise ValueError(
            f"Invalid defaults environment '{v}'. Must be a non-empty directory name under 'envs/'."
        )
    return v


class ConfigBuilderOptions(BaseModel):
    """Options accepted by ``ConfigBuilder``.

    Attributes:
        path: The configuration root. Holds the optional ``.env`` file and the
            ``envs/`` directory with one subdirectory per environment.
        defaults: Name of the environment directory holding default values.
            It is loaded before every environment and is the only place new
            sections may be declared.
        freeze: Whether built configurations are made read-only.
        cache: Whether built configurations are memoized per environment.
    """

    path: Path = Field(description="Root directory containing '.env' and 'envs/'.")
    defaults: str = Field(
        default=DEFAULTS_ENVIRONMENT,
        description="Name of the environment directory with the default settings.",
    )
    freeze: bool = Field(default=True, description="Make built configurations read-only.")
    cache: bool = Field(default=True, description="Memoize built configurations per environment.")

    model_config = ConfigDict(frozen=True)

    @field_validator("defaults", mode="before")
    @classmethod
    def validate_defaults(cls, v):
        """Fall back to the reserved name when no defaults environment is given."""
        if v is None:
            return DEFAULTS_ENVIRONMENT
        if isinstance(v, str):
            return _validate_defaults_name(v.strip())
        return v

    @field_validator("freeze", "cache", mode="before")
    @classmethod
    def validate_flags(cls, v):
        """Treat an explicit None like an omitted flag."""
        return True if v is None else v


class ConfigBuilderSettings(BaseSettings):
    """Builder options read from environment variables or a ``.env`` file.

    Lets an application wire its builder without code changes:

        CONFIG_BUILDER_PATH=/etc/myapp/config
        CONFIG_BUILDER_DEFAULTS=__defaults__
        CONFIG_BUILDER_FREEZE=true
        CONFIG_BUILDER_CACHE=true
    """

    path: Path = Field(default=Path("config"), description="Root directory containing '.env' and 'envs/'.")
    defaults: str = Field(default=DEFAULTS_ENVIRONMENT)
    freeze: bool = Field(default=True)
    cache: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="CONFIG_BUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("defaults", mode="before")
    @classmethod
    def validate_defaults(cls, v):
        if isinstance(v, str):
            return _validate_defaults_name(v.strip())
        return v

    def to_options(self) -> ConfigBuilderOptions:
        """Return the equivalent ``ConfigBuilderOptions``."""
        return ConfigBuilderOptions(path=self.path, defaults=self.defaults, freeze=self.freeze, cache=self.cache)


@lru_cache
def get_settings() -> ConfigBuilderSettings:
    """Provides a singleton instance of the builder settings.

    Returns:
        A single, cached instance of ConfigBuilderSettings.
    """
    return ConfigBuilderSettings()
