# ABOUTME: ConfigBuilder orchestrates loading, merging, freezing and memoizing configurations
# ABOUTME: Builds one Configuration per environment from layered JSON settings directories

from pathlib import Path
from typing import Optional

from loguru import logger

from config_builder.components.dotenv_loader import load_dotenv_file
from config_builder.components.env_file_reader import EnvFileReader
from config_builder.components.freezer import deep_freeze, thaw
from config_builder.components.section_applier import SectionApplier
from config_builder.components.settings_loader import SettingsLoader
from config_builder.config.settings import ConfigBuilderOptions, ConfigBuilderSettings, get_settings
from config_builder.implementations.memory.config import InMemoryConfigCache
from config_builder.implementations.noop.config import NoOpConfigCache
from config_builder.implementations.process import ProcessEnvironmentProvider
from config_builder.interfaces.config import AbstractConfigCache, AbstractEnvironmentProvider
from config_builder.models.configuration import ACCESSOR_KEY, ENV_KEY, Configuration


class ConfigBuilder:
    """Builds environment-specific configurations from a directory of settings.

    Given a configuration root laid out as::

        <path>/.env                      optional variables for $env: tokens
        <path>/envs/<defaults>/*.json    default settings
        <path>/envs/<environment>/*.json per-environment overrides

    ``build(environment)`` loads the ``.env`` file into the environment
    provider, applies the defaults directory and then the environment's
    directory to a fresh ``Configuration``, attaches the ``readEnvFile``
    accessor, freezes the result and memoizes it.

    Memoization is per builder: each instance owns its cache unless one is
    passed in. When ``freeze`` is disabled but ``cache`` is enabled, the
    cache keeps a private snapshot and every caller receives its own mutable
    copy, so one caller's edits never show up in another caller's view.

    Example:
        >>> builder = ConfigBuilder(path="config")
        >>> config = builder.build("production")
        >>> config.ENV
        'production'
    """

    def __init__(
        self,
        path: Optional[str | Path] = None,
        defaults: Optional[str] = None,
        freeze: Optional[bool] = True,
        cache: Optional[bool] = True,
        *,
        options: Optional[ConfigBuilderOptions] = None,
        environ: Optional[AbstractEnvironmentProvider] = None,
        config_cache: Optional[AbstractConfigCache] = None,
    ):
        """
        Initialize the builder.

        Args:
            path: The configuration root. Required unless ``options`` is given.
            defaults: Name of the defaults environment directory.
            freeze: Make built configurations read-only. Defaults to True.
            cache: Memoize built configurations per environment. Defaults to True.
            options: Pre-validated options; replaces the four arguments above.
            environ: Source of environment variables. Defaults to the process environment.
            config_cache: Cache to memoize into. Defaults to a private
                ``InMemoryConfigCache``; ignored when caching is disabled.

        Raises:
            pydantic.ValidationError: If the options are invalid.
        """
        if options is None:
            options = ConfigBuilderOptions(path=path, defaults=defaults, freeze=freeze, cache=cache)
        self.options = options

        self.environ = environ if environ is not None else ProcessEnvironmentProvider()
        if not options.cache:
            self.config_cache: AbstractConfigCache = NoOpConfigCache()
        else:
            self.config_cache = config_cache if config_cache is not None else InMemoryConfigCache()

        self.loader = SettingsLoader(options.path, SectionApplier(self.environ))
        self._logger = logger.bind(name=__name__)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ConfigBuilderSettings] = None,
        *,
        environ: Optional[AbstractEnvironmentProvider] = None,
        config_cache: Optional[AbstractConfigCache] = None,
    ) -> "ConfigBuilder":
        """Create a builder from ``CONFIG_BUILDER_*`` settings.

        Args:
            settings: Settings to use. Defaults to the cached process settings.
            environ: Source of environment variables.
            config_cache: Cache to memoize into.
        """
        settings = settings if settings is not None else get_settings()
        return cls(options=settings.to_options(), environ=environ, config_cache=config_cache)

    @property
    def path(self) -> Path:
        return self.options.path

    @property
    def defaults(self) -> str:
        return self.options.defaults

    @property
    def freeze(self) -> bool:
        return self.options.freeze

    @property
    def cache(self) -> bool:
        return self.options.cache

    def build(self, environment: str) -> Configuration:
        """Return the configuration for ``environment``.

        A memoized configuration is returned without touching the file system
        or re-reading ``.env``. Otherwise the configuration is assembled,
        frozen and stored according to the builder options. The lookup, the
        assembly and the store run under the cache's lock for
        ``environment``.

        Args:
            environment: The environment directory name under ``envs/``.

        Returns:
            The assembled configuration.

        Raises:
            UnknownEnvironmentError: If the environment or defaults directory is missing.
            DirectoryReadError: If a settings directory cannot be listed.
            InvalidSettingsDocumentError: If a settings document or ``.env`` is malformed.
            UnknownSectionError: If the environment declares a section the defaults lack.
        """
        with self.config_cache.lock(environment):
            cached = self.config_cache.get(environment)
            if cached is not None:
                self._logger.debug(f"Using cached configuration for environment '{environment}'")
                return cached if self.freeze else thaw(cached)

            config = self._assemble(environment)

            if self.freeze:
                config = deep_freeze(config)
                self.config_cache.set(environment, config)
            else:
                self.config_cache.set(environment, thaw(config))

        self._logger.info(f"Built configuration for environment '{environment}' from {self.path}")
        return config

    def clear_cache(self) -> None:
        """Forget every configuration memoized by this builder."""
        self.config_cache.clear()

    def _assemble(self, environment: str) -> Configuration:
        load_dotenv_file(self.path, self.environ)

        config = Configuration({ENV_KEY: environment})
        self.loader.load(config, self.defaults, is_defaults=True)
        self.loader.load(config, environment, is_defaults=False)

        config[ACCESSOR_KEY] = EnvFileReader(self.path, environment, self.defaults)
        return config

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={str(self.path)!r}, defaults={self.defaults!r}, "
            f"freeze={self.freeze}, cache={self.cache})"
        )
