# ABOUTME: Configuration package initialization
# ABOUTME: Exports builder options, settings and logging utilities

from config_builder.config.settings import (
    DEFAULTS_ENVIRONMENT,
    ConfigBuilderOptions,
    ConfigBuilderSettings,
    get_settings,
)
from config_builder.config.logging import (
    LoggerConfig,
    LoggingSettings,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "DEFAULTS_ENVIRONMENT",
    "ConfigBuilderOptions",
    "ConfigBuilderSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
