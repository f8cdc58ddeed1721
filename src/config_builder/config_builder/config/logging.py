# ABOUTME: Loguru configuration for the configuration builder
# ABOUTME: Provides opt-in logging setup with console colorization and file output

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_backtrace: bool = True
    console_diagnose: bool = True

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/config-builder.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} | {message}"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    file_serialize: bool = False

    # Performance settings
    enqueue: bool = False
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """Logging settings that can be configured via environment variables."""

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file_enabled: bool = Field(default=False, validation_alias="LOG_FILE_ENABLED")
    log_file_path: str = Field(default="logs/config-builder.log", validation_alias="LOG_FILE_PATH")
    log_console_colorize: bool = Field(default=True, validation_alias="LOG_CONSOLE_COLORIZE")


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    The library never calls this itself; applications opt in at startup.

    Args:
        config: Logger configuration. If None, uses configuration from environment variables.
    """
    if config is None:
        settings = LoggingSettings()
        config = LoggerConfig(
            console_level=settings.log_level,
            console_colorize=settings.log_console_colorize,
            file_enabled=settings.log_file_enabled,
            file_path=settings.log_file_path,
            file_level=settings.log_level,
        )

    # Records from this package always carry a name
    logger.configure(extra={"name": "config_builder"})

    # Remove default handler
    logger.remove()

    if config.console_enabled:
        logger.add(
            sys.stderr,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            serialize=config.file_serialize,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.configure(extra={"name": "config_builder"})
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{extra[name]}</cyan> | <level>{message}</level>",
        colorize=False,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )


def configure_for_production() -> None:
    """Configure logging for production environment."""
    config = LoggerConfig(
        console_level="INFO",
        console_colorize=False,
        console_backtrace=False,
        console_diagnose=False,
        file_enabled=True,
        file_level="INFO",
        file_serialize=True,
    )
    setup_logging(config)


def configure_for_development() -> None:
    """Configure logging for development environment."""
    config = LoggerConfig(
        console_level="DEBUG",
        console_colorize=True,
        console_backtrace=True,
        console_diagnose=True,
    )
    setup_logging(config)
