# ABOUTME: Loguru configuration for the wire query library
# ABOUTME: Builds console and file handlers from the shared library settings

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from wire_query.config.settings import CoreSettings, get_settings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    app_name: str = "WireQuery"

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_backtrace: bool = True
    console_diagnose: bool = True
    console_serialize: bool = False

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/wire-query.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: str = "gz"
    file_serialize: bool = False

    # Error file output
    error_file_enabled: bool = False
    error_file_level: str = "ERROR"
    error_file_path: Union[str, Path] = "logs/wire-query-errors.log"

    # Performance settings
    enqueue: bool = False  # Async logging
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """File and colorization settings that can be configured via environment variables.

    Level and format come from `CoreSettings.LOG_LEVEL` and `CoreSettings.LOG_FORMAT`.
    """

    log_file_enabled: bool = Field(default=False, validation_alias="LOG_FILE_ENABLED")
    log_file_path: str = Field(default="logs/wire-query.log", validation_alias="LOG_FILE_PATH")
    log_console_colorize: bool = Field(default=True, validation_alias="LOG_CONSOLE_COLORIZE")


def build_logger_config(settings: Optional[CoreSettings] = None) -> LoggerConfig:
    """
    Derive a logger configuration from the library settings.

    `DEBUG` forces the DEBUG level. Production turns off colors, backtraces and
    variable diagnostics, and adds the error file when file logging is enabled.

    Args:
        settings: Settings to read. Defaults to `get_settings()`.

    Returns:
        The logger configuration for the current environment.
    """
    settings = settings or get_settings()
    file_settings = LoggingSettings()
    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    production = settings.ENV == "production"

    return LoggerConfig(
        app_name=settings.APP_NAME,
        console_level=level,
        console_colorize=file_settings.log_console_colorize and not production,
        console_backtrace=not production,
        console_diagnose=not production,
        console_serialize=settings.LOG_FORMAT == "json",
        file_enabled=file_settings.log_file_enabled,
        file_path=file_settings.log_file_path,
        file_level=level,
        file_serialize=settings.LOG_FORMAT == "json",
        error_file_enabled=file_settings.log_file_enabled and production,
    )


def setup_logging(config: Optional[LoggerConfig] = None, settings: Optional[CoreSettings] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    Importing the library never installs handlers; applications call this once
    at startup.

    Args:
        config: Logger configuration. If None, it is built from `settings`.
        settings: Settings used when `config` is None. Defaults to `get_settings()`.
    """
    if config is None:
        config = build_logger_config(settings)

    # Remove default handler
    logger.remove()
    logger.configure(extra={"app_name": config.app_name})

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            serialize=config.console_serialize,
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
            compression=config.file_compression,
            serialize=config.file_serialize,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.error_file_enabled:
        error_path = Path(config.error_file_path)
        error_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.error_file_path,
            level=config.error_file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
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
