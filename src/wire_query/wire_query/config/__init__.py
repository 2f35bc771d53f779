# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the library

# Main settings aggregator and convenience imports
from wire_query.config.settings import CoreSettings, get_settings
from wire_query.config.defaults import apply_defaults
from wire_query.config.logging import (
    LoggerConfig,
    LoggingSettings,
    build_logger_config,
    setup_logging,
    get_logger,
)

__all__ = [
    "CoreSettings",
    "get_settings",
    "apply_defaults",
    "LoggerConfig",
    "LoggingSettings",
    "build_logger_config",
    "setup_logging",
    "get_logger",
]
