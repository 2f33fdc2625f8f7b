"""
Telemetry module for agents-toml.

Provides structured logging with credential masking.
"""

from agents_toml.telemetry.logger import (
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    AgentsTomlLogger,
    JsonFormatter,
    LogLevel,
    SensitiveDataMasker,
    TextFormatter,
    configure_logging_from_env,
    get_logger,
)

__all__ = [
    "AgentsTomlLogger",
    "JsonFormatter",
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "LogLevel",
    "SensitiveDataMasker",
    "TextFormatter",
    "configure_logging_from_env",
    "get_logger",
]
