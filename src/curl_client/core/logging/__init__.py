"""
Logging system for the curl client.

Example:
    >>> from curl_client.core.logging import LoggingConfig
    >>> from curl_client import CurlClient
    >>>
    >>> client = CurlClient(logging_config=LoggingConfig.create(level="DEBUG", format="colored"))
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import CurlClientLogger
from .formatters import JSONFormatter, TextFormatter, ColoredFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "CurlClientLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "ColoredFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
