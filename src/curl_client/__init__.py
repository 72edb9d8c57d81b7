"""Curl Client - HTTP client abstraction over libcurl (pycurl)."""

import logging
from importlib.metadata import version, PackageNotFoundError

# core первым (см. core/__init__.py)
from .core.http_client import CurlClient
from .core.config import ClientConfiguration
from .core.exceptions import (
    CurlClientException,
    ConfigurationError,
    DomainError,
    InvalidArgumentError,
    RequestError,
    RequestErrorType,
    NetworkError,
    NetworkErrorType,
    CompressorNotConfiguredError,
    DecompressionBombError,
)
from .core.logging import LoggingConfig
from .core.env_config import load_from_env, load_logging_from_env, ConfigFileLoader
from .message import (
    Uri,
    Stream,
    Request,
    Response,
    StreamFactory,
    RequestFactory,
    ResponseFactory,
    Compressor,
    GzipCompressor,
)

# NullHandler - чтобы не было "No handler found"; настройка через logging.getLogger('curl_client')
logging.getLogger('curl_client').addHandler(logging.NullHandler())

try:
    __version__ = version("curl-client-core")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__all__ = [
    # Core
    "CurlClient",
    "ClientConfiguration",

    # Messages
    "Uri",
    "Stream",
    "Request",
    "Response",
    "StreamFactory",
    "RequestFactory",
    "ResponseFactory",
    "Compressor",
    "GzipCompressor",

    # Config sources
    "LoggingConfig",
    "load_from_env",
    "load_logging_from_env",
    "ConfigFileLoader",

    # Exceptions
    "CurlClientException",
    "ConfigurationError",
    "DomainError",
    "InvalidArgumentError",
    "RequestError",
    "RequestErrorType",
    "NetworkError",
    "NetworkErrorType",
    "CompressorNotConfiguredError",
    "DecompressionBombError",

    # Version
    "__version__",
]
