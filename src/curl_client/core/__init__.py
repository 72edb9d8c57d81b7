"""Core модули curl клиента."""

# exceptions первым: message.compression импортирует его при загрузке пакета
from .exceptions import (
    CurlClientException,
    TemporaryError,
    FatalError,
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
from .config import ClientConfiguration
from .options import translate_configuration, resolve_http_version, apply_defaults, DEFAULT_CURL_OPTIONS
from .transfer import TransferExecutor, TransferResult
from .shaping import RequestShaper, ShapedRequest, validate_request
from .error_handler import ErrorHandler
from .http_client import CurlClient

__all__ = [
    "CurlClient",
    "ClientConfiguration",
    "translate_configuration",
    "resolve_http_version",
    "apply_defaults",
    "DEFAULT_CURL_OPTIONS",
    "TransferExecutor",
    "TransferResult",
    "RequestShaper",
    "ShapedRequest",
    "validate_request",
    "ErrorHandler",
    "CurlClientException",
    "TemporaryError",
    "FatalError",
    "ConfigurationError",
    "DomainError",
    "InvalidArgumentError",
    "RequestError",
    "RequestErrorType",
    "NetworkError",
    "NetworkErrorType",
    "CompressorNotConfiguredError",
    "DecompressionBombError",
]
