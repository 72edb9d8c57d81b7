"""
Configuration sources for the curl client: environment, .env and YAML/JSON files.

Example:
    >>> from curl_client.core.env_config import load_from_env, load_logging_from_env
    >>>
    >>> client = CurlClient(
    ...     configuration=load_from_env(timeout=10),
    ...     logging_config=load_logging_from_env(),
    ... )
"""

from .settings import ClientOptions, ClientSettings
from .loader import load_from_env, load_logging_from_env
from .file_loader import CONFIG_FILE_ENV, ConfigFileLoader, ConfigValidationError, FileConfig

__all__ = [
    "ClientOptions",
    "ClientSettings",
    "load_from_env",
    "load_logging_from_env",
    "ConfigFileLoader",
    "ConfigValidationError",
    "FileConfig",
    "CONFIG_FILE_ENV",
]
