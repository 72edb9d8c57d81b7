"""
Loading client options from environment variables and .env files.
"""

from typing import Any, Dict, Optional

from ..logging.config import LoggingConfig
from .settings import ClientOptions, ClientSettings


def _read_settings(env_file: Optional[str]) -> ClientSettings:
    if env_file is None:
        return ClientSettings()
    return ClientSettings(_env_file=env_file)


def load_from_env(env_file: Optional[str] = None, **overrides: Any) -> Dict[str, Any]:
    """
    Load client options from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters
    2. Environment variables (CURL_CLIENT_*)
    3. .env file
    4. Option unset

    Args:
        env_file: Custom .env file path
        **overrides: Explicit option overrides

    Returns:
        Dict of options ready for CurlClient(configuration=...).
        Unset and falsy options are left out.

    Raises:
        pydantic.ValidationError: Invalid value or unknown override

    Example:
        >>> options = load_from_env(timeout=5)
        >>> client = CurlClient(configuration=options)
    """
    settings = _read_settings(env_file)
    values = settings.to_client_options().model_dump(exclude_none=True)
    values.update(overrides)
    return ClientOptions.model_validate(values).to_options()


def load_logging_from_env(env_file: Optional[str] = None) -> Optional[LoggingConfig]:
    """
    Build LoggingConfig from CURL_CLIENT_LOG_* variables.

    Returns:
        LoggingConfig, or None when neither console nor file logging is enabled

    Example:
        >>> # export CURL_CLIENT_LOG_ENABLE_CONSOLE=true
        >>> client = CurlClient(logging_config=load_logging_from_env())
    """
    settings = _read_settings(env_file)
    if not settings.logging_enabled:
        return None

    return LoggingConfig.create(
        level=settings.log_level,
        format=settings.log_format,
        enable_console=settings.log_enable_console,
        enable_file=settings.log_enable_file,
        file_path=settings.log_file_path,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        enable_correlation_id=settings.log_enable_correlation_id,
    )
