"""
Pydantic models for client options coming from outside the code.

ClientOptions validates a plain mapping (file contents, overrides);
ClientSettings reads the same options from CURL_CLIENT_* environment
variables and .env files. Both only pre-check values: the final word
belongs to ClientConfiguration.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import DEFAULT_PROTOCOLS, HTTP_AUTH_METHODS


def _lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


class ClientOptions(BaseModel):
    """
    Опции клиента из файла или словаря.

    Неизвестные ключи запрещены; http_auth и default_protocol
    сравниваются без учёта регистра.

    Example:
        >>> ClientOptions(timeout=10, http_auth="Digest").to_options()
        {'timeout': 10, 'http_auth': 'digest'}
    """

    model_config = ConfigDict(extra='forbid')

    timeout: Optional[int] = Field(default=None, gt=0, description="Transfer timeout in seconds")
    connect_timeout: Optional[int] = Field(default=None, gt=0, description="Connect timeout in seconds")
    max_redirects: Optional[int] = Field(default=None, gt=0, description="Maximum redirects")
    http_auth: Optional[str] = None
    default_protocol: Optional[str] = None
    enable_compression: Optional[bool] = None
    enable_decompression: Optional[bool] = None

    @field_validator('http_auth', 'default_protocol', mode='before')
    @classmethod
    def normalize_case(cls, v: Any) -> Any:
        return _lower(v)

    @field_validator('http_auth')
    @classmethod
    def validate_http_auth(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in HTTP_AUTH_METHODS:
            raise ValueError(f"http_auth must be one of {sorted(HTTP_AUTH_METHODS)}")
        return v

    @field_validator('default_protocol')
    @classmethod
    def validate_default_protocol(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in DEFAULT_PROTOCOLS:
            raise ValueError(f"default_protocol must be one of {sorted(DEFAULT_PROTOCOLS)}")
        return v

    def to_options(self) -> Dict[str, Any]:
        """Только заданные и истинные значения (ложные хранилище отвергает)."""
        return {name: value for name, value in self.model_dump().items() if value}


class ClientSettings(BaseSettings):
    """
    Curl client configuration from environment variables.

    Reads from:
    1. Environment variables (CURL_CLIENT_*)
    2. .env file
    3. Defaults (option unset)

    Example .env file:
        CURL_CLIENT_TIMEOUT=30
        CURL_CLIENT_CONNECT_TIMEOUT=5
        CURL_CLIENT_HTTP_AUTH=digest
        CURL_CLIENT_ENABLE_DECOMPRESSION=true
        CURL_CLIENT_LOG_LEVEL=DEBUG
        CURL_CLIENT_LOG_ENABLE_CONSOLE=true

    Usage:
        >>> settings = ClientSettings()
        >>> settings.to_client_options().to_options()
        {'timeout': 30, 'connect_timeout': 5, 'http_auth': 'digest', 'enable_decompression': True}
    """

    model_config = SettingsConfigDict(
        env_prefix='CURL_CLIENT_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # Client options
    timeout: Optional[int] = Field(default=None, gt=0)
    connect_timeout: Optional[int] = Field(default=None, gt=0)
    max_redirects: Optional[int] = Field(default=None, gt=0)
    http_auth: Optional[str] = None
    default_protocol: Optional[str] = None
    enable_compression: Optional[bool] = None
    enable_decompression: Optional[bool] = None

    # Logging (выключено, пока не включён хотя бы один обработчик)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "text", "colored"] = Field(default="text")
    log_enable_console: bool = Field(default=False)
    log_enable_file: bool = Field(default=False)
    log_file_path: Optional[str] = None
    log_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    log_backup_count: int = Field(default=5, ge=0)
    log_enable_correlation_id: bool = Field(default=True)

    @field_validator('log_level', 'log_format', mode='before')
    @classmethod
    def normalize_log_case(cls, v: Any, info) -> Any:
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == 'log_level' else v.lower()

    @field_validator('log_file_path')
    @classmethod
    def validate_file_path(cls, v: Optional[str], info) -> Optional[str]:
        """file_path обязателен при enable_file=True."""
        if info.data.get('log_enable_file') and not v:
            raise ValueError("log_file_path is required when log_enable_file=True")
        return v

    def to_client_options(self) -> ClientOptions:
        """Convert option fields to ClientOptions."""
        return ClientOptions(
            timeout=self.timeout,
            connect_timeout=self.connect_timeout,
            max_redirects=self.max_redirects,
            http_auth=self.http_auth,
            default_protocol=self.default_protocol,
            enable_compression=self.enable_compression,
            enable_decompression=self.enable_decompression,
        )

    @property
    def logging_enabled(self) -> bool:
        return self.log_enable_console or self.log_enable_file
