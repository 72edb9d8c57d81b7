"""
Configuration file loader for YAML and JSON files.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from ..logging import LoggingConfig
from .settings import ClientOptions

CONFIG_FILE_ENV = "CURL_CLIENT_CONFIG_FILE"


class ConfigValidationError(ConfigurationError):
    """Raised when configuration file is invalid."""


@dataclass(frozen=True)
class FileConfig:
    """
    Результат загрузки файла.

    Attributes:
        options: Опции для CurlClient(configuration=...)
        logging: Конфигурация логирования (None если секции нет)
    """
    options: Dict[str, Any] = field(default_factory=dict)
    logging: Optional[LoggingConfig] = None


class ConfigFileLoader:
    """
    Загрузчик конфигурации из файлов.

    Supports YAML and JSON formats with automatic format detection.
    Options may sit at the top level or under a "curl_client" section;
    an optional "logging" subsection becomes LoggingConfig.

    Example config.yaml:
        curl_client:
          timeout: 30
          http_auth: digest
          enable_decompression: true
          logging:
            level: DEBUG
            format: json

    Examples:
        >>> config = ConfigFileLoader.from_file("config.yaml")
        >>> client = CurlClient(configuration=config.options, logging_config=config.logging)
    """

    @staticmethod
    def from_yaml(path: Union[str, Path]) -> FileConfig:
        """
        Загрузить конфиг из YAML файла.

        Raises:
            FileNotFoundError: Если файл не найден
            ConfigValidationError: Если конфиг невалидный
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax in {path}: {e}") from e

        if not data:
            raise ConfigValidationError(f"Empty config file: {path}")

        return ConfigFileLoader._build_config(data, str(path))

    @staticmethod
    def from_json(path: Union[str, Path]) -> FileConfig:
        """
        Загрузить конфиг из JSON файла.

        Raises:
            FileNotFoundError: Если файл не найден
            ConfigValidationError: Если конфиг невалидный
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON syntax in {path}: {e}") from e

        if not data:
            raise ConfigValidationError(f"Empty config file: {path}")

        return ConfigFileLoader._build_config(data, str(path))

    @staticmethod
    def from_file(path: Union[str, Path]) -> FileConfig:
        """
        Автоопределение формата по расширению (.yaml, .yml, .json).

        Raises:
            ValueError: Если формат не поддерживается
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            return ConfigFileLoader.from_yaml(path)
        if suffix == ".json":
            return ConfigFileLoader.from_json(path)
        raise ValueError(
            f"Unsupported config file format: {suffix}. "
            f"Supported formats: .yaml, .yml, .json"
        )

    @staticmethod
    def from_env_path() -> Optional[FileConfig]:
        """Загрузить из пути в CURL_CLIENT_CONFIG_FILE (None если переменная не задана)."""
        config_path = os.environ.get(CONFIG_FILE_ENV)
        if not config_path:
            return None
        return ConfigFileLoader.from_file(config_path)

    @staticmethod
    def _build_config(data: Any, source: str) -> FileConfig:
        if isinstance(data, dict) and "curl_client" in data:
            data = data["curl_client"]

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Config must be a dictionary, got {type(data).__name__} in {source}"
            )

        config_data = dict(data)
        logging_data = config_data.pop("logging", None)
        if logging_data is not None and not isinstance(logging_data, dict):
            raise ConfigValidationError(f"logging must be a dictionary in {source}")

        try:
            options = ClientOptions.model_validate(config_data).to_options()
            logging_cfg = LoggingConfig.create(**logging_data) if logging_data is not None else None
        except (ValueError, TypeError) as e:
            raise ConfigValidationError(f"Invalid config in {source}: {e}") from e

        return FileConfig(options=options, logging=logging_cfg)
