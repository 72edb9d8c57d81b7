"""
Хранилище конфигурации curl клиента.

Набор опций фиксирован; у каждой опции объявлен тип значения, у
перечислимых - допустимый набор значений. Хранилище изменяемое, но
клиент читает его только через snapshot() - неизменяемую копию на
время одной передачи.
"""

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping

from .exceptions import DomainError, InvalidArgumentError

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОПЦИИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

TIMEOUT = "timeout"
CONNECT_TIMEOUT = "connect_timeout"
MAX_REDIRECTS = "max_redirects"
HTTP_AUTH = "http_auth"
DEFAULT_PROTOCOL = "default_protocol"
ENABLE_COMPRESSION = "enable_compression"
ENABLE_DECOMPRESSION = "enable_decompression"

# Опция -> ожидаемый тип значения
OPTION_TYPES: Mapping[str, type] = MappingProxyType({
    TIMEOUT: int,
    CONNECT_TIMEOUT: int,
    MAX_REDIRECTS: int,
    HTTP_AUTH: str,
    DEFAULT_PROTOCOL: str,
    ENABLE_COMPRESSION: bool,
    ENABLE_DECOMPRESSION: bool,
})

HTTP_AUTH_METHODS: FrozenSet[str] = frozenset({"basic", "digest", "ntlm", "gssnegotiate", "any"})
DEFAULT_PROTOCOLS: FrozenSet[str] = frozenset({"http", "https"})

# Опция -> допустимые значения (сравнение без учёта регистра)
OPTION_CHOICES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    HTTP_AUTH: HTTP_AUTH_METHODS,
    DEFAULT_PROTOCOL: DEFAULT_PROTOCOLS,
})


class ClientConfiguration:
    """
    Валидируемый набор опций клиента.

    Опции:
        timeout: (int) Максимальное время передачи, сек
        connect_timeout: (int) Максимальное время подключения, сек
        max_redirects: (int) Максимум редиректов
        http_auth: (str) basic, digest, ntlm, gssnegotiate или any
        default_protocol: (str) http или https - для URI без схемы
        enable_compression: (bool) Сжимать тело POST/PUT запросов (gzip)
        enable_decompression: (bool) Распаковывать ответы с Content-Encoding: gzip

    Пустые значения (0, False, "") отклоняются, поэтому опцию нельзя
    "выключить" значением False - её можно только не задавать или удалить.

    Examples:
        >>> config = ClientConfiguration({"timeout": 30, "http_auth": "digest"})
        >>> config.get("timeout")
        30
        >>> config.set("max_redirects", "5")
        Traceback (most recent call last):
        ...
        InvalidArgumentError: Incorrect value type for the 'max_redirects' option
    """

    def __init__(self, options: Mapping[str, Any] = None):
        self._options: Dict[str, Any] = {}
        if options:
            self.set_all(options)

    def set(self, name: str, value: Any) -> 'ClientConfiguration':
        """
        Установить опцию (последняя запись побеждает).

        Raises:
            DomainError: Пустое имя или пустое значение
            InvalidArgumentError: Неизвестная опция, неверный тип или значение
        """
        if not name:
            raise DomainError("Invalid name: empty string passed.")
        if not value:
            raise DomainError("Invalid option value.")
        if name not in OPTION_TYPES:
            raise InvalidArgumentError(f"Unknown client configuration option: '{name}'")

        # type() вместо isinstance(): bool - подкласс int
        if type(value) is not OPTION_TYPES[name]:
            raise InvalidArgumentError(f"Incorrect value type for the '{name}' option")

        choices = OPTION_CHOICES.get(name)
        if choices is not None and value.lower() not in choices:
            raise InvalidArgumentError(f"Invalid value for the setting: {name}")

        self._options[name] = value
        return self

    def set_all(self, options: Mapping[str, Any]) -> 'ClientConfiguration':
        """
        Установить несколько опций.

        Применяется по одной; при первой ошибке уже применённые опции
        остаются в хранилище.

        Raises:
            DomainError: Пустой набор опций
        """
        if not options:
            raise DomainError("Empty configuration")
        for name, value in options.items():
            self.set(name, value)
        return self

    def get(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)

    def remove(self, name: str) -> None:
        """Удалить опцию (если задана)."""
        self._options.pop(name, None)

    def is_enabled(self, name: str) -> bool:
        return bool(self._options.get(name, False))

    def snapshot(self) -> Mapping[str, Any]:
        """Неизменяемая копия опций на момент вызова."""
        return MappingProxyType(dict(self._options))

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._options)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"ClientConfiguration({self._options!r})"
