"""
Иерархия исключений curl клиента.

Классификация:
- TemporaryError (retryable=True) - можно повторить запрос
- FatalError (fatal=True) - НЕ повторять без изменений со стороны вызывающего
"""

from enum import IntEnum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..message.messages import Request

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class CurlClientException(Exception):
    """Базовое исключение curl клиента."""

    retryable: bool = False
    fatal: bool = False

    def __init__(self, message: str, **kwargs):
        self.message = message
        super().__init__(message)

class TemporaryError(CurlClientException):
    """
    Временная ошибка - можно ретраить.

    Примеры: таймауты, сетевые ошибки.
    """
    retryable = True

class FatalError(CurlClientException):
    """
    Фатальная ошибка - НЕ ретраить.

    Примеры: невалидный запрос, неверная конфигурация.
    """
    fatal = True

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# КОНФИГУРАЦИЯ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ConfigurationError(FatalError):
    """Ошибка конфигурации."""
    pass

class DomainError(ConfigurationError, ValueError):
    """Пустое имя опции, пустое значение или пустой набор опций."""
    pass

class InvalidArgumentError(ConfigurationError, ValueError):
    """Неизвестная опция, неверный тип значения или значение вне допустимого набора."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОШИБКИ ЗАПРОСА
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RequestErrorType(IntEnum):
    """Типы ошибок запроса."""
    INVALID_REQUEST = 1001
    RUNTIME_ERROR = 1002

class RequestError(FatalError, ValueError):
    """
    Запрос нарушает контракт клиента.

    Поднимается до отправки: неизвестный метод, отсутствующие или
    противоречивые Content-Type / Content-Length, нечитаемое тело и т.д.

    Args:
        message: Сообщение об ошибке
        type: Тип ошибки (RequestErrorType)
        request: Запрос, вызвавший ошибку
    """

    _PREFIXES = {
        RequestErrorType.INVALID_REQUEST: "Invalid Request: ",
        RequestErrorType.RUNTIME_ERROR: "Runtime Error: ",
    }

    def __init__(
        self,
        message: str,
        type: RequestErrorType = RequestErrorType.INVALID_REQUEST,
        request: Optional['Request'] = None
    ):
        self.type = type
        self.code = int(type)
        self.request = request
        super().__init__(f"[{self.code}] {self._PREFIXES[type]}{message}")

    def set_request(self, request: 'Request') -> 'RequestError':
        """Привязать запрос к исключению (для chaining при raise)."""
        self.request = request
        return self

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# СЕТЕВЫЕ ОШИБКИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class NetworkErrorType(IntEnum):
    """Типы сетевых ошибок."""
    NETWORK_ERROR = 1001
    HOST_NOT_FOUND = 1002
    TIME_OUT = 1003

class NetworkError(TemporaryError):
    """
    Ошибка передачи, о которой сообщил curl.

    Args:
        message: Текст ошибки (от curl или фиксированный)
        type: Тип ошибки (NetworkErrorType)
        request: Исходный или восстановленный запрос
        curl_code: Код ошибки curl (CURLE_*)

    Examples:
        >>> exc = NetworkError("Could not resolve host: nowhere", NetworkErrorType.HOST_NOT_FOUND)
        >>> str(exc)
        '[1002] Host Not Found: Could not resolve host: nowhere'
        >>> exc.retryable
        False
    """

    _PREFIXES = {
        NetworkErrorType.NETWORK_ERROR: "Network Error: ",
        NetworkErrorType.HOST_NOT_FOUND: "Host Not Found: ",
        NetworkErrorType.TIME_OUT: "Time Out: ",
    }

    def __init__(
        self,
        message: str,
        type: NetworkErrorType = NetworkErrorType.NETWORK_ERROR,
        request: Optional['Request'] = None,
        curl_code: Optional[int] = None
    ):
        self.type = type
        self.code = int(type)
        self.request = request
        self.curl_code = curl_code
        super().__init__(f"[{self.code}] {self._PREFIXES[type]}{message}")

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        # Несуществующий хост не появится при повторе
        return self.type is not NetworkErrorType.HOST_NOT_FOUND

    @property
    def url(self) -> Optional[str]:
        """URL запроса, если запрос известен."""
        if self.request is None:
            return None
        return str(self.request.uri)

    def set_request(self, request: 'Request') -> 'NetworkError':
        """Привязать запрос к исключению."""
        self.request = request
        return self

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# СЖАТИЕ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class CompressorNotConfiguredError(CurlClientException, RuntimeError):
    """Сжатие/распаковка включены, но компрессор не задан."""
    fatal = True

    def __init__(self, message: str = "The client was not configured with an HTTP message compressor"):
        super().__init__(message)

class DecompressionBombError(FatalError):
    """
    Decompression bomb detected.

    Args:
        compressed_size: Размер сжатых данных
        decompressed_size: Размер распакованных данных (на момент остановки)
        max_size: Максимально допустимый размер
    """

    def __init__(
        self,
        compressed_size: int,
        decompressed_size: int,
        max_size: int
    ):
        self.compressed_size = compressed_size
        self.decompressed_size = decompressed_size
        self.max_size = max_size

        ratio = decompressed_size / compressed_size if compressed_size > 0 else 0

        msg = (
            f"Decompression bomb detected: "
            f"{compressed_size} -> {decompressed_size}+ bytes "
            f"(ratio: {ratio:.1f}x, max: {max_size} bytes)"
        )
        super().__init__(msg)
