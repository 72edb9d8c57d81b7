"""
HTTP сообщения: Request и Response.

Сообщения неизменяемые в стиле with_*: каждый with_* возвращает новый
объект, исходный не меняется. Тело (Stream) при этом разделяется между
копиями, как и в любом file-like API.
"""

import copy
import io
from typing import Dict, Iterable, List, Optional, Union

from requests.structures import CaseInsensitiveDict

from .stream import Stream
from .uri import Uri

HeaderValues = Union[str, Iterable[str]]


def _normalize_values(values: HeaderValues) -> List[str]:
    if isinstance(values, (str, bytes)):
        values = [values]
    normalized = []
    for value in values:
        if isinstance(value, bytes):
            value = value.decode("latin-1")
        normalized.append(str(value).strip())
    return normalized


class Message:
    """Общая часть запроса и ответа: версия протокола, заголовки, тело."""

    def __init__(
        self,
        headers: Optional[Dict[str, HeaderValues]] = None,
        body: Optional[Stream] = None,
        protocol_version: str = "1.1"
    ):
        self._headers: CaseInsensitiveDict = CaseInsensitiveDict()
        for name, values in (headers or {}).items():
            self._headers[name] = _normalize_values(values)
        self._body = body if body is not None else Stream(io.BytesIO())
        self._protocol_version = protocol_version

    def _clone(self):
        clone = copy.copy(self)
        clone._headers = CaseInsensitiveDict(
            (name, list(values)) for name, values in self._headers.items()
        )
        return clone

    # ==================== Версия протокола ====================

    @property
    def protocol_version(self) -> str:
        return self._protocol_version

    def with_protocol_version(self, version: str):
        clone = self._clone()
        clone._protocol_version = version
        return clone

    # ==================== Заголовки ====================

    @property
    def headers(self) -> Dict[str, List[str]]:
        """Копия заголовков: имя (в исходном регистре) -> список значений."""
        return {name: list(values) for name, values in self._headers.items()}

    def has_header(self, name: str) -> bool:
        return name in self._headers

    def header(self, name: str) -> List[str]:
        return list(self._headers.get(name, []))

    def header_line(self, name: str) -> str:
        return ",".join(self._headers.get(name, []))

    def with_header(self, name: str, values: HeaderValues):
        """Заменить значения заголовка."""
        clone = self._clone()
        # удалить старый ключ, чтобы сохранить регистр нового имени
        clone._headers.pop(name, None)
        clone._headers[name] = _normalize_values(values)
        return clone

    def with_added_header(self, name: str, values: HeaderValues):
        """Добавить значения к существующему заголовку."""
        clone = self._clone()
        existing = clone._headers.get(name, [])
        clone._headers[name] = existing + _normalize_values(values)
        return clone

    def without_header(self, name: str):
        clone = self._clone()
        clone._headers.pop(name, None)
        return clone

    # ==================== Тело ====================

    @property
    def body(self) -> Stream:
        return self._body

    def with_body(self, body: Stream):
        clone = self._clone()
        clone._body = body
        return clone


class Request(Message):
    """
    HTTP запрос.

    Args:
        method: HTTP метод (регистр сохраняется)
        uri: URI (строка или Uri)
        headers: Заголовки {имя: значение или список значений}
        body: Тело запроса
        protocol_version: Версия HTTP ("1.0", "1.1", "2")
        request_target: Явный request-target (по умолчанию path?query)

    Examples:
        >>> request = Request("GET", "https://api.example.com/items?page=1")
        >>> request.request_target
        '/items?page=1'
    """

    def __init__(
        self,
        method: str,
        uri: Union[str, Uri],
        headers: Optional[Dict[str, HeaderValues]] = None,
        body: Optional[Stream] = None,
        protocol_version: str = "1.1",
        request_target: Optional[str] = None
    ):
        super().__init__(headers=headers, body=body, protocol_version=protocol_version)
        self._method = method
        self._uri = uri if isinstance(uri, Uri) else Uri(uri)
        self._request_target = request_target

    @property
    def method(self) -> str:
        return self._method

    @property
    def uri(self) -> Uri:
        return self._uri

    @property
    def request_target(self) -> str:
        if self._request_target is not None:
            return self._request_target
        target = self._uri.path or "/"
        if self._uri.query:
            target += "?" + self._uri.query
        return target

    @property
    def explicit_request_target(self) -> Optional[str]:
        """Target, заданный через with_request_target (None - выводится из URI)."""
        return self._request_target

    def with_method(self, method: str) -> 'Request':
        clone = self._clone()
        clone._method = method
        return clone

    def with_uri(self, uri: Union[str, Uri]) -> 'Request':
        clone = self._clone()
        clone._uri = uri if isinstance(uri, Uri) else Uri(uri)
        return clone

    def with_request_target(self, request_target: str) -> 'Request':
        clone = self._clone()
        clone._request_target = request_target
        return clone

    def __repr__(self) -> str:
        return f"<Request [{self._method} {self._uri}]>"


class Response(Message):
    """
    HTTP ответ.

    Args:
        status_code: HTTP статус
        reason_phrase: Reason phrase из status-line
    """

    def __init__(
        self,
        status_code: int = 200,
        reason_phrase: str = "",
        headers: Optional[Dict[str, HeaderValues]] = None,
        body: Optional[Stream] = None,
        protocol_version: str = "1.1"
    ):
        super().__init__(headers=headers, body=body, protocol_version=protocol_version)
        self._status_code = status_code
        self._reason_phrase = reason_phrase

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def reason_phrase(self) -> str:
        return self._reason_phrase

    def with_status(self, status_code: int, reason_phrase: str = "") -> 'Response':
        clone = self._clone()
        clone._status_code = status_code
        clone._reason_phrase = reason_phrase
        return clone

    def __repr__(self) -> str:
        return f"<Response [{self._status_code}]>"
