"""URI value object."""

from typing import Optional
from urllib.parse import urlsplit


class Uri:
    """
    Разобранный URI запроса.

    Хранит исходную строку без нормализации - curl получает именно её.

    Examples:
        >>> uri = Uri("https://api.example.com:8443/items?page=2")
        >>> uri.scheme, uri.host, uri.port
        ('https', 'api.example.com', 8443)
        >>> str(uri)
        'https://api.example.com:8443/items?page=2'
    """

    def __init__(self, uri: str):
        if not isinstance(uri, str):
            raise TypeError(f"URI must be a string, got {type(uri).__name__}")
        self._uri = uri
        if uri and "://" not in uri and not uri.startswith("/"):
            # "host:port/path" без схемы (её подставит default_protocol)
            self._parts = urlsplit("//" + uri)
        else:
            self._parts = urlsplit(uri)

    @property
    def scheme(self) -> str:
        return self._parts.scheme.lower()

    @property
    def host(self) -> str:
        return self._parts.hostname or ""

    @property
    def port(self) -> Optional[int]:
        return self._parts.port

    @property
    def path(self) -> str:
        return self._parts.path

    @property
    def query(self) -> str:
        return self._parts.query

    @property
    def fragment(self) -> str:
        return self._parts.fragment

    def __str__(self) -> str:
        return self._uri

    def __repr__(self) -> str:
        return f"Uri({self._uri!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Uri):
            return self._uri == other._uri
        if isinstance(other, str):
            return self._uri == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._uri)
