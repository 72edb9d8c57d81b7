"""Фабрики потоков, запросов и ответов."""

import io
from pathlib import Path
from typing import Union

from .messages import Request, Response
from .stream import Stream
from .uri import Uri


class StreamFactory:
    """Создаёт Stream из байтов или из файла."""

    def create_stream(self, content: Union[bytes, str] = b"") -> Stream:
        """
        Поток в памяти с заданным содержимым (позиция - в начале).

        Example:
            >>> StreamFactory().create_stream(b"hello").size()
            5
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        return Stream(io.BytesIO(content))

    def create_stream_from_file(self, path: Union[str, Path], mode: str = "rb") -> Stream:
        """Поток поверх файла на диске."""
        if "b" not in mode:
            mode += "b"
        return Stream(open(path, mode))


class RequestFactory:
    """Создаёт Request по методу и URI."""

    def create_request(self, method: str, uri: Union[str, Uri]) -> Request:
        return Request(method, uri)


class ResponseFactory:
    """Создаёт Response по коду и reason phrase."""

    def create_response(self, code: int = 200, reason_phrase: str = "") -> Response:
        return Response(code, reason_phrase)
