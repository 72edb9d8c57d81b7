"""
Сжатие тела HTTP сообщений.

Compressor - интерфейс, который использует клиент; GzipCompressor -
реализация по умолчанию на gzip из стандартной библиотеки.
"""

import gzip
import io
import zlib
from abc import ABC, abstractmethod

from ..core.exceptions import DecompressionBombError
from .messages import Request, Response
from .stream import Stream


class Compressor(ABC):
    """Сжимает тело запроса и распаковывает тело ответа."""

    @abstractmethod
    def compress(self, request: Request) -> Request:
        """Вернуть новый запрос со сжатым телом и согласованными заголовками."""

    @abstractmethod
    def decompress(self, response: Response) -> Response:
        """Вернуть новый ответ с распакованным телом."""


class GzipCompressor(Compressor):
    """
    Gzip компрессор.

    После compress() у запроса есть Content-Encoding: gzip и новый
    Content-Length; decompress() убирает Content-Encoding и пересчитывает
    Content-Length.

    Args:
        level: Уровень сжатия (1-9)
        max_decompressed_size: Лимит распакованных данных (защита от decompression bomb)

    Examples:
        >>> compressor = GzipCompressor()
        >>> compressed = compressor.compress(request)
        >>> compressed.header_line("Content-Encoding")
        'gzip'
    """

    CHUNK_SIZE = 8192

    def __init__(self, level: int = 9, max_decompressed_size: int = 500 * 1024 * 1024):
        if not 1 <= level <= 9:
            raise ValueError("level must be between 1 and 9")
        if max_decompressed_size <= 0:
            raise ValueError("max_decompressed_size must be positive")
        self.level = level
        self.max_decompressed_size = max_decompressed_size

    def compress(self, request: Request) -> Request:
        compressed = gzip.compress(bytes(request.body), compresslevel=self.level)
        return (
            request
            .with_body(Stream(io.BytesIO(compressed)))
            .with_header("Content-Encoding", "gzip")
            .with_header("Content-Length", str(len(compressed)))
        )

    def decompress(self, response: Response) -> Response:
        data = self._gunzip(bytes(response.body))
        response = (
            response
            .with_body(Stream(io.BytesIO(data)))
            .without_header("Content-Encoding")
        )
        if response.has_header("Content-Length"):
            response = response.with_header("Content-Length", str(len(data)))
        return response

    def _gunzip(self, data: bytes) -> bytes:
        # Читаем кусками, чтобы остановиться до исчерпания памяти
        output = io.BytesIO()
        try:
            with gzip.GzipFile(fileobj=io.BytesIO(data)) as gz:
                while True:
                    chunk = gz.read(self.CHUNK_SIZE)
                    if not chunk:
                        break
                    output.write(chunk)
                    if output.tell() > self.max_decompressed_size:
                        raise DecompressionBombError(
                            compressed_size=len(data),
                            decompressed_size=output.tell(),
                            max_size=self.max_decompressed_size
                        )
        except (OSError, EOFError, zlib.error) as e:
            raise ValueError(f"Invalid gzip data: {e}") from e
        return output.getvalue()
