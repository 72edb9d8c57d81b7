"""
Потоки тела HTTP сообщений.

Stream оборачивает бинарный file-like объект и даёт клиенту то, что ему
нужно знать о теле: размер, доступность на чтение/запись и идентификатор
хранилища (metadata "uri"), по которому PUT решает, можно ли отдать
дескриптор curl напрямую.
"""

import io
import os
from typing import Any, BinaryIO, Dict, Optional

# URI, которым помечаются потоки без файла на диске
MEMORY_STREAM_URI = "memory://temp"


class Stream:
    """
    Тело HTTP сообщения.

    Args:
        resource: Бинарный file-like объект (BytesIO, открытый файл, TemporaryFile)
        size: Известный размер (если None - вычисляется по ресурсу)

    Examples:
        >>> stream = Stream(io.BytesIO(b"payload"))
        >>> stream.size()
        7
        >>> stream.metadata("uri")
        'memory://temp'
        >>> bytes(stream)
        b'payload'
    """

    def __init__(self, resource: BinaryIO, size: Optional[int] = None):
        self._resource: Optional[BinaryIO] = resource
        self._size = size

    # ==================== Метаданные ====================

    def size(self) -> Optional[int]:
        """Размер потока в байтах или None, если определить нельзя."""
        if self._resource is None:
            return None
        if self._size is not None:
            return self._size
        if isinstance(self._resource, io.BytesIO):
            return self._resource.getbuffer().nbytes
        try:
            return os.fstat(self._resource.fileno()).st_size
        except (AttributeError, OSError, io.UnsupportedOperation):
            return None

    def is_readable(self) -> bool:
        if self._resource is None:
            return False
        readable = getattr(self._resource, "readable", None)
        return bool(readable()) if readable else hasattr(self._resource, "read")

    def is_writable(self) -> bool:
        if self._resource is None:
            return False
        writable = getattr(self._resource, "writable", None)
        return bool(writable()) if writable else hasattr(self._resource, "write")

    def is_seekable(self) -> bool:
        if self._resource is None:
            return False
        seekable = getattr(self._resource, "seekable", None)
        return bool(seekable()) if seekable else False

    def metadata(self, key: Optional[str] = None) -> Any:
        """
        Метаданные потока.

        Ключи: "uri" (путь к файлу или MEMORY_STREAM_URI), "mode", "seekable".

        Args:
            key: Вернуть только одно значение (None если ключа нет)

        Returns:
            Словарь метаданных или одно значение
        """
        if self._resource is None:
            return {} if key is None else None

        data: Dict[str, Any] = {
            "uri": self._resource_uri(),
            "mode": getattr(self._resource, "mode", "rb+"),
            "seekable": self.is_seekable(),
        }
        if key is None:
            return data
        return data.get(key)

    def _resource_uri(self) -> str:
        name = getattr(self._resource, "name", None)
        if isinstance(name, (str, os.PathLike)) and os.path.exists(name):
            return os.fspath(name)
        if isinstance(name, int):
            # TemporaryFile: настоящий файл без имени
            return f"/dev/fd/{name}"
        return MEMORY_STREAM_URI

    # ==================== Чтение / запись ====================

    def read(self, length: int = -1) -> bytes:
        return self._require_resource().read(length)

    def write(self, data: bytes) -> int:
        written = self._require_resource().write(data)
        self._size = None
        return written

    def rewind(self) -> None:
        self._require_resource().seek(0)

    def tell(self) -> int:
        return self._require_resource().tell()

    def __bytes__(self) -> bytes:
        """Всё содержимое потока, с начала."""
        if self._resource is None:
            return b""
        if self.is_seekable():
            self._resource.seek(0)
        return self._resource.read()

    # ==================== Жизненный цикл ====================

    def detach(self) -> Optional[BinaryIO]:
        """Отсоединить и вернуть ресурс; поток становится непригодным."""
        resource, self._resource = self._resource, None
        self._size = None
        return resource

    def close(self) -> None:
        resource = self.detach()
        if resource is not None:
            resource.close()

    def _require_resource(self) -> BinaryIO:
        if self._resource is None:
            raise ValueError("Stream is detached")
        return self._resource

    def __repr__(self) -> str:
        return f"Stream(uri={self.metadata('uri')!r}, size={self.size()!r})"
