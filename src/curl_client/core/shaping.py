"""
Подготовка передачи под HTTP метод.

Каждый метод получает свою процедуру (HEAD, POST, PUT, остальные);
процедуры не перетекают одна в другую. POST и PUT одинаково проверяют
тело и сжимают его; PUT дополнительно настраивает потоковую загрузку.
"""

import re
import tempfile
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Callable, Dict, Mapping, Optional, TYPE_CHECKING

import pycurl

from ..message.messages import Request
from . import config as cfg
from .exceptions import CompressorNotConfiguredError, RequestError, RequestErrorType
from .options import resolve_http_version
from .parsing import to_header_field_list

if TYPE_CHECKING:
    from ..message.compression import Compressor

METHODS = ("GET", "HEAD", "POST", "PUT", "DELETE", "TRACE", "CONNECT", "OPTIONS")

# metadata("uri") вида "scheme://..." - поток без файла на диске
_VIRTUAL_STREAM_URI = re.compile(r"^\w+://")


@dataclass
class ShapedRequest:
    """
    Результат подготовки.

    Attributes:
        request: Запрос, который нужно использовать дальше (мог быть заменён сжатием)
        options: Опции curl для передачи
        include_body: Прикреплять ли тело к ответу (False для HEAD)
        upload_file: Файл для потоковой загрузки (закрывается после передачи)
    """
    request: Request
    options: Dict[int, Any] = field(default_factory=dict)
    include_body: bool = True
    upload_file: Optional[BinaryIO] = None

    def release(self) -> None:
        """Закрыть файл загрузки, если он был открыт."""
        if self.upload_file is not None:
            self.upload_file.close()
            self.upload_file = None


def validate_request(request: Request) -> None:
    """
    Проверить тело POST/PUT запроса перед отправкой.

    Raises:
        RequestError: Нет Content-Type / Content-Length, размер тела не
            определён или не совпадает с Content-Length, тело нечитаемо
    """
    body = request.body
    if not request.has_header("Content-Type"):
        raise RequestError("The 'Content-Type' header is missing", request=request)
    if not request.has_header("Content-Length"):
        raise RequestError("The 'Content-Length' header is missing", request=request)

    size = body.size()
    if not size:
        raise RequestError("The request body size is undetermined", request=request)

    try:
        content_length = int(request.header_line("Content-Length"))
    except ValueError:
        content_length = None
    if size != content_length:
        raise RequestError(
            "The size of the stream does not match the 'Content-Length' header value",
            request=request
        )

    if not body.is_readable():
        raise RequestError(
            "The request body is not readable", RequestErrorType.RUNTIME_ERROR, request
        )


class RequestShaper:
    """
    Формирует опции curl под метод запроса.

    Args:
        compressor: Компрессор для enable_compression (может быть None)

    Example:
        >>> shaper = RequestShaper(GzipCompressor())
        >>> shaped = shaper.shape(request, {"enable_compression": True})
        >>> shaped.request.header_line("Content-Encoding")
        'gzip'
    """

    def __init__(self, compressor: Optional['Compressor'] = None):
        self.compressor = compressor
        self._procedures: Mapping[str, Callable[[ShapedRequest, Mapping[str, Any]], None]] = {
            "HEAD": self._shape_head,
            "POST": self._shape_post,
            "PUT": self._shape_put,
        }

    def shape(
        self,
        request: Request,
        settings: Mapping[str, Any],
        options: Optional[Dict[int, Any]] = None
    ) -> ShapedRequest:
        """
        Подготовить передачу.

        Args:
            request: Исходный запрос
            settings: Снимок конфигурации клиента
            options: Опции, полученные из конфигурации (дополняются)

        Returns:
            ShapedRequest

        Raises:
            RequestError: Неизвестный метод или невалидное тело
            CompressorNotConfiguredError: Сжатие включено, но компрессора нет
        """
        method = request.method.upper()
        if method not in METHODS:
            raise RequestError("Invalid request method", request=request)

        shaped = ShapedRequest(request=request, options=dict(options or {}))
        shaped.options[pycurl.CUSTOMREQUEST] = method
        if request.explicit_request_target is not None:
            # curl повторяет REQUEST_TARGET на каждом редиректе
            shaped.options[pycurl.REQUEST_TARGET] = request.explicit_request_target
        shaped.options[pycurl.HTTP_VERSION] = resolve_http_version(
            request.protocol_version, request.uri.scheme
        )

        procedure = self._procedures.get(method)
        if procedure is not None:
            procedure(shaped, settings)

        header_fields = to_header_field_list(shaped.request.headers)
        if header_fields:
            shaped.options[pycurl.HTTPHEADER] = header_fields
        return shaped

    # ==================== Процедуры методов ====================

    def _shape_head(self, shaped: ShapedRequest, settings: Mapping[str, Any]) -> None:
        shaped.options[pycurl.NOBODY] = True
        shaped.include_body = False

    def _shape_post(self, shaped: ShapedRequest, settings: Mapping[str, Any]) -> None:
        self._prepare_body(shaped, settings)
        shaped.options[pycurl.POSTFIELDS] = bytes(shaped.request.body)

    def _shape_put(self, shaped: ShapedRequest, settings: Mapping[str, Any]) -> None:
        self._prepare_body(shaped, settings)
        request = shaped.request
        body = request.body
        size = body.size()

        if _VIRTUAL_STREAM_URI.match(body.metadata("uri") or ""):
            # Поток в памяти: curl нужен настоящий файл
            upload_file = tempfile.TemporaryFile()
            upload_file.write(bytes(body))
            upload_file.seek(0)
        else:
            upload_file = body.detach()
            if upload_file is None:
                raise RequestError(
                    "Request body is missing", RequestErrorType.RUNTIME_ERROR, request
                )

        shaped.upload_file = upload_file
        shaped.options[pycurl.UPLOAD] = True
        shaped.options[pycurl.READDATA] = upload_file
        shaped.options[pycurl.INFILESIZE] = size

    # ==================== Общее для POST/PUT ====================

    def _prepare_body(self, shaped: ShapedRequest, settings: Mapping[str, Any]) -> None:
        request = shaped.request
        validate_request(request)

        if settings.get(cfg.ENABLE_COMPRESSION) and not request.has_header("Content-Encoding"):
            if not request.body.is_writable():
                raise RequestError(
                    "Request body is not writable", RequestErrorType.RUNTIME_ERROR, request
                )
            if self.compressor is None:
                raise CompressorNotConfiguredError()
            shaped.request = self.compressor.compress(request)
