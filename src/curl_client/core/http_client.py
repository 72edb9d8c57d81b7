# src/curl_client/core/http_client.py
from typing import Any, Dict, Mapping, Optional, Union
import time
import uuid

from ..message.compression import Compressor
from ..message.factories import RequestFactory, ResponseFactory, StreamFactory
from ..message.messages import HeaderValues, Request, Response
from ..message.stream import Stream
from ..message.uri import Uri
from . import config as cfg
from .config import ClientConfiguration
from .error_handler import ErrorHandler
from .exceptions import CompressorNotConfiguredError, NetworkError, RequestError
from .logging import CurlClientLogger, LoggingConfig
from .logging.filters import clear_correlation_id, set_correlation_id
from .options import apply_defaults, translate_configuration
from .parsing import apply_headers, get_reason_phrase, parse_header_block, split_headers_and_body
from .shaping import RequestShaper
from .transfer import CurlFactory, TransferExecutor, TransferResult


class CurlClient:
    """
    HTTP клиент поверх libcurl (pycurl).

    Принимает абстрактный Request, выполняет его через curl и возвращает
    Response. Ошибки curl превращаются в NetworkError, нарушения контракта
    запроса - в RequestError. Повторов внутри клиента нет.

    Клиент НЕ потокобезопасен: конфигурация - общее изменяемое состояние.
    При использовании одного экземпляра из нескольких потоков нужна
    внешняя синхронизация. Сам curl handle создаётся заново на каждый
    send_request и закрывается по его завершении.

    Configuration:
        enable_compression: (bool) Сжимать тело POST/PUT (gzip), если нет Content-Encoding
        enable_decompression: (bool) Распаковывать ответы с Content-Encoding: gzip
        timeout: (int) Максимальное время запроса, сек
        connect_timeout: (int) Максимальное время подключения, сек
        max_redirects: (int) Максимум редиректов
        http_auth: (str) basic, digest, ntlm, gssnegotiate, any
        default_protocol: (str) http или https для URI без схемы

    Example:
        >>> with CurlClient(compressor=GzipCompressor(), configuration={"timeout": 10}) as client:
        ...     response = client.request("GET", "https://example.com")
        ...     print(response.status_code, response.reason_phrase)
    """

    def __init__(
        self,
        stream_factory: Optional[StreamFactory] = None,
        request_factory: Optional[RequestFactory] = None,
        response_factory: Optional[ResponseFactory] = None,
        compressor: Optional[Compressor] = None,
        configuration: Optional[Mapping[str, Any]] = None,
        logging_config: Optional[LoggingConfig] = None,
        curl_factory: Optional[CurlFactory] = None
    ):
        """
        Initialize curl client.

        Args:
            stream_factory: Фабрика потоков тела ответа
            request_factory: Фабрика запросов (для восстановления запроса в ошибках)
            response_factory: Фабрика ответов
            compressor: Компрессор для enable_compression / enable_decompression
            configuration: Опции клиента {имя: значение}
            logging_config: Конфигурация логирования (None = без логирования)
            curl_factory: Фабрика curl handle (по умолчанию pycurl.Curl)

        Raises:
            DomainError, InvalidArgumentError: Невалидная конфигурация
        """
        self._stream_factory = stream_factory or StreamFactory()
        self._request_factory = request_factory or RequestFactory()
        self._response_factory = response_factory or ResponseFactory()
        self._configuration = ClientConfiguration()
        self._shaper = RequestShaper(compressor)
        self._executor = TransferExecutor(curl_factory)
        self._error_handler = ErrorHandler(self._request_factory)

        if configuration:
            self.set_configuration(configuration)

        self._logger: Optional[CurlClientLogger] = None
        if logging_config:
            self._logger = CurlClientLogger(config=logging_config, name="curl_client")

    def __enter__(self):
        """Поддержка контекстного менеджера"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Закрытие логгера при выходе из контекста"""
        self.close()
        return False

    def close(self) -> None:
        """Освобождает ресурсы клиента (обработчики логгера). Идемпотентно."""
        if self._logger is not None:
            self._logger.close()

    # ==================== Конфигурация ====================

    @property
    def configuration(self) -> ClientConfiguration:
        return self._configuration

    @property
    def compressor(self) -> Optional[Compressor]:
        return self._shaper.compressor

    def set_option(self, name: str, value: Any) -> 'CurlClient':
        """
        Устанавливает опцию клиента.

        Raises:
            DomainError: Пустое имя или значение
            InvalidArgumentError: Неизвестная опция, неверный тип или значение
        """
        self._configuration.set(name, value)
        return self

    def set_configuration(self, options: Mapping[str, Any]) -> 'CurlClient':
        """
        Устанавливает несколько опций клиента.

        Raises:
            DomainError: Пустой набор опций
        """
        self._configuration.set_all(options)
        return self

    def set_compressor(self, compressor: Compressor) -> 'CurlClient':
        """Задаёт компрессор HTTP сообщений."""
        self._shaper.compressor = compressor
        return self

    # ==================== Запросы ====================

    def send_request(self, request: Request) -> Response:
        """
        Отправляет запрос и возвращает ответ.

        Args:
            request: Запрос

        Returns:
            Response (тело не прикрепляется для HEAD)

        Raises:
            RequestError: Запрос невалиден (до какой-либо передачи)
            NetworkError: Ошибка передачи curl
            CompressorNotConfiguredError: Сжатие/распаковка требуют компрессор
        """
        settings = self._configuration.snapshot()
        correlation_id = str(uuid.uuid4())
        if self._logger:
            set_correlation_id(correlation_id)

        start_time = time.time()
        method = request.method.upper()
        url = str(request.uri)

        try:
            try:
                shaped = self._shaper.shape(
                    request, settings, translate_configuration(settings)
                )
            except (RequestError, CompressorNotConfiguredError) as e:
                self._log_failure("Request rejected", method, url, e, start_time)
                raise

            request = shaped.request
            apply_defaults(shaped.options)

            if self._logger:
                self._logger.debug(
                    "Request started",
                    method=method,
                    url=url,
                    headers=request.headers,
                    content_encoding=request.header_line("Content-Encoding") or None,
                )

            try:
                result = self._executor.execute(url, shaped.options)
            finally:
                shaped.release()

            try:
                self._error_handler.handle_transfer_error(result, request)
            except NetworkError as e:
                self._log_failure("Request failed", method, url, e, start_time)
                raise

            response = self._build_response(result, shaped.include_body, settings)

            if self._logger:
                self._logger.info(
                    "Request completed",
                    method=method,
                    url=url,
                    effective_url=result.effective_url,
                    status_code=response.status_code,
                    duration_ms=round((time.time() - start_time) * 1000, 2),
                    response_size=len(result.raw) - result.header_size,
                )
            return response
        finally:
            if self._logger:
                clear_correlation_id()

    def request(
        self,
        method: str,
        uri: Union[str, Uri],
        headers: Optional[Dict[str, HeaderValues]] = None,
        body: Union[bytes, str, Stream, None] = None,
        protocol_version: str = "1.1"
    ) -> Response:
        """
        Собирает Request через фабрики и отправляет его.

        Если передано тело и нет Content-Length - он вычисляется по размеру тела.

        Args:
            method: HTTP метод
            uri: URI
            headers: Заголовки
            body: Тело (bytes, str или Stream)
            protocol_version: Версия HTTP

        Returns:
            Response
        """
        request = self._request_factory.create_request(method, uri)
        request = request.with_protocol_version(protocol_version)
        for name, values in (headers or {}).items():
            request = request.with_header(name, values)

        if body is not None:
            stream = body if isinstance(body, Stream) else self._stream_factory.create_stream(body)
            request = request.with_body(stream)
            size = stream.size()
            if size is not None and not request.has_header("Content-Length"):
                request = request.with_header("Content-Length", str(size))

        return self.send_request(request)

    # ==================== Внутреннее ====================

    def _build_response(
        self,
        result: TransferResult,
        include_body: bool,
        settings: Mapping[str, Any]
    ) -> Response:
        """Собирает Response из сырого результата передачи."""
        header_text, body = split_headers_and_body(result.raw, result.header_size)
        reason_phrase = get_reason_phrase(header_text, result.status_code)

        response = self._response_factory.create_response(result.status_code, reason_phrase)
        response = apply_headers(response, parse_header_block(header_text))

        if not include_body:
            return response

        response = response.with_body(self._stream_factory.create_stream(body))
        if settings.get(cfg.ENABLE_DECOMPRESSION) and response.header_line("Content-Encoding") == "gzip":
            if self.compressor is None:
                raise CompressorNotConfiguredError()
            response = self.compressor.decompress(response)

        return response

    def _log_failure(self, message: str, method: str, url: str, error: Exception, start_time: float) -> None:
        if not self._logger:
            return
        fields: Dict[str, Any] = {
            "method": method,
            "url": url,
            "error": str(error),
            "error_type": type(error).__name__,
            "duration_ms": round((time.time() - start_time) * 1000, 2),
        }
        if isinstance(error, NetworkError):
            fields["curl_code"] = error.curl_code
            fields["retryable"] = error.retryable
        self._logger.error(message, **fields)
