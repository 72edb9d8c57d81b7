"""
Выполнение одной передачи через pycurl.

На каждый вызов execute() создаётся свой curl handle, который закрывается
в finally - состояние одной передачи не может протечь в следующую.
"""

import io
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping

import pycurl

CurlFactory = Callable[[], Any]


@dataclass(frozen=True)
class TransferResult:
    """
    Результат одной передачи.

    Attributes:
        raw: Байты ответа (блоки заголовков + тело)
        status_code: HTTP статус последнего ответа (RESPONSE_CODE)
        header_size: Длина блока заголовков в raw (HEADER_SIZE)
        request_header: Отправленные заголовки запроса (как их видел curl)
        error_code: Код ошибки curl (0 - без ошибки)
        error_message: Текст ошибки curl
        effective_url: URL последнего запроса (после редиректов)
        total_time: Время передачи, сек
    """
    raw: bytes = b""
    status_code: int = 0
    header_size: int = 0
    request_header: str = ""
    error_code: int = 0
    error_message: str = ""
    effective_url: str = ""
    total_time: float = 0.0

    @property
    def failed(self) -> bool:
        return self.error_code != 0


class TransferExecutor:
    """
    Применяет опции к новому curl handle и выполняет передачу.

    Вызов блокирует поток до завершения, таймаута или ошибки curl.

    Args:
        curl_factory: Фабрика curl handle (по умолчанию pycurl.Curl)

    Example:
        >>> executor = TransferExecutor()
        >>> result = executor.execute("https://example.com", {pycurl.HEADER: True})
        >>> result.status_code
        200
    """

    def __init__(self, curl_factory: CurlFactory = None):
        self._curl_factory = curl_factory or pycurl.Curl

    def execute(self, url: str, options: Mapping[int, Any]) -> TransferResult:
        """
        Выполнить передачу.

        Args:
            url: Полный URL
            options: Собранные опции curl {pycurl option: value}

        Returns:
            TransferResult (ошибки curl не бросаются, а возвращаются в error_code)
        """
        buffer = io.BytesIO()
        sent_headers: List[bytes] = []

        def on_debug(debug_type: int, message: bytes) -> None:
            if debug_type == pycurl.INFOTYPE_HEADER_OUT:
                sent_headers.append(message)

        curl = self._curl_factory()
        try:
            curl.setopt(pycurl.URL, url)
            for option, value in options.items():
                curl.setopt(option, value)
            curl.setopt(pycurl.WRITEDATA, buffer)
            curl.setopt(pycurl.VERBOSE, True)
            curl.setopt(pycurl.DEBUGFUNCTION, on_debug)

            error_code, error_message = 0, ""
            try:
                curl.perform()
            except pycurl.error as e:
                error_code = e.args[0]
                error_message = e.args[1] if len(e.args) > 1 else ""

            return TransferResult(
                raw=buffer.getvalue(),
                status_code=int(curl.getinfo(pycurl.RESPONSE_CODE) or 0),
                header_size=int(curl.getinfo(pycurl.HEADER_SIZE) or 0),
                request_header=b"".join(sent_headers).decode("iso-8859-1"),
                error_code=error_code,
                error_message=error_message,
                effective_url=curl.getinfo(pycurl.EFFECTIVE_URL) or url,
                total_time=float(curl.getinfo(pycurl.TOTAL_TIME) or 0.0),
            )
        finally:
            curl.close()
