# src/curl_client/core/error_handler.py

from typing import Optional

import pycurl

from ..message.factories import RequestFactory
from ..message.messages import Request
from ..message.uri import Uri
from .exceptions import NetworkError, NetworkErrorType
from .parsing import apply_headers, parse_header_block
from .transfer import TransferResult

# Код curl -> фиксированное сообщение вместо текста curl
FIXED_MESSAGES = {
    pycurl.E_UNSUPPORTED_PROTOCOL: "Unsupported protocol",
    pycurl.E_URL_MALFORMAT: "The URL was not properly formatted.",
}

# Ошибки, для которых исходный запрос сохраняется как есть
_KEEP_REQUEST = {
    pycurl.E_COULDNT_RESOLVE_HOST,
    pycurl.E_UNSUPPORTED_PROTOCOL,
    pycurl.E_URL_MALFORMAT,
    pycurl.E_COULDNT_CONNECT,
    pycurl.E_COULDNT_RESOLVE_PROXY,
}


def reconstruct_request(
    result: TransferResult,
    method: str,
    uri: Uri,
    request_factory: RequestFactory
) -> Request:
    """
    Восстановить отправленный запрос по заголовкам, которые видел curl.

    Тело исходного запроса к этому моменту может быть уже прочитано,
    поэтому запрос собирается заново: метод + URI + отправленные заголовки.
    """
    request = request_factory.create_request(method, uri)
    return apply_headers(request, parse_header_block(result.request_header))


class ErrorHandler:
    """Класс для преобразования ошибок curl в NetworkError"""

    def __init__(self, request_factory: Optional[RequestFactory] = None):
        self._request_factory = request_factory or RequestFactory()

    def classify(self, result: TransferResult, request: Request) -> NetworkError:
        """
        Построить NetworkError по коду ошибки curl.

        - не удалось разрешить хост -> HOST_NOT_FOUND
        - таймаут -> TIME_OUT, запрос восстанавливается
        - неподдерживаемый протокол / битый URL -> NETWORK_ERROR с фиксированным текстом
        - не удалось подключиться / разрешить прокси -> NETWORK_ERROR
        - прочее -> NETWORK_ERROR, запрос восстанавливается

        Args:
            result: Результат передачи с error_code != 0
            request: Запрос, который отправлялся

        Returns:
            NetworkError (не бросается)
        """
        code = result.error_code
        message = FIXED_MESSAGES.get(code, result.error_message)

        if code == pycurl.E_COULDNT_RESOLVE_HOST:
            error_type = NetworkErrorType.HOST_NOT_FOUND
        elif code == pycurl.E_OPERATION_TIMEDOUT:
            error_type = NetworkErrorType.TIME_OUT
        else:
            error_type = NetworkErrorType.NETWORK_ERROR

        if code not in _KEEP_REQUEST:
            request = reconstruct_request(
                result, request.method, request.uri, self._request_factory
            ).with_body(request.body)

        return NetworkError(message, error_type, request, curl_code=code)

    def handle_transfer_error(self, result: TransferResult, request: Request) -> None:
        """Бросить NetworkError, если передача завершилась ошибкой curl."""
        if result.failed:
            raise self.classify(result, request)
