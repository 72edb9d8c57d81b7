"""
Tests for classifying curl errors.
"""

import pycurl
import pytest

from curl_client.core.error_handler import ErrorHandler, reconstruct_request
from curl_client.core.exceptions import NetworkError, NetworkErrorType
from curl_client.core.transfer import TransferResult
from curl_client.message import Request, RequestFactory, StreamFactory

SENT_HEADERS = (
    "POST /items HTTP/1.1\r\n"
    "Host: api.example.com\r\n"
    "Content-Type: application/json\r\n"
    "Content-Length: 2\r\n\r\n"
)


def failed(code, message="curl says no", request_header=SENT_HEADERS):
    return TransferResult(error_code=code, error_message=message, request_header=request_header)


@pytest.fixture
def request_():
    return Request(
        "POST", "https://api.example.com/items",
        headers={"Content-Type": "application/json", "Content-Length": "2", "X-Original": "yes"},
        body=StreamFactory().create_stream(b"{}"),
    )


class TestClassify:
    """Tests for ErrorHandler.classify."""

    def test_host_not_found(self, request_):
        """Unresolvable host -> HOST_NOT_FOUND, original request kept."""
        error = ErrorHandler().classify(
            failed(pycurl.E_COULDNT_RESOLVE_HOST, "Could not resolve host: nowhere"), request_
        )

        assert isinstance(error, NetworkError)
        assert error.type is NetworkErrorType.HOST_NOT_FOUND
        assert str(error) == "[1002] Host Not Found: Could not resolve host: nowhere"
        assert error.request is request_
        assert error.curl_code == pycurl.E_COULDNT_RESOLVE_HOST
        assert error.retryable is False

    def test_timeout_rebuilds_request(self, request_):
        """Timeout -> TIME_OUT with the request rebuilt from sent headers."""
        error = ErrorHandler().classify(
            failed(pycurl.E_OPERATION_TIMEDOUT, "Operation timed out after 1000 ms"), request_
        )

        assert error.type is NetworkErrorType.TIME_OUT
        assert str(error) == "[1003] Time Out: Operation timed out after 1000 ms"
        assert error.request is not request_
        assert error.request.method == "POST"
        assert error.request.uri == "https://api.example.com/items"
        assert error.request.header_line("Host") == "api.example.com"
        assert not error.request.has_header("X-Original")
        assert error.request.body is request_.body
        assert error.retryable is True

    @pytest.mark.parametrize("code,message", [
        (pycurl.E_UNSUPPORTED_PROTOCOL, "Unsupported protocol"),
        (pycurl.E_URL_MALFORMAT, "The URL was not properly formatted."),
    ])
    def test_fixed_messages(self, request_, code, message):
        """Protocol and URL errors use fixed text and keep the request."""
        error = ErrorHandler().classify(failed(code, "raw curl text"), request_)

        assert error.type is NetworkErrorType.NETWORK_ERROR
        assert str(error) == f"[1001] Network Error: {message}"
        assert error.request is request_

    @pytest.mark.parametrize("code", [pycurl.E_COULDNT_CONNECT, pycurl.E_COULDNT_RESOLVE_PROXY])
    def test_connect_errors_keep_request(self, request_, code):
        """Connection failures keep the original request and curl text."""
        error = ErrorHandler().classify(failed(code, "Failed to connect"), request_)

        assert error.type is NetworkErrorType.NETWORK_ERROR
        assert str(error) == "[1001] Network Error: Failed to connect"
        assert error.request is request_

    def test_other_errors_rebuild_request(self, request_):
        """Any other curl error -> NETWORK_ERROR with rebuilt request."""
        error = ErrorHandler().classify(failed(pycurl.E_SSL_CONNECT_ERROR, "SSL handshake failed"), request_)

        assert error.type is NetworkErrorType.NETWORK_ERROR
        assert error.request is not request_
        assert error.request.header_line("Content-Type") == "application/json"

    def test_custom_request_factory_used(self, request_):
        """Rebuilding goes through the injected request factory."""
        class TaggingFactory(RequestFactory):
            def create_request(self, method, uri):
                return super().create_request(method, uri).with_header("X-Rebuilt", "1")

        error = ErrorHandler(TaggingFactory()).classify(failed(pycurl.E_RECV_ERROR), request_)

        assert error.request.header_line("X-Rebuilt") == "1"


class TestHandleTransferError:
    """Tests for ErrorHandler.handle_transfer_error."""

    def test_raises_on_failure(self, request_):
        """Failed transfer raises NetworkError."""
        with pytest.raises(NetworkError):
            ErrorHandler().handle_transfer_error(failed(pycurl.E_COULDNT_CONNECT), request_)

    def test_silent_on_success(self, request_):
        """Successful transfer does nothing."""
        ErrorHandler().handle_transfer_error(TransferResult(status_code=200), request_)


class TestReconstructRequest:
    """Tests for reconstruct_request."""

    def test_empty_sent_headers(self):
        """No sent headers -> bare request from the factory."""
        request = reconstruct_request(
            TransferResult(error_code=pycurl.E_RECV_ERROR), "GET", Request("GET", "https://a.example/").uri,
            RequestFactory(),
        )

        assert request.method == "GET"
        assert request.headers == {}
