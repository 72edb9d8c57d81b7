"""
Pytest configuration and fixtures for curl-client-core tests.

The curl engine is replaced by FakeCurl, injected through curl_factory.
"""

from typing import Dict, List, Optional

import pycurl
import pytest

from curl_client.core.http_client import CurlClient
from curl_client.core.logging.config import LoggingConfig
from curl_client.core.logging.filters import clear_correlation_id
from curl_client.message import GzipCompressor, Request, StreamFactory


def http_response(
    status_code: int = 200,
    reason_phrase: str = "OK",
    headers: Optional[Dict[str, str]] = None,
    body: bytes = b"",
    protocol: str = "HTTP/1.1"
) -> bytes:
    """Raw response as curl writes it with HEADER=True."""
    lines = [f"{protocol} {status_code} {reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in (headers or {}).items())
    return ("\r\n".join(lines) + "\r\n\r\n").encode("iso-8859-1") + body


class FakeCurl:
    """
    Stand-in for pycurl.Curl.

    Records options, writes the prepared raw response into WRITEDATA,
    reports sent headers through DEBUGFUNCTION and optionally fails
    perform() with pycurl.error.
    """

    def __init__(
        self,
        raw: bytes = b"",
        status_code: int = 200,
        header_size: Optional[int] = None,
        sent_headers: bytes = b"",
        error: Optional[tuple] = None,
        effective_url: Optional[str] = None,
        total_time: float = 0.01
    ):
        self.raw = raw
        self.status_code = status_code
        if header_size is None:
            end = raw.find(b"\r\n\r\n")
            header_size = end + 4 if end >= 0 else len(raw)
        self.header_size = header_size
        self.sent_headers = sent_headers
        self.error = error
        self.effective_url = effective_url
        self.total_time = total_time

        self.options: Dict[int, object] = {}
        self.performed = False
        self.closed = False

    def setopt(self, option: int, value: object) -> None:
        self.options[option] = value

    def perform(self) -> None:
        self.performed = True
        debug = self.options.get(pycurl.DEBUGFUNCTION)
        if debug and self.sent_headers:
            debug(pycurl.INFOTYPE_HEADER_OUT, self.sent_headers)
        if self.error:
            raise pycurl.error(*self.error)
        self.options[pycurl.WRITEDATA].write(self.raw)

    def getinfo(self, info: int) -> object:
        if self.error:
            values = {pycurl.RESPONSE_CODE: 0, pycurl.HEADER_SIZE: 0}
        else:
            values = {pycurl.RESPONSE_CODE: self.status_code, pycurl.HEADER_SIZE: self.header_size}
        values[pycurl.EFFECTIVE_URL] = self.effective_url or self.options.get(pycurl.URL)
        values[pycurl.TOTAL_TIME] = self.total_time
        return values[info]

    def close(self) -> None:
        self.closed = True


class FakeCurlFactory:
    """curl_factory that hands out FakeCurl handles and keeps them for inspection."""

    def __init__(self, **response):
        self.response = response
        self.handles: List[FakeCurl] = []

    def __call__(self) -> FakeCurl:
        handle = FakeCurl(**self.response)
        self.handles.append(handle)
        return handle

    @property
    def last(self) -> FakeCurl:
        return self.handles[-1]


@pytest.fixture(autouse=True)
def reset_correlation_id():
    """Correlation ID must not leak between tests."""
    clear_correlation_id()
    yield
    clear_correlation_id()


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://api.example.com"


@pytest.fixture
def curl_factory():
    """Fake curl engine answering 200 OK with a small JSON body."""
    return FakeCurlFactory(raw=http_response(
        headers={"Content-Type": "application/json", "Content-Length": "11"},
        body=b'{"ok":true}',
    ))


@pytest.fixture
def client(curl_factory):
    """Curl client on top of the fake engine."""
    client = CurlClient(compressor=GzipCompressor(), curl_factory=curl_factory)
    yield client
    client.close()


@pytest.fixture
def post_request(base_url):
    """Valid POST request with a JSON body."""
    body = b'{"name": "widget"}'
    return Request(
        "POST",
        f"{base_url}/items",
        headers={"Content-Type": "application/json", "Content-Length": str(len(body))},
        body=StreamFactory().create_stream(body),
    )


@pytest.fixture
def logging_config_with_file(tmp_path):
    """
    LoggingConfig with file logging enabled.

    Uses temporary directory for log files to avoid cleanup issues.
    """
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(tmp_path / "client.log")
    )
