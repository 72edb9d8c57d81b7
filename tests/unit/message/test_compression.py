"""
Tests for GzipCompressor.
"""

import gzip

import pytest

from curl_client.core.exceptions import DecompressionBombError
from curl_client.message import GzipCompressor, Request, Response, StreamFactory


def gzip_response(payload, with_length=True):
    compressed = gzip.compress(payload)
    headers = {"Content-Encoding": "gzip"}
    if with_length:
        headers["Content-Length"] = str(len(compressed))
    return Response(200, "OK", headers=headers, body=StreamFactory().create_stream(compressed))


class TestCompress:
    """Tests for GzipCompressor.compress."""

    def test_compress_request(self):
        """Body is gzipped and headers follow."""
        body = b"a" * 1000
        request = Request(
            "POST", "https://a.example/",
            headers={"Content-Type": "text/plain", "Content-Length": "1000"},
            body=StreamFactory().create_stream(body),
        )

        compressed = GzipCompressor().compress(request)

        data = bytes(compressed.body)
        assert gzip.decompress(data) == body
        assert compressed.header_line("Content-Encoding") == "gzip"
        assert compressed.header_line("Content-Length") == str(len(data))
        assert request.header_line("Content-Length") == "1000"

    @pytest.mark.parametrize("level", [0, 10])
    def test_invalid_level(self, level):
        """Level must be 1-9."""
        with pytest.raises(ValueError):
            GzipCompressor(level=level)


class TestDecompress:
    """Tests for GzipCompressor.decompress."""

    def test_decompress_response(self):
        """Body is gunzipped, Content-Encoding removed, Content-Length updated."""
        response = GzipCompressor().decompress(gzip_response(b"hello world"))

        assert bytes(response.body) == b"hello world"
        assert not response.has_header("Content-Encoding")
        assert response.header_line("Content-Length") == "11"

    def test_no_content_length_added(self):
        """Content-Length is only updated when present."""
        response = GzipCompressor().decompress(gzip_response(b"hello", with_length=False))

        assert not response.has_header("Content-Length")

    def test_decompression_bomb(self):
        """Output beyond the limit is stopped."""
        compressor = GzipCompressor(max_decompressed_size=1024)

        with pytest.raises(DecompressionBombError) as exc_info:
            compressor.decompress(gzip_response(b"\0" * 100_000))

        assert exc_info.value.max_size == 1024

    def test_invalid_gzip(self):
        """Garbage body raises ValueError."""
        response = Response(200, headers={"Content-Encoding": "gzip"}, body=StreamFactory().create_stream(b"not gzip"))

        with pytest.raises(ValueError, match="Invalid gzip data"):
            GzipCompressor().decompress(response)
