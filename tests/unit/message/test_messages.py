"""
Tests for Request, Response and the factories.
"""

from curl_client.message import (
    Request,
    RequestFactory,
    Response,
    ResponseFactory,
    StreamFactory,
    Uri,
)


class TestHeaders:
    """Header handling shared by requests and responses."""

    def test_case_insensitive_lookup(self):
        """Lookup ignores case, original case is kept."""
        request = Request("GET", "https://a.example/", headers={"Content-Type": "text/plain"})

        assert request.has_header("content-type")
        assert request.header("CONTENT-TYPE") == ["text/plain"]
        assert list(request.headers) == ["Content-Type"]

    def test_with_header_is_immutable_update(self):
        """with_header returns a new message."""
        original = Request("GET", "https://a.example/")
        updated = original.with_header("X-A", ["1", "2"])

        assert updated.header_line("X-A") == "1,2"
        assert not original.has_header("X-A")

    def test_with_header_replaces_and_renames(self):
        """Replacing keeps the new name's case."""
        request = Request("GET", "https://a.example/", headers={"x-a": "1"}).with_header("X-A", "2")

        assert request.headers == {"X-A": ["2"]}

    def test_with_added_header(self):
        """Values are appended."""
        request = Request("GET", "https://a.example/", headers={"Accept": "text/html"})

        assert request.with_added_header("accept", "application/json").header("Accept") == [
            "text/html", "application/json",
        ]

    def test_without_header(self):
        """Header removal is case-insensitive."""
        request = Request("GET", "https://a.example/", headers={"X-A": "1"})

        assert not request.without_header("x-a").has_header("X-A")

    def test_missing_header(self):
        """Missing header -> empty list / empty line."""
        request = Request("GET", "https://a.example/")

        assert request.header("X-None") == []
        assert request.header_line("X-None") == ""

    def test_headers_copy(self):
        """headers property cannot be used to mutate the message."""
        request = Request("GET", "https://a.example/", headers={"X-A": "1"})
        request.headers["X-A"].append("2")

        assert request.header("X-A") == ["1"]


class TestRequest:
    """Tests for Request."""

    def test_request_target(self):
        """Target is path plus query; root when path is empty."""
        assert Request("GET", "https://a.example/items?x=1").request_target == "/items?x=1"
        assert Request("GET", "https://a.example").request_target == "/"

    def test_explicit_request_target(self):
        """Explicit target overrides the URI-derived one."""
        request = Request("OPTIONS", "https://a.example/").with_request_target("*")

        assert request.request_target == "*"
        assert request.explicit_request_target == "*"
        assert Request("GET", "https://a.example/x").explicit_request_target is None

    def test_scheme_less_request_target(self):
        """Authority of a scheme-less URI is not part of the target."""
        assert Request("GET", "127.0.0.1:8080/items?x=1").request_target == "/items?x=1"

    def test_with_method_and_uri(self):
        """Method and URI can be replaced."""
        request = Request("GET", "https://a.example/").with_method("POST").with_uri("https://b.example/x")

        assert request.method == "POST"
        assert isinstance(request.uri, Uri)
        assert request.uri.host == "b.example"

    def test_protocol_version(self):
        """Default version is 1.1."""
        request = Request("GET", "https://a.example/")

        assert request.protocol_version == "1.1"
        assert request.with_protocol_version("2").protocol_version == "2"

    def test_default_body_empty(self):
        """Body defaults to an empty stream."""
        assert bytes(Request("GET", "https://a.example/").body) == b""


class TestResponse:
    """Tests for Response."""

    def test_with_status(self):
        """Status and reason can be replaced."""
        response = Response(200, "OK").with_status(404, "Not Found")

        assert response.status_code == 404
        assert response.reason_phrase == "Not Found"


class TestFactories:
    """Tests for the built-in factories."""

    def test_stream_factory_bytes_and_str(self):
        """Streams from bytes and text."""
        factory = StreamFactory()

        assert bytes(factory.create_stream(b"abc")) == b"abc"
        assert factory.create_stream("héllo").size() == len("héllo".encode("utf-8"))

    def test_stream_factory_from_file(self, tmp_path):
        """File stream opens in binary mode."""
        path = tmp_path / "body.txt"
        path.write_bytes(b"file body")

        stream = StreamFactory().create_stream_from_file(path, "r")
        try:
            assert bytes(stream) == b"file body"
            assert stream.metadata("uri") == str(path)
        finally:
            stream.close()

    def test_request_factory(self):
        """Request from method and URI."""
        request = RequestFactory().create_request("GET", "https://a.example/")

        assert request.method == "GET"
        assert str(request.uri) == "https://a.example/"

    def test_response_factory(self):
        """Response from code and reason."""
        response = ResponseFactory().create_response(201, "Created")

        assert (response.status_code, response.reason_phrase) == (201, "Created")
