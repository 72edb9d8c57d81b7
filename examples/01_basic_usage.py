"""
Basic Curl Client Usage Examples

Demonstrates GET, HEAD, POST and PUT requests and error handling.
"""

import json

from curl_client import (
    CurlClient,
    GzipCompressor,
    NetworkError,
    Request,
    RequestError,
    StreamFactory,
)


def basic_get_request():
    """Simple GET request."""
    print("\n=== Basic GET Request ===")

    with CurlClient(configuration={"timeout": 10}) as client:
        response = client.request("GET", "https://jsonplaceholder.typicode.com/posts/1")

        print(f"Status: {response.status_code} {response.reason_phrase}")
        print(f"Content-Type: {response.header_line('Content-Type')}")
        print(f"Data: {json.loads(bytes(response.body))}")


def head_request():
    """HEAD request: headers only."""
    print("\n=== HEAD Request ===")

    with CurlClient() as client:
        response = client.request("HEAD", "https://jsonplaceholder.typicode.com/posts/1")
        print(f"Status: {response.status_code}, body: {bytes(response.body)!r}")


def post_with_json():
    """POST request with JSON body built by hand."""
    print("\n=== POST with JSON ===")

    body = json.dumps({"title": "My Post", "body": "This is the content", "userId": 1}).encode()
    request = Request(
        "POST",
        "https://jsonplaceholder.typicode.com/posts",
        headers={"Content-Type": "application/json", "Content-Length": str(len(body))},
        body=StreamFactory().create_stream(body),
    )

    with CurlClient() as client:
        response = client.send_request(request)
        print(f"Status: {response.status_code}")
        print(f"Created: {json.loads(bytes(response.body))}")


def put_compressed():
    """PUT request with gzip-compressed body and gzip responses unpacked."""
    print("\n=== Compressed PUT ===")

    client = CurlClient(
        compressor=GzipCompressor(),
        configuration={"enable_compression": True, "enable_decompression": True},
    )
    with client:
        response = client.request(
            "PUT",
            "https://httpbin.org/put",
            headers={"Content-Type": "text/plain"},
            body="compress me " * 100,
        )
        print(f"Status: {response.status_code}")


def error_handling():
    """Typed errors."""
    print("\n=== Error Handling ===")

    with CurlClient(configuration={"connect_timeout": 2}) as client:
        try:
            client.request("GET", "https://nonexistent-domain-12345.invalid/")
        except NetworkError as e:
            print(f"Network error ({e.type.name}, retryable={e.retryable}): {e}")

        try:
            client.request("POST", "https://httpbin.org/post", body=b"no content type")
        except RequestError as e:
            print(f"Rejected before sending: {e}")


if __name__ == "__main__":
    basic_get_request()
    head_request()
    post_with_json()
    put_compressed()
    error_handling()
