"""
Structured Logging Examples

JSON logs to a rotating file, colored console output, masked secrets.
"""

import tempfile
from pathlib import Path

from curl_client import CurlClient, LoggingConfig, NetworkError


def json_file_logging():
    """Every request gets started/completed records sharing a correlation id."""
    print("\n=== JSON File Logging ===")

    with tempfile.TemporaryDirectory() as tmp:
        log_path = Path(tmp) / "logs" / "client.log"
        config = LoggingConfig.create(
            level="DEBUG",
            format="json",
            enable_console=False,
            enable_file=True,
            file_path=str(log_path),
            extra_fields={"service": "example"},
        )

        with CurlClient(logging_config=config) as client:
            client.request(
                "GET",
                "https://jsonplaceholder.typicode.com/posts/1",
                headers={"Authorization": "Bearer not-in-the-logs"},
            )

        print(log_path.read_text(encoding="utf-8"))


def colored_console_logging():
    """Failures are logged with the curl error code."""
    print("\n=== Colored Console Logging ===")

    config = LoggingConfig.create(level="INFO", format="colored")
    with CurlClient(configuration={"connect_timeout": 2}, logging_config=config) as client:
        try:
            client.request("GET", "https://nonexistent-domain-12345.invalid/")
        except NetworkError:
            pass


if __name__ == "__main__":
    json_file_logging()
    colored_console_logging()
