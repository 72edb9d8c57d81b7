"""
Configuration Sources Examples

Options from code, environment variables, .env and YAML/JSON files.
"""

import os
import tempfile
from pathlib import Path

from curl_client import CurlClient, ConfigFileLoader, InvalidArgumentError, load_from_env


def options_in_code():
    """Setting options directly; invalid values are rejected immediately."""
    print("\n=== Options in Code ===")

    client = CurlClient()
    client.set_option("timeout", 30).set_configuration({"max_redirects": 3, "http_auth": "digest"})
    print(f"Configuration: {client.configuration}")

    try:
        client.set_option("timeout", "30")
    except InvalidArgumentError as e:
        print(f"Rejected: {e}")


def options_from_env():
    """CURL_CLIENT_* variables, with explicit overrides."""
    print("\n=== Options from Environment ===")

    os.environ["CURL_CLIENT_TIMEOUT"] = "20"
    os.environ["CURL_CLIENT_ENABLE_DECOMPRESSION"] = "true"

    options = load_from_env(connect_timeout=5)
    print(f"Loaded: {options}")

    with CurlClient(configuration=options) as client:
        print(f"Client configuration: {client.configuration}")


def options_from_file():
    """YAML file with a logging section."""
    print("\n=== Options from YAML ===")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "client.yaml"
        path.write_text(
            "curl_client:\n"
            "  timeout: 15\n"
            "  default_protocol: https\n"
            "  logging:\n"
            "    level: DEBUG\n"
            "    format: colored\n",
            encoding="utf-8",
        )

        config = ConfigFileLoader.from_file(path)
        print(f"Options: {config.options}")

        with CurlClient(configuration=config.options, logging_config=config.logging) as client:
            response = client.request("GET", "jsonplaceholder.typicode.com/posts/1")
            print(f"Status: {response.status_code}")


if __name__ == "__main__":
    options_in_code()
    options_from_env()
    options_from_file()
