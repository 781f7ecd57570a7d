"""
Pytest configuration for oocurl tests.

This file contains shared fixtures and configuration
for all tests in the project.
"""

import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, Iterator, List, Optional, Set

import pycurl
import pytest


class FakeCurl:
    """In-memory stand-in for ``pycurl.Curl`` driven by its factory."""

    def __init__(self, factory: "FakeCurlFactory") -> None:
        self._factory = factory
        self.options: Dict[int, Any] = {}
        self.setopt_calls: List[tuple] = []
        self.perform_count = 0
        self.closed = False

    def setopt(self, option: int, value: Any) -> None:
        if self.closed:
            raise pycurl.error("cannot invoke setopt() - no curl handle")
        if option in self._factory.rejected:
            raise pycurl.error(48, "An unknown option was passed in to libcurl")
        self.options[option] = value
        self.setopt_calls.append((option, value))

    def perform(self) -> None:
        self.perform_count += 1
        if self._factory.perform_error is not None:
            raise self._factory.perform_error
        writer = self.options.get(pycurl.WRITEFUNCTION)
        if writer is not None:
            writer(self._factory.body)

    def getinfo(self, info: int) -> Any:
        if info not in self._factory.info_values:
            raise ValueError("invalid argument to getinfo")
        return self._factory.info_values[info]

    def close(self) -> None:
        self.closed = True


class FakeCurlFactory:
    """Replaces ``pycurl.Curl`` and keeps every handle it created."""

    def __init__(self) -> None:
        self.instances: List[FakeCurl] = []
        self.rejected: Set[int] = set()
        self.body = b"Hello, World!"
        self.perform_error: Optional[Exception] = None
        self.info_values: Dict[int, Any] = {}

    def __call__(self) -> FakeCurl:
        curl = FakeCurl(self)
        self.instances.append(curl)
        return curl

    @property
    def last(self) -> FakeCurl:
        return self.instances[-1]


@pytest.fixture
def fake_curl(monkeypatch) -> FakeCurlFactory:
    """Patch pycurl so no real easy handle is created."""
    factory = FakeCurlFactory()
    monkeypatch.setattr(pycurl, "Curl", factory)
    return factory


class _TestHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        if self.path == "/headers":
            body = (
                f"ua={self.headers.get('User-Agent')}\n"
                f"version={self.headers.get('X-OOCurl-Version')}\n"
            ).encode()
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/")
            self.send_header("Content-Length", "0")
            self.end_headers()
            return
        else:
            body = b"Hello from the test server"

        self.send_response(200)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


@pytest.fixture(scope="session")
def http_server() -> Iterator[str]:
    """Run a local HTTP server and yield its base URL."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _TestHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    try:
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def unused_url() -> str:
    """URL on a local port nothing is listening on."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}/"
