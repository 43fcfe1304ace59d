"""Global test fixtures."""

# pylint: disable=redefined-outer-name
import logging
import tempfile
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

import pytest
import requests

from locate.loggers import get_logger

__all__ = [
    "FakeHTTPClient",
    "FakeResponse",
    "http_client",
    "resolution_logs",
    "temp_dir",
    "temp_file",
]


class FakeResponse:
    """A stand-in for `requests.Response`, serving a fixed body."""

    def __init__(self, status_code: int, body: bytes = b"", chunk_size: int = 4) -> None:
        self.status_code = status_code
        self.body = body
        self.chunk_size = chunk_size
        self.consumed = 0
        self.closed = False

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        """Yield the body in small chunks, regardless of the requested size."""
        del chunk_size
        while self.consumed < len(self.body):
            chunk = self.body[self.consumed : self.consumed + self.chunk_size]
            self.consumed += len(chunk)
            yield chunk

    def close(self) -> None:
        """Mark the response as released."""
        self.closed = True


Route = Union[Tuple[int, bytes], Exception]
"""Either the status and body served for a URL, or an error to raise."""


class FakeHTTPClient:
    """A stand-in for `requests.Session`, serving fixed routes and recording
    every request it receives.

    """

    def __init__(self, routes: Optional[Dict[str, Route]] = None) -> None:
        self.routes: Dict[str, Route] = dict(routes or {})
        self.requests: List[Tuple[str, str, Mapping[str, str]]] = []
        self.responses: List[FakeResponse] = []

    def request(self, method: str, url: str, **kwargs) -> FakeResponse:
        """Serve a request from the routes. Unknown URLs are served a 404."""
        self.requests.append((method, url, dict(kwargs.get("headers") or {})))
        route = self.routes.get(url, (404, b"Not Found"))
        if isinstance(route, Exception):
            raise route

        status_code, body = route
        if method == "HEAD":
            body = b""
        response = FakeResponse(status_code, body)
        self.responses.append(response)
        return response


@pytest.fixture(scope="function")
def temp_dir() -> Iterator[Path]:
    """A fixture providing a temporary directory."""
    with tempfile.TemporaryDirectory() as temp_dir_str:
        yield Path(temp_dir_str)


@pytest.fixture(scope="function")
def temp_file(temp_dir: Path) -> Path:
    """A fixture providing a path to a temporary file containing some text."""
    path = temp_dir.joinpath("file.txt")
    path.write_bytes(b"Hello, world!")
    return path


@pytest.fixture(scope="function")
def http_client() -> FakeHTTPClient:
    """A fake HTTP client with a few routes configured."""
    return FakeHTTPClient(
        {
            "https://example.com/file.txt": (200, b"Hello, world!"),
            "https://example.com/empty.txt": (204, b""),
            "https://example.com/moved.txt": (301, b"Moved elsewhere"),
            "https://example.com/broken.txt": (500, b"Internal Server Error"),
            "https://unreachable.example.com/file.txt": requests.ConnectionError(
                "Connection refused"
            ),
        }
    )


@pytest.fixture(scope="function")
def resolution_logs(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """A fixture capturing debug records from the package's own logger, which
    does not propagate to the root logger.

    """
    logger = get_logger()
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=logger.name)
    try:
        yield caplog
    finally:
        logger.removeHandler(caplog.handler)
