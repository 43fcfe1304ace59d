"""Resources fetched from a remote HTTP server."""

import io
from dataclasses import dataclass, field
from typing import IO, Any, Iterator, Optional

import requests
from requests.structures import CaseInsensitiveDict
from typing_extensions import Protocol

from locate.exceptions import ResourceStatusError
from locate.loggers import get_child_logger, get_logger
from locate.resources.base import BaseResource
from locate.type_hints import URI, Headers, HTTPMethod, Location

CHUNK_SIZE = 64 * 1024
"""The size of the chunks read from response bodies, in bytes."""
SUCCESS_STATUS_LIMIT = 300
"""Response statuses below this value indicate success."""

LOGGER = get_child_logger("http", get_logger())


class HTTPResponse(Protocol):
    """The parts of an HTTP response used by HTTP resources."""

    status_code: int

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        """Iterate over the response body in chunks."""

    def close(self) -> None:
        """Release the response's connection."""


class HTTPClient(Protocol):
    """A client able to send HTTP requests. `requests.Session` satisfies
    this, and retries, pooling, timeouts and TLS are all the client's
    responsibility.

    """

    def request(self, method: str, url: str, **kwargs: Any) -> HTTPResponse:
        """Send a request and return the response."""


class ResponseStream(io.RawIOBase):
    """A raw, readable stream over the body of an HTTP response. Closing the
    stream releases the response.

    """

    def __init__(self, response: HTTPResponse) -> None:
        super().__init__()
        self._response = response
        self._chunks = response.iter_content(CHUNK_SIZE)
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        while not self._pending:
            chunk = next(self._chunks, None)
            if chunk is None:
                return 0
            self._pending = chunk

        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def close(self) -> None:
        if not self.closed:
            self._response.close()
        super().close()


def release_response(response: HTTPResponse) -> None:
    """Drain the body of a response, then release it."""
    try:
        for _ in response.iter_content(CHUNK_SIZE):
            pass
    finally:
        response.close()


@dataclass(frozen=True)
class HTTPResource(BaseResource):
    """A resource loaded from an HTTP URL. Certain aspects of requesting the
    resource can be customised.

    """

    url: URI
    """The URL of the resource."""
    headers: Headers = field(default_factory=dict, hash=False)
    """Headers to send with every request for the resource."""
    close: bool = False
    """Whether to ask the server to close the connection after each request."""
    client: Optional[HTTPClient] = field(default=None, hash=False, compare=False, repr=False)
    """
    The client used to send requests. If not provided, a new `requests.Session`
    is used for each request.

    """

    @property
    def location(self) -> Location:
        return self.url

    def _request(self, method: HTTPMethod) -> HTTPResponse:
        """Send a streamed request for the resource."""
        headers = CaseInsensitiveDict(self.headers)
        if self.close:
            headers["Connection"] = "close"

        if self.client is not None:
            return self.client.request(method, self.url, headers=headers, stream=True)
        with requests.Session() as session:
            return session.request(method, self.url, headers=headers, stream=True)

    def exists(self) -> bool:
        """Send a HEAD request for the resource, returning whether the server
        reported success. Errors sending the request are not raised.

        """
        try:
            response = self._request("HEAD")
            release_response(response)
        except (requests.RequestException, OSError) as err:
            LOGGER.debug(
                f"Existence check failed: {err!r}",
                extra={"component": self.__class__.__name__, "identifier": self.url},
            )
            return False

        return response.status_code < SUCCESS_STATUS_LIMIT

    def open(self) -> IO[bytes]:
        """Send a GET request for the resource, returning a stream over the
        response body.

        Raises `ResourceStatusError` if the server does not report success.
        Errors sending the request are not handled.

        """
        response = self._request("GET")
        if response.status_code < SUCCESS_STATUS_LIMIT:
            return io.BufferedReader(ResponseStream(response), CHUNK_SIZE)

        LOGGER.info(
            f"Request returned status {response.status_code}",
            extra={"component": self.__class__.__name__, "identifier": self.url},
        )
        release_response(response)
        raise ResourceStatusError(self.url, response.status_code)
