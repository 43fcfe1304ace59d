"""A resolver for resources fetched over HTTP."""

from typing import Optional, Set
from urllib.parse import urlsplit

from requests.structures import CaseInsensitiveDict

from locate.exceptions import InvalidIdentifierError
from locate.resolvers.base import BaseResolver
from locate.resources import HTTPClient, HTTPResource
from locate.type_hints import Headers, HeaderValue, Identifier, Scheme

HTTP_URL_SCHEMES: Set[Scheme] = {"http", "https"}
"""URL schemes accepted by the HTTP resolver."""


def merge_headers(*header_sets: Optional[Headers]) -> "CaseInsensitiveDict[HeaderValue]":
    """Merge sets of headers into a new mapping. Where a header appears in
    more than one set, the values are combined rather than replaced.

    """
    merged: "CaseInsensitiveDict[HeaderValue]" = CaseInsensitiveDict()
    for headers in header_sets:
        if not headers:
            continue
        for name, value in headers.items():
            if name in merged:
                merged[name] = f"{merged[name]}, {value}"
            else:
                merged[name] = value
    return merged


def validate_http_url(identifier: Identifier) -> None:
    """Check that the identifier is an absolute HTTP(S) URL, raising an
    `InvalidIdentifierError` if not.

    """
    try:
        parsed = urlsplit(identifier)
        parsed.port  # pylint: disable=pointless-statement
    except ValueError as err:
        raise InvalidIdentifierError(f"Unable to parse {identifier!r} as a URL: {err}") from err

    # Stricter than bare URL syntax, so plain strings and paths fall through to other resolvers.
    if parsed.scheme.lower() not in HTTP_URL_SCHEMES:
        raise InvalidIdentifierError(
            f"Unsupported URL scheme {parsed.scheme!r}, expected one of {sorted(HTTP_URL_SCHEMES)!r}"
        )
    if not parsed.hostname:
        raise InvalidIdentifierError(f"Missing hostname for URL {identifier!r}")


class HTTPResolver(BaseResolver):
    """Resolves HTTP(S) URLs into HTTP resources. The URL is only checked
    for syntax: no requests are sent while resolving.

    """

    def __init__(
        self,
        client: Optional[HTTPClient] = None,
        headers: Optional[Headers] = None,
        close: bool = False,
    ) -> None:
        self.client = client
        """The client used by resolved resources to send requests."""
        self.headers = merge_headers(headers)
        """Default headers sent with every request."""
        self.close = close
        """Whether resolved resources ask for the connection to be closed."""

    def resolve(self, identifier: Identifier, headers: Optional[Headers] = None) -> HTTPResource:
        """Resolve the URL into a resource, merging any provided headers with
        the resolver's default headers.

        """
        validate_http_url(identifier)
        return HTTPResource(
            url=identifier,
            headers=merge_headers(self.headers, headers),
            close=self.close,
            client=self.client,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(client={self.client!r}, "
            + f"headers={dict(self.headers)!r}, close={self.close!r})"
        )
