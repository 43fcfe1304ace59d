"""Resolvers for resources whose data is the identifier itself."""

from locate.exceptions import InvalidIdentifierError
from locate.helpers import BYTES_SCHEME, STRING_SCHEME
from locate.resolvers.base import BaseResolver
from locate.resources import BytesResource, StringResource, decode_base64
from locate.type_hints import Altchars, Identifier


class StringResolver(BaseResolver):
    """Resolves identifiers into in-memory string resources. The identifier
    may be prefixed with 'string://', which is removed from the data.

    This never fails.

    """

    SCHEME = STRING_SCHEME

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        """The encoding used when reading the string as bytes."""

    def resolve(self, identifier: Identifier) -> StringResource:
        return StringResource(self._strip_scheme(identifier), self.encoding)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(encoding={self.encoding!r})"


class BytesResolver(BaseResolver):
    """Resolves base64 encoded identifiers into in-memory byte resources. The
    identifier may be prefixed with 'bytes://', which is removed before
    decoding.

    """

    SCHEME = BYTES_SCHEME

    def __init__(self, altchars: Altchars = None) -> None:
        self.altchars = altchars
        """
        The alternative characters for the base64 alphabet (e.g.
        `URLSAFE_ALTCHARS`). `None` uses the standard alphabet.

        """

    def resolve(self, identifier: Identifier) -> BytesResource:
        try:
            return decode_base64(self._strip_scheme(identifier), self.altchars)
        except ValueError as err:
            raise InvalidIdentifierError(f"Unable to decode base64 resource: {err}") from err

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(altchars={self.altchars!r})"
