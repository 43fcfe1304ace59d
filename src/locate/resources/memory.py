"""In-memory resources, whose data is held by the handle itself."""

import base64
import binascii
from dataclasses import dataclass
from io import BytesIO
from typing import IO

from locate.resources.base import BaseResource
from locate.type_hints import Altchars, Location

STANDARD_ALTCHARS: bytes = b"+/"
"""The characters at the end of the standard base64 alphabet."""
URLSAFE_ALTCHARS: bytes = b"-_"
"""The alternative characters for the URL-safe base64 alphabet."""


@dataclass(frozen=True)
class StringResource(BaseResource):
    """An in-memory resource whose data is taken from a string. Resources of
    this type have no real location.

    """

    value: str
    """The contents of the resource."""
    encoding: str = "utf-8"
    """The encoding used to turn the string into bytes when read."""

    @property
    def location(self) -> Location:
        return "string"

    def exists(self) -> bool:
        return True

    def open(self) -> IO[bytes]:
        return BytesIO(self.value.encode(self.encoding))

    def write_to(self, sink: IO[bytes]) -> int:
        """Write the whole resource to a binary sink, returning the number of
        bytes written.

        """
        return sink.write(self.value.encode(self.encoding))


@dataclass(frozen=True)
class BytesResource(BaseResource):
    """An in-memory resource whose data comes from a byte buffer."""

    data: bytes

    @property
    def location(self) -> Location:
        return "bytes"

    def exists(self) -> bool:
        return True

    def open(self) -> IO[bytes]:
        return BytesIO(self.data)

    def write_to(self, sink: IO[bytes]) -> int:
        """Write the whole resource to a binary sink, returning the number of
        bytes written.

        """
        return sink.write(self.data)


def decode_base64(value: str, altchars: Altchars = None) -> BytesResource:
    """Decode a base64 string into a bytes resource.

    `altchars` selects the alphabet (e.g. `URLSAFE_ALTCHARS`); the standard
    alphabet is used if omitted. Raises `ValueError` (usually `binascii.Error`)
    if the string is not valid base64 for the alphabet.

    """
    if altchars is not None:
        # `b64decode` maps altchars onto the standard characters before validating.
        for char in set(STANDARD_ALTCHARS.decode("ascii")) - set(altchars.decode("ascii")):
            if char in value:
                raise binascii.Error(f"Character {char!r} is not in the base64 alphabet")

    return BytesResource(base64.b64decode(value, altchars=altchars, validate=True))
