"""Service layer for working with resources. This boils down to
convenience functions which resolve identifiers with a provided resolver
and manage the streams opened from the resulting handles.

"""

import hashlib
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import IO, Optional, Set, overload

from typing_extensions import Literal

from locate.helpers import NonClosingTextIOWrapper
from locate.resolvers import BaseResolver
from locate.resources import Resource
from locate.type_hints import Identifier, StreamOpenMode

STREAM_MODES: Set[StreamOpenMode] = {"r", "rb", "br"}
"""All supported stream modes."""
TEXT_MODES: Set[StreamOpenMode] = {"r"}
"""Stream modes which decode the resource as text."""

ONE_MEBIBYTE = 1024**2
"""The size of a binary megabyte in bytes."""


@overload
def open_stream(
    identifier: Identifier,
    resolver: BaseResolver,
    mode: Literal["r"],
    encoding: Optional[str] = None,
) -> AbstractContextManager[IO[str]]:
    pass  # pragma: no cover


@overload
def open_stream(
    identifier: Identifier,
    resolver: BaseResolver,
    mode: Literal["rb", "br"] = "rb",
    encoding: None = None,
) -> AbstractContextManager[IO[bytes]]:
    pass  # pragma: no cover


@contextmanager
def open_stream(
    identifier: Identifier,
    resolver: BaseResolver,
    mode: StreamOpenMode = "rb",
    encoding: Optional[str] = None,
) -> Iterator[IO]:
    """Resolve the identifier and open the resource as a Python file stream,
    returning a context manager over the stream. The stream is closed when
    the context exits.

    """
    if mode not in STREAM_MODES:
        raise ValueError(f"Unsupported stream mode {mode!r}, expected one of {STREAM_MODES!r}")

    resource = resolver.resolve(identifier)
    with resource.open() as byte_stream:
        if mode in TEXT_MODES:
            with NonClosingTextIOWrapper(byte_stream, encoding) as text_stream:
                yield text_stream
        else:
            yield byte_stream


def get_resource_exists(identifier: Identifier, resolver: BaseResolver) -> bool:
    """Resolve the identifier and check whether the resource exists."""
    return resolver.resolve(identifier).exists()


def read_resource(resource: Resource) -> bytes:
    """Read the whole of a resource's data."""
    with resource.open() as byte_stream:
        return byte_stream.read()


def copy_resource_to(resource: Resource, sink: IO[bytes]) -> int:
    """Copy a resource's data to a binary sink, returning the number of bytes
    written. In-memory resources are written directly, without opening a
    stream.

    """
    write_to = getattr(resource, "write_to", None)
    if write_to is not None:
        return write_to(sink)

    written = 0
    with resource.open() as byte_stream:
        while True:
            block = byte_stream.read(ONE_MEBIBYTE)
            if not block:
                break
            sink.write(block)
            written += len(block)

    return written


def get_resource_digest(resource: Resource, algorithm: str = "md5") -> str:
    """Get the digest (AKA checksum) of the provided resource using the specified
    hashing algorithm.

    """
    hash_func = hashlib.new(algorithm)
    with resource.open() as byte_stream:
        while True:
            block = byte_stream.read(ONE_MEBIBYTE)
            if not block:
                break
            hash_func.update(block)

    return hash_func.hexdigest()
