"""Helpers for resource handling."""

from io import TextIOWrapper

from locate.type_hints import Identifier, Scheme

STRING_SCHEME: Scheme = "string://"
"""The scheme prefix for in-memory string resources."""
BYTES_SCHEME: Scheme = "bytes://"
"""The scheme prefix for in-memory, base64 encoded byte resources."""
FILE_SCHEME: Scheme = "file://"
"""The scheme prefix for local filesystem resources."""


class NonClosingTextIOWrapper(TextIOWrapper):
    """A TextIOWrapper implementation which detaches instead of closing
    the stream upon exit.

    """

    def __exit__(self, *_):
        """Exits the context and detaches"""
        try:
            self.detach()
        except ValueError:
            # Assume all ValuesErrors are safe to absorb.
            return


def strip_scheme(identifier: Identifier, scheme: Scheme) -> Identifier:
    """Remove a leading scheme prefix from an identifier, if present.

    Only the leading occurrence of the prefix is removed; the identifier is
    returned unchanged if it does not start with the prefix.

    """
    if identifier.startswith(scheme):
        return identifier[len(scheme) :]
    return identifier
