"""Exceptions raised while resolving and opening resources."""

from functools import partial
from typing import List, Sequence


class UnsupportedSchemeError(ValueError):
    """An error raised when a resolver scheme is unsupported."""


class ResolutionError(ValueError):
    """An identifier could not be resolved to a resource handle."""


class InvalidIdentifierError(ResolutionError):
    """An identifier is not valid input for a given resolver (e.g. malformed
    base64, or not an HTTP URL).

    """


class MultiResolverError(ResolutionError):
    """An error raised by a composite resolver when none of its components
    could resolve an identifier.

    """

    def __init__(self, identifier: str, errors: Sequence[Exception] = ()) -> None:
        super().__init__(f"Unable to resolve resource string: {identifier}")
        self.identifier = identifier
        """The identifier which could not be resolved."""
        self.errors: List[Exception] = list(errors)
        """
        The errors raised by each component resolver, in the order the
        components were tried.

        """

    def __reduce__(self):
        """Allows the class to be pickled"""
        return partial(self.__class__, errors=self.errors), (self.identifier,)


class NoSuchResourceError(IOError):
    """A resource handle could not be opened because the backend does not
    hold the resource (or refuses to return it).

    """


class ResourceStatusError(NoSuchResourceError):
    """The backend reported a failure status when the resource was requested."""

    def __init__(self, location: str, status_code: int) -> None:
        super().__init__(f"Unable to retrieve {location!r} (backend reported status {status_code})")
        self.location = location
        """The location of the resource which could not be retrieved."""
        self.status_code = status_code
        """The status code reported by the backend."""

    def __reduce__(self):
        """Allows the class to be pickled"""
        return self.__class__, (self.location, self.status_code)
