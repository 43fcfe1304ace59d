"""An abstract resolver, turning identifiers into resource handles."""

from abc import ABCMeta, abstractmethod
from typing import Callable, Optional

from locate.helpers import strip_scheme
from locate.resources import Resource
from locate.type_hints import Identifier, Scheme


class BaseResolver(metaclass=ABCMeta):
    """Resolves identifiers into handles that can be used to load the
    resource contents. Resolvers do not themselves load the contents.

    """

    SCHEME: Optional[Scheme] = None
    """
    The scheme prefix removed from identifiers before they are resolved,
    if any.

    """

    def _strip_scheme(self, identifier: Identifier) -> Identifier:
        """Remove the resolver's scheme prefix from the identifier."""
        if self.SCHEME is None:
            return identifier
        return strip_scheme(identifier, self.SCHEME)

    @abstractmethod
    def resolve(self, identifier: Identifier) -> Resource:
        """Parse the identifier and produce a handle for the resource.

        Raises a `ResolutionError` if the identifier is not valid input
        for this resolver.

        """


class ResolverFunc(BaseResolver):
    """A resolver which delegates to a function."""

    def __init__(self, func: Callable[[Identifier], Resource]) -> None:
        self._func = func

    def resolve(self, identifier: Identifier) -> Resource:
        return self._func(identifier)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._func!r})"
