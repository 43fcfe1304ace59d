"""A composite resolver, chaining other resolvers."""

from typing import List, Optional, Tuple

from locate.exceptions import MultiResolverError
from locate.loggers import get_child_logger, get_logger
from locate.resolvers.base import BaseResolver
from locate.resolvers.file import FileResolver
from locate.resolvers.http import HTTPResolver
from locate.resources import HTTPClient, Resource
from locate.type_hints import Identifier

LOGGER = get_child_logger("resolvers", get_logger())


class MultiResolver(BaseResolver):
    """A single, composite resolver built from zero or more component
    resolvers.

    Each component is tried in the order given, and the handle from the
    first component which resolves the identifier is returned. If no
    component can resolve the identifier, a `MultiResolverError` is raised
    containing each component's error.

    """

    def __init__(self, *components: BaseResolver) -> None:
        self._components: Tuple[BaseResolver, ...] = tuple(components)

    @property
    def components(self) -> Tuple[BaseResolver, ...]:
        """The component resolvers, in the order they are tried."""
        return self._components

    def resolve(self, identifier: Identifier) -> Resource:
        errors: List[Exception] = []
        for component in self._components:
            try:
                return component.resolve(identifier)
            except Exception as err:  # pylint: disable=broad-except
                LOGGER.debug(
                    f"Component failed to resolve identifier: {err!r}",
                    extra={"component": repr(component), "identifier": identifier},
                )
                errors.append(err)

        raise MultiResolverError(identifier, errors)

    def __repr__(self) -> str:
        components = ", ".join(repr(component) for component in self._components)
        return f"{self.__class__.__name__}({components})"


def default_resolver(client: Optional[HTTPClient] = None) -> MultiResolver:
    """Build the default composite resolver, which tries HTTP(S) URLs then
    local files.

    A new resolver is built for every call. Callers which need a shared
    resolver should build one and pass it around.

    """
    return MultiResolver(HTTPResolver(client=client), FileResolver())
