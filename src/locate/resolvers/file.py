"""A resolver for local filesystem resources."""

from locate.helpers import FILE_SCHEME
from locate.resolvers.base import BaseResolver
from locate.resources import FileResource
from locate.type_hints import Identifier


class FileResolver(BaseResolver):
    """Resolves identifiers into file resources. The identifier may be
    prefixed with 'file://', and whatever remains is used as the path.

    This never fails, and does not check that the file exists.

    """

    SCHEME = FILE_SCHEME

    def resolve(self, identifier: Identifier) -> FileResource:
        return FileResource(self._strip_scheme(identifier))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
