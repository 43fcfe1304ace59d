# ruff: noqa: F401
"""Tools for resolving identifier strings into resource handles."""

from locate.configuration import ResolverConfig
from locate.exceptions import (
    InvalidIdentifierError,
    MultiResolverError,
    NoSuchResourceError,
    ResolutionError,
    ResourceStatusError,
    UnsupportedSchemeError,
)
from locate.helpers import BYTES_SCHEME, FILE_SCHEME, STRING_SCHEME, strip_scheme
from locate.resolvers import (
    BaseResolver,
    BytesResolver,
    FileResolver,
    HTTPResolver,
    MultiResolver,
    ResolverFunc,
    StringResolver,
    default_resolver,
)
from locate.resources import (
    URLSAFE_ALTCHARS,
    BaseResource,
    BytesResource,
    FileResource,
    HTTPResource,
    Resource,
    StringResource,
    decode_base64,
)
from locate.service import (
    copy_resource_to,
    get_resource_digest,
    get_resource_exists,
    open_stream,
    read_resource,
)
