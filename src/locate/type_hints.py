"""Type hints for resource resolution."""

from typing import Mapping, Optional

from typing_extensions import Literal

PathStr = str
"""A filesystem path, as a string."""
URI = str
"""A URI representing a remote or local resource."""
Identifier = str
"""
An opaque string identifying a resource. This may carry a scheme prefix
(e.g. 'file://'), be a bare URL, or be the resource data itself.

"""
Scheme = str
"""A scheme prefix signalling which backend a resolver targets."""
Location = str
"""
An indicator of where a resource's data comes from. This is not guaranteed
to be unique (all in-memory resources of a type share a location).

"""
HeaderName = str
"""The name of an HTTP header."""
HeaderValue = str
"""The value of an HTTP header."""
Headers = Mapping[HeaderName, HeaderValue]
"""A mapping of HTTP headers."""
Altchars = Optional[bytes]
"""
The two alternative characters for '+' and '/' in a base64 alphabet. `None`
indicates the standard alphabet.

"""
HTTPMethod = Literal["GET", "HEAD"]
"""An HTTP method used when loading resources."""
StreamOpenMode = Literal["r", "rb", "br"]
"""A mode in which a resource stream can be opened."""
ResolverName = Literal["http", "file", "string", "bytes"]
"""The name of a scheme resolver in the configuration."""
Base64AlphabetName = Literal["standard", "urlsafe"]
"""The name of a base64 alphabet in the configuration."""
