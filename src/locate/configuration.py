"""Configuration for building composite resolvers."""

import json
from pathlib import Path
from typing import Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from locate.exceptions import UnsupportedSchemeError
from locate.resolvers import (
    BaseResolver,
    BytesResolver,
    FileResolver,
    HTTPResolver,
    MultiResolver,
    StringResolver,
)
from locate.resources import URLSAFE_ALTCHARS, HTTPClient
from locate.type_hints import Altchars, Base64AlphabetName, HeaderName, HeaderValue, ResolverName

CSelf = TypeVar("CSelf", bound="ResolverConfig")
"""The type of the config."""

BASE64_ALPHABETS: Dict[Base64AlphabetName, Altchars] = {
    "standard": None,
    "urlsafe": URLSAFE_ALTCHARS,
}
"""The alternative characters for each named base64 alphabet."""


class ResolverConfig(BaseModel):
    """The configuration for a composite resolver."""

    resolvers: List[ResolverName] = ["http", "file"]
    """
    The names of the component resolvers, in the order they should be tried.
    The in-memory resolvers ('string' and 'bytes') accept almost anything, so
    should usually come last.

    """
    base64_alphabet: Base64AlphabetName = "standard"
    """The base64 alphabet used by the 'bytes' resolver."""
    encoding: str = "utf-8"
    """The encoding used to read resources from the 'string' resolver as bytes."""
    headers: Dict[HeaderName, HeaderValue] = {}
    """Default headers sent by the 'http' resolver's resources."""
    close: bool = False
    """Whether the 'http' resolver's resources ask for connections to be closed."""

    def build_component(
        self, name: ResolverName, client: Optional[HTTPClient] = None
    ) -> BaseResolver:
        """Build a single component resolver from its name, raising an
        `UnsupportedSchemeError` if there is no resolver with that name.

        """
        if name == "http":
            return HTTPResolver(client=client, headers=self.headers, close=self.close)
        if name == "file":
            return FileResolver()
        if name == "string":
            return StringResolver(encoding=self.encoding)
        if name == "bytes":
            return BytesResolver(altchars=BASE64_ALPHABETS[self.base64_alphabet])
        raise UnsupportedSchemeError(f"Unsupported resolver {name!r}")

    def build_resolver(self, client: Optional[HTTPClient] = None) -> MultiResolver:
        """Build the composite resolver described by the configuration.

        The client is only used by the 'http' resolver.

        """
        return MultiResolver(*(self.build_component(name, client) for name in self.resolvers))

    @classmethod
    def load(cls: Type[CSelf], path: Union[str, Path]) -> CSelf:
        """Load an instance of the config from a local JSON file."""
        with open(path, "r", encoding="utf-8") as config_stream:
            json_config = json.load(config_stream)

        if not isinstance(json_config, dict):
            raise TypeError("JSON resolver config must contain mapping in root")

        return cls(**json_config)
