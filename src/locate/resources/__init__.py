# ruff: noqa: F401
"""Resource handles for each supported backend."""

from typing import Union

from .base import BaseResource
from .file import FileResource
from .http import HTTPClient, HTTPResource, HTTPResponse, ResponseStream
from .memory import URLSAFE_ALTCHARS, BytesResource, StringResource, decode_base64

Resource = Union[StringResource, BytesResource, FileResource, HTTPResource]
"""A handle to any of the supported resource backends."""
