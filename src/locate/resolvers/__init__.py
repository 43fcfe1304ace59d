# ruff: noqa: F401
"""Resolvers, which turn identifier strings into resource handles."""

from .base import BaseResolver, ResolverFunc
from .file import FileResolver
from .http import HTTPResolver, merge_headers, validate_http_url
from .memory import BytesResolver, StringResolver
from .multi import MultiResolver, default_resolver
