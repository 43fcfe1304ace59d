"""Configuration for pytest."""

# These need to be imported so that fixtures are available to all tests.
from .fixtures import *  # pylint: disable=wildcard-import,unused-wildcard-import
