"""Logger setup for resource resolution.

Resolvers and resources log through children of the `locate` logger. Records
about a single resolution attempt carry the component resolver and the
identifier being resolved as `extra` attributes, which the default handler
includes in its output.

"""

import logging
import sys
import time

LOGGER_NAME = "locate"
"""The name of the top level logger for the package."""
CONTEXT_ATTRIBUTES = ("component", "identifier")
"""Record attributes describing the resolution attempt a record relates to."""
MAX_IDENTIFIER_LENGTH = 80
"""Identifiers longer than this are shortened in log output."""
LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s [%(component)s %(identifier)s]: %(message)s"
"""The format used by the default handler."""


# pylint: disable=too-few-public-methods
class ResolutionContextFilter(logging.Filter):
    """Ensure every record has the resolution context attributes, and shorten
    identifiers so in-memory payloads don't flood the log.

    """

    def filter(self, record):
        for attribute in CONTEXT_ATTRIBUTES:
            if not hasattr(record, attribute):
                setattr(record, attribute, "-")

        identifier = str(record.identifier)
        if len(identifier) > MAX_IDENTIFIER_LENGTH:
            record.identifier = identifier[: MAX_IDENTIFIER_LENGTH - 3] + "..."
        return True


class UTCFormatter(logging.Formatter):
    """A formatter with timestamps in the UTC timezone."""

    converter = time.gmtime


def get_default_handler() -> logging.Handler:
    """Get the default logging handler, writing resolution context to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(ResolutionContextFilter())
    handler.setFormatter(UTCFormatter(LOG_FORMAT))
    return handler


def get_logger(component: str = LOGGER_NAME, level: int = logging.WARNING) -> logging.Logger:
    """Get a base logger, that handles its own logging and does not propagate."""
    logger = logging.getLogger(component)

    if not logger.handlers:  # First time configuration.
        logger.propagate = False
        logger.addHandler(get_default_handler())
        logger.setLevel(level)

    return logger


def get_child_logger(component: str, parent: logging.Logger) -> logging.Logger:
    """Get a child logger from a parent, which propagates messages up to the
    parent rather than handling them itself.

    """
    return logging.getLogger(f"{parent.name}.{component}")
