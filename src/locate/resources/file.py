"""A resource held on the local filesystem."""

import os
import stat
from dataclasses import dataclass
from typing import IO

from locate.resources.base import BaseResource
from locate.type_hints import Location, PathStr


@dataclass(frozen=True)
class FileResource(BaseResource):
    """A resource held in a file on the local filesystem."""

    path: PathStr
    """The path to the file."""

    @property
    def location(self) -> Location:
        return self.path

    def exists(self) -> bool:
        """Check that the path exists and is a regular file. This is `False`
        for directories and devices, and for symlinks which do not resolve
        to a regular file.

        """
        try:
            mode = os.stat(self.path).st_mode
        except (OSError, ValueError):
            return False
        return stat.S_ISREG(mode)

    def open(self) -> IO[bytes]:
        """Open the file for reading. Errors from opening the file (e.g.
        `FileNotFoundError`, `PermissionError`) are not handled.

        """
        return open(self.path, "rb")  # pylint: disable=consider-using-with
