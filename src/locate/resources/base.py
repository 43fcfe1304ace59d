"""An abstract resource handle."""

from abc import ABCMeta, abstractmethod
from typing import IO

from locate.type_hints import Location


class BaseResource(metaclass=ABCMeta):
    """A handle to a resource's data.

    The existence of a handle does not indicate that the underlying data
    exists: constructing a handle never performs I/O. The data is only
    touched by `exists` and `open`.

    """

    __slots__ = ()

    @property
    @abstractmethod
    def location(self) -> Location:
        """An indicator of where this resource's data comes from. This is
        not guaranteed to be unique: in-memory resources all report the same
        value for their type.

        """

    @abstractmethod
    def exists(self) -> bool:
        """Check whether the resource's data exists. Errors encountered while
        checking are treated as the resource not existing.

        """

    @abstractmethod
    def open(self) -> IO[bytes]:
        """Open a binary stream over the resource's data.

        The caller owns the returned stream and must close it.

        """
