"""
Catalog error types.

Every error carries an ``errno`` value so the POSIX-shaped wrappers
(catopen/catgets/catclose) can report the same codes the C library does.
"""

import errno as _errno
from typing import List, Optional


class CatalogError(Exception):
    """Base class for message catalog errors."""
    errno = _errno.EINVAL


class EmptyCatalogNameError(CatalogError):
    """No catalog name was given to open."""
    errno = _errno.ENOENT

    def __init__(self):
        super().__init__("Catalog name is empty")


class CatalogNotFoundError(CatalogError):
    """A catalog file could not be opened for reading."""
    errno = _errno.ENOENT

    def __init__(self, name: str, tried: Optional[List[str]] = None, os_errno: Optional[int] = None):
        self.name = name
        self.tried = list(tried) if tried else []
        if os_errno is not None:
            self.errno = os_errno
        if len(self.tried) > 1:
            super().__init__(f"Catalog {name!r} not found (tried {len(self.tried)} paths)")
        else:
            super().__init__(f"Catalog {name!r} not found")


class InvalidDescriptorError(CatalogError):
    """The descriptor is out of range or refers to a closed catalog."""
    errno = _errno.EBADF

    def __init__(self, descriptor: int):
        self.descriptor = descriptor
        super().__init__(f"Bad catalog descriptor: {descriptor}")


class MessageNotFoundError(CatalogError, KeyError):
    """The catalog is open but has no message with the requested key."""
    errno = getattr(_errno, "ENOMSG", _errno.ENOENT)

    def __init__(self, descriptor: int, set_id: int, msg_id: int):
        self.descriptor = descriptor
        self.set_id = set_id
        self.msg_id = msg_id
        super().__init__(f"No message {set_id}:{msg_id} in catalog {descriptor}")

    def __str__(self):
        return self.args[0]
