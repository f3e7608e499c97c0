"""
Message Catalogs

MessageCatalogs ties the pieces together: resolve a name to candidate
files, load the first that opens, register it, and serve lookups by
descriptor.

    catalogs = MessageCatalogs()
    catd = catalogs.open("myprog", NL_CAT_LOCALE)
    text = catalogs.get(catd, 1, 3, b"default text")
    catalogs.close(catd)

The module also provides POSIX-shaped catopen/catgets/catclose functions
backed by one default MessageCatalogs. They never raise for catalog errors;
they return -1 or the default text and record the error code for
last_errno().
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, Union

from nlscat.config import NlsConfig, get_config
from nlscat.errors import (
    CatalogError,
    CatalogNotFoundError,
    EmptyCatalogNameError,
    InvalidDescriptorError,
    MessageNotFoundError,
)
from nlscat.parser.catalog_file import load_catalog
from nlscat.registry import CatalogRegistry
from nlscat.resolver.search_path import candidate_paths

logger = logging.getLogger(__name__)

Text = Union[bytes, str, None]


class LookupStatus(Enum):
    """Outcome of a message lookup."""
    FOUND = auto()
    NOT_FOUND = auto()        # catalog open, key absent
    BAD_DESCRIPTOR = auto()   # descriptor out of range or closed


@dataclass(frozen=True)
class LookupResult:
    """The text to use plus why it was chosen."""
    text: Text
    status: LookupStatus
    errno: int = 0

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class MessageCatalogs:
    """
    A set of open message catalogs addressed by descriptor.

    open, lookup and close share one lock, so a lookup never sees a slot
    mid-update and close never runs during a lookup on the same descriptor.
    File loading happens outside the lock.
    """

    def __init__(self, config: Optional[NlsConfig] = None):
        self._config = config
        self._registry = CatalogRegistry()
        self._lock = threading.RLock()

    @property
    def config(self) -> NlsConfig:
        if self._config is None:
            self._config = get_config()
        return self._config

    def open(self, name: str, flags: int = 0) -> int:
        """
        Open catalog name and return its descriptor.

        Raises:
            EmptyCatalogNameError: name is None or empty
            CatalogNotFoundError: no candidate path could be read
        """
        if not name:
            raise EmptyCatalogNameError()

        tried: List[str] = []
        last_errno = None
        for path in candidate_paths(name, flags, self.config):
            tried.append(path)
            try:
                catalog = load_catalog(path)
            except CatalogNotFoundError as e:
                logger.debug(f"Catalog {name!r}: {path} not readable (errno {e.errno})")
                last_errno = e.errno
                continue

            with self._lock:
                descriptor = self._registry.open(catalog)
            logger.info(f"Opened catalog {path} as descriptor {descriptor} ({len(catalog)} messages)")
            return descriptor

        raise CatalogNotFoundError(name, tried, os_errno=last_errno)

    def lookup(self, descriptor: int, set_id: int, msg_id: int, default: Text = None) -> LookupResult:
        """Look up a message, falling back to default with a status explaining why."""
        with self._lock:
            try:
                catalog = self._registry.get(descriptor)
            except InvalidDescriptorError as e:
                logger.debug(str(e))
                return LookupResult(default, LookupStatus.BAD_DESCRIPTOR, e.errno)
            message = catalog.find(set_id, msg_id)

        if message is None:
            logger.debug(f"No message {set_id}:{msg_id} in catalog {descriptor}")
            return LookupResult(default, LookupStatus.NOT_FOUND, MessageNotFoundError.errno)
        return LookupResult(message.text, LookupStatus.FOUND)

    def get(self, descriptor: int, set_id: int, msg_id: int, default: Text = None) -> Text:
        """Return the message text, or default if it cannot be found."""
        return self.lookup(descriptor, set_id, msg_id, default).text

    def require(self, descriptor: int, set_id: int, msg_id: int) -> bytes:
        """
        Return the message text or raise.

        Raises:
            InvalidDescriptorError, MessageNotFoundError
        """
        with self._lock:
            message = self._registry.get(descriptor).find(set_id, msg_id)
        if message is None:
            raise MessageNotFoundError(descriptor, set_id, msg_id)
        return message.text

    def close(self, descriptor: int) -> None:
        """
        Close the catalog. Its descriptor may be handed out again by open.

        Raises:
            InvalidDescriptorError: descriptor is not open
        """
        with self._lock:
            self._registry.close(descriptor)
        logger.info(f"Closed catalog descriptor {descriptor}")

    def is_open(self, descriptor: int) -> bool:
        with self._lock:
            return self._registry.is_valid(descriptor)

    def open_descriptors(self) -> List[int]:
        with self._lock:
            return self._registry.open_descriptors()

    @contextmanager
    def opened(self, name: str, flags: int = 0) -> Iterator[int]:
        """Open a catalog for the duration of a with-block."""
        descriptor = self.open(name, flags)
        with self._lock:
            catalog = self._registry.get(descriptor)
        try:
            yield descriptor
        finally:
            with self._lock:
                # The body may have closed it and the slot been reused
                if self._registry.is_valid(descriptor) and self._registry.get(descriptor) is catalog:
                    self.close(descriptor)


# =============================================================================
# POSIX-style interface
# =============================================================================

_default_catalogs: Optional[MessageCatalogs] = None
_last_errno = 0


def get_default_catalogs() -> MessageCatalogs:
    """The MessageCatalogs behind catopen/catgets/catclose (created on first use)."""
    global _default_catalogs
    if _default_catalogs is None:
        _default_catalogs = MessageCatalogs()
    return _default_catalogs


def reset_default_catalogs(config: Optional[NlsConfig] = None) -> MessageCatalogs:
    """Replace the default MessageCatalogs, dropping every descriptor it issued."""
    global _default_catalogs, _last_errno
    _default_catalogs = MessageCatalogs(config)
    _last_errno = 0
    return _default_catalogs


def last_errno() -> int:
    """errno value recorded by the last failing catopen/catgets/catclose."""
    return _last_errno


def _set_errno(value: int) -> None:
    global _last_errno
    _last_errno = value


def catopen(name: str, flags: int = 0) -> int:
    """Open a catalog. Returns its descriptor, or -1 on failure."""
    try:
        return get_default_catalogs().open(name, flags)
    except CatalogError as e:
        _set_errno(e.errno)
        return -1


def catgets(catd: int, set_id: int, msg_id: int, s: Text = None) -> Text:
    """Return message (set_id, msg_id) from catalog catd, or s."""
    result = get_default_catalogs().lookup(catd, set_id, msg_id, s)
    if not result.found:
        _set_errno(result.errno)
    return result.text


def catclose(catd: int) -> int:
    """Close a catalog. Returns 0, or -1 for a bad descriptor."""
    try:
        get_default_catalogs().close(catd)
    except CatalogError as e:
        _set_errno(e.errno)
        return -1
    return 0
