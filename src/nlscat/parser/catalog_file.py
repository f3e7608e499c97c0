"""
Message Catalog File Parser

Parses the line-oriented catalog source format:

    $ comment lines start with anything but a digit
    1 1 Hello, world
    1 2 Two-line \\
        message continued here
    2 5 \\x48\\x69

A message line is <set_id><delim><msg_id><delim><escaped text>. The
delimiter is any single byte. A trailing backslash joins the next physical
line onto the current one. Text stays bytes; no encoding is assumed.
"""

import logging
from bisect import bisect_left
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterator, List, Optional, Tuple, Union

from nlscat.errors import CatalogNotFoundError
from nlscat.parser.escapes import BACKSLASH, DIGITS, decode_escapes

logger = logging.getLogger(__name__)

# Horizontal whitespace trimmed from both ends of every physical line
WHITESPACE = b" \t\f\v\r"


@dataclass(frozen=True)
class Message:
    """A single decoded catalog message."""
    set_id: int
    msg_id: int
    text: bytes
    line: int = 0  # physical line the message started on

    @property
    def key(self) -> Tuple[int, int]:
        return (self.set_id, self.msg_id)


@dataclass
class Catalog:
    """
    A loaded catalog: messages sorted ascending by (set_id, msg_id).

    The sort order is what makes find() a binary search, so the message list
    must only be built through parse_catalog_source() or kept sorted.
    """
    messages: List[Message] = field(default_factory=list)
    is_open: bool = False
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def find(self, set_id: int, msg_id: int) -> Optional[Message]:
        """Binary search for an exact (set_id, msg_id) match."""
        key = (set_id, msg_id)
        i = bisect_left(self.messages, key, key=lambda m: m.key)
        if i < len(self.messages) and self.messages[i].key == key:
            return self.messages[i]
        return None

    def close(self) -> None:
        """Drop all messages and mark the catalog closed."""
        self.messages.clear()
        self.is_open = False


def iter_logical_lines(data: bytes) -> Iterator[Tuple[int, bytes]]:
    """
    Yield (line_number, logical_line) pairs.

    Each physical line is trimmed; a trimmed line ending in a backslash loses
    the backslash and continues onto the next physical line. line_number is
    where the logical line started.
    """
    pending = bytearray()
    start = None

    for line_num, raw in enumerate(data.split(b"\n"), 1):
        stripped = raw.strip(WHITESPACE)
        if start is None:
            start = line_num
        if stripped and stripped[-1] == BACKSLASH:
            pending += stripped[:-1]
            continue
        pending += stripped
        yield start, bytes(pending)
        pending.clear()
        start = None

    # Continuation on the final line
    if start is not None:
        yield start, bytes(pending)


def _read_number(line: bytes, pos: int) -> Tuple[int, int]:
    """Read an unsigned decimal number starting at pos. Returns (value, new_pos)."""
    value = 0
    while pos < len(line) and line[pos] in DIGITS:
        value = value * 10 + (line[pos] - 0x30)
        pos += 1
    return value, pos


def parse_message_line(line: bytes, line_num: int = 0) -> Optional[Message]:
    """
    Parse one logical line. Returns None for lines that do not start with a
    digit (comments, blank lines, directives).
    """
    if not line or line[0] not in DIGITS:
        return None

    set_id, pos = _read_number(line, 0)
    pos += 1  # delimiter, not validated
    msg_id, pos = _read_number(line, pos)
    pos += 1

    return Message(
        set_id=set_id,
        msg_id=msg_id,
        text=decode_escapes(line[pos:]),
        line=line_num,
    )


def parse_catalog_source(data: bytes, filename: str = "<unknown>") -> Catalog:
    """
    Parse catalog source into a sorted Catalog.

    A source with no message lines gives an empty Catalog, never None.
    """
    messages = []
    for line_num, line in iter_logical_lines(data):
        message = parse_message_line(line, line_num)
        if message is not None:
            messages.append(message)

    # Stable sort: among duplicate keys the first declared sorts first and
    # is the one find() returns
    messages.sort(key=lambda m: m.key)

    for prev, cur in zip(messages, messages[1:]):
        if prev.key == cur.key:
            logger.debug(
                f"{filename}:{cur.line}: duplicate message {cur.set_id}:{cur.msg_id} "
                f"(first defined on line {prev.line})"
            )

    return Catalog(messages=messages, is_open=False, source=filename)


def load_catalog(path: Union[str, PathLike]) -> Catalog:
    """
    Load and parse a catalog file.

    Raises:
        CatalogNotFoundError: the file is missing or cannot be read. Callers
            searching a path list treat this as "try the next candidate".
    """
    path = str(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except (OSError, ValueError) as e:
        # ValueError: path the OS cannot represent (embedded NUL)
        raise CatalogNotFoundError(path, tried=[path], os_errno=getattr(e, "errno", None)) from e

    catalog = parse_catalog_source(data, path)
    logger.debug(f"Loaded {len(catalog)} messages from {path}")
    return catalog
