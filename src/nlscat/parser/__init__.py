"""
nlscat.parser - Catalog File Parser

Escape decoding and the line-oriented catalog source format.
"""

from nlscat.parser.escapes import decode_escapes, encode_escapes, State, Action
from nlscat.parser.catalog_file import (
    Message,
    Catalog,
    iter_logical_lines,
    parse_message_line,
    parse_catalog_source,
    load_catalog,
)

__all__ = [
    # Escapes
    "decode_escapes",
    "encode_escapes",
    "State",
    "Action",
    # Catalog files
    "Message",
    "Catalog",
    "iter_logical_lines",
    "parse_message_line",
    "parse_catalog_source",
    "load_catalog",
]
