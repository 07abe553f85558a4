# intstream/__init__.py

"""intstream package.

Re-exports the readers, writers and byte-order helpers for convenient imports.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .logic import (
    MAX_BYTES,
    BYTE_ORDERS,
    INT_KINDS,
    IntKind,
    byteorder_for,
    bytes_to_int,
    int_kind,
    int_to_bytes,
    parse_hex_bytes,
    parse_int,
)

from .streams import (
    BinaryReader,
    BinaryStream,
    BinaryWriter,
    ShortReadError,
    StreamWrapper,
    read_int,
    write_int,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Logic
    "MAX_BYTES", "BYTE_ORDERS", "INT_KINDS", "IntKind",
    "byteorder_for", "bytes_to_int", "int_kind", "int_to_bytes",
    "parse_hex_bytes", "parse_int",
    # Streams
    "BinaryReader", "BinaryStream", "BinaryWriter", "ShortReadError", "StreamWrapper",
    "read_int", "write_int",
]
