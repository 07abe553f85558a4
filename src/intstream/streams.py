# intstream/streams.py

"""Fixed-width integer readers and writers over raw byte streams.

Every write performs exactly one ``write()`` on the sink and returns its
result unchanged, so a partial write is reported as such and never retried.

Every read allocates a zero-filled buffer and performs exactly one
``readinto()`` on the source. The returned count is not checked: a short
read leaves the trailing positions at zero and they are decoded as part of
the value. Pass ``exact=True`` to loop until the buffer is full and raise
``EOFError`` (or ``ShortReadError``) when the stream ends first. In that
mode a non-blocking source with no data raises ``BlockingIOError`` whose
``characters_written`` is the number of bytes already in the buffer.

Sockets are wrapped unbuffered, so the one-call rule holds for them too.
"""

from __future__ import annotations

import errno
import io
import logging

from .logic import byteorder_for, bytes_to_int, int_kind, int_to_bytes

logger = logging.getLogger(__name__)


class ShortReadError(EOFError):
    """The stream ended after some, but not all, bytes of a value."""

    def __init__(self, got: int, expected: int):
        super().__init__("Hit EOF after %d/%d bytes" % (got, expected))
        self.got = got
        self.expected = expected


def _readinto_exact(source, buf: bytearray) -> None:
    size = len(buf)
    got = 0
    with memoryview(buf) as view:
        while got < size:
            n = source.readinto(view[got:])
            if n is None:
                raise BlockingIOError(
                    errno.EAGAIN, "source would block after %d/%d bytes" % (got, size), got
                )
            if n == 0:
                if got == 0:
                    raise EOFError("Hit EOF after 0/%d bytes" % size)
                raise ShortReadError(got, size)
            got += n


def write_int(sink, value: int, kind, order: str = "le"):
    """Write ``value`` as ``kind`` to ``sink`` with a single ``write()`` call.

    Returns whatever the sink's ``write()`` returned.
    """
    k = int_kind(kind)
    data = int_to_bytes(value, k, order)
    written = sink.write(data)
    if written is not None and written < k.size:
        logger.debug("short write of %s: %d/%d bytes", k.name, written, k.size)
    return written


def read_int(source, kind, order: str = "le", exact: bool = False) -> int:
    """Read one ``kind`` integer from ``source``.

    By default ``readinto()`` is called exactly once and a short read is
    zero-padded silently.
    """
    k = int_kind(kind)
    byteorder_for(order)
    buf = bytearray(k.size)
    if exact:
        _readinto_exact(source, buf)
    else:
        n = source.readinto(buf)
        if n is None or n < k.size:
            logger.debug("short read of %s: %s/%d bytes", k.name, n, k.size)
    return bytes_to_int(buf, k, order)


class StreamWrapper():
    def __init__(self, fh=b""):
        if isinstance(fh, bytes) or isinstance(fh, bytearray):
            self.fh = io.BytesIO(fh)
        elif hasattr(fh, "makefile"):
            # unbuffered SocketIO: one recv_into / send per call
            self.fh = fh.makefile("rwb", buffering=0)
        else:
            self.fh = fh

    def seek(self, pos, whence=0):
        return self.fh.seek(pos, whence)

    def tell(self):
        return self.fh.tell()

    def readinto(self, buf):
        return self.fh.readinto(buf)

    def write(self, buf):
        return self.fh.write(buf)

    def flush(self):
        return self.fh.flush()

    def getvalue(self) -> bytes:
        if not hasattr(self.fh, "getvalue"):
            raise io.UnsupportedOperation(
                "getvalue() needs an in-memory stream, not %s" % type(self.fh).__name__
            )
        return self.fh.getvalue()


class BinaryReader(StreamWrapper):
    def __init__(self, fh=b"", exact=False):
        super().__init__(fh)
        self.exact = exact

    def _read_kind(self, kind, order="le"):
        return read_int(self.fh, kind, order, exact=self.exact)

    def read_u8(self):
        return self._read_kind("u8")

    def read_i8(self):
        return self._read_kind("i8")

    def read_u16_le(self):
        return self._read_kind("u16", "le")

    def read_u16_be(self):
        return self._read_kind("u16", "be")

    def read_i16_le(self):
        return self._read_kind("i16", "le")

    def read_i16_be(self):
        return self._read_kind("i16", "be")

    def read_u32_le(self):
        return self._read_kind("u32", "le")

    def read_u32_be(self):
        return self._read_kind("u32", "be")

    def read_i32_le(self):
        return self._read_kind("i32", "le")

    def read_i32_be(self):
        return self._read_kind("i32", "be")

    def read_u64_le(self):
        return self._read_kind("u64", "le")

    def read_u64_be(self):
        return self._read_kind("u64", "be")

    def read_i64_le(self):
        return self._read_kind("i64", "le")

    def read_i64_be(self):
        return self._read_kind("i64", "be")

    def read_u128_le(self):
        return self._read_kind("u128", "le")

    def read_u128_be(self):
        return self._read_kind("u128", "be")

    def read_i128_le(self):
        return self._read_kind("i128", "le")

    def read_i128_be(self):
        return self._read_kind("i128", "be")


class BinaryWriter(StreamWrapper):
    def _write_kind(self, kind, order, val):
        return write_int(self.fh, val, kind, order)

    def write_u8(self, val):
        return self._write_kind("u8", "le", val)

    def write_i8(self, val):
        return self._write_kind("i8", "le", val)

    def write_u16_le(self, val):
        return self._write_kind("u16", "le", val)

    def write_u16_be(self, val):
        return self._write_kind("u16", "be", val)

    def write_i16_le(self, val):
        return self._write_kind("i16", "le", val)

    def write_i16_be(self, val):
        return self._write_kind("i16", "be", val)

    def write_u32_le(self, val):
        return self._write_kind("u32", "le", val)

    def write_u32_be(self, val):
        return self._write_kind("u32", "be", val)

    def write_i32_le(self, val):
        return self._write_kind("i32", "le", val)

    def write_i32_be(self, val):
        return self._write_kind("i32", "be", val)

    def write_u64_le(self, val):
        return self._write_kind("u64", "le", val)

    def write_u64_be(self, val):
        return self._write_kind("u64", "be", val)

    def write_i64_le(self, val):
        return self._write_kind("i64", "le", val)

    def write_i64_be(self, val):
        return self._write_kind("i64", "be", val)

    def write_u128_le(self, val):
        return self._write_kind("u128", "le", val)

    def write_u128_be(self, val):
        return self._write_kind("u128", "be", val)

    def write_i128_le(self, val):
        return self._write_kind("i128", "le", val)

    def write_i128_be(self, val):
        return self._write_kind("i128", "be", val)


class BinaryStream(BinaryReader, BinaryWriter):
    pass
