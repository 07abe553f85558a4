# intstream/logic.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict

MAX_BYTES = 16

BYTE_ORDERS: Dict[str, str] = {"le": "little", "be": "big"}


@dataclass(frozen=True)
class IntKind:
    name: str
    size: int
    signed: bool

    @property
    def bits(self) -> int:
        return self.size * 8

    @property
    def min(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1


INT_KINDS: Dict[str, IntKind] = {
    k.name: k
    for k in (
        IntKind("u8", 1, False),
        IntKind("i8", 1, True),
        IntKind("u16", 2, False),
        IntKind("i16", 2, True),
        IntKind("u32", 4, False),
        IntKind("i32", 4, True),
        IntKind("u64", 8, False),
        IntKind("i64", 8, True),
        IntKind("u128", 16, False),
        IntKind("i128", 16, True),
    )
}


# ---------------- Lookups ----------------
def int_kind(kind: str | IntKind) -> IntKind:
    if isinstance(kind, IntKind):
        return kind
    try:
        return INT_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown integer kind: {kind!r}") from None

def byteorder_for(order: str) -> str:
    """Map ``le``/``be`` (or ``little``/``big``) to the name ``int.to_bytes`` wants."""
    if order in ("little", "big"):
        return order
    try:
        return BYTE_ORDERS[order]
    except KeyError:
        raise ValueError("order must be 'le' or 'be'") from None


# ---------------- Value logic ----------------
def int_to_bytes(val: int, kind: str | IntKind, order: str = "le") -> bytes:
    """Serialize ``val`` into exactly ``kind.size`` bytes.

    Signed kinds use two's complement. The byte order is ignored for
    single-byte kinds.
    """
    k = int_kind(kind)
    endian = byteorder_for(order)
    if not (k.min <= val <= k.max):
        raise ValueError(f"Value out of range for {k.name}: {val}")
    return val.to_bytes(k.size, byteorder=endian, signed=k.signed)

def bytes_to_int(b: bytes, kind: str | IntKind, order: str = "le") -> int:
    """Reinterpret ``b`` as an integer of ``kind``.

    ``b`` is treated as the leading positions of a zero-filled buffer of
    the kind's size, so short input decodes with zero trailing bytes.
    """
    k = int_kind(kind)
    endian = byteorder_for(order)
    if len(b) > k.size:
        raise ValueError(f"{k.name} takes at most {k.size} bytes, got {len(b)}")
    if len(b) < k.size:
        b = bytes(b) + bytes(k.size - len(b))
    return int.from_bytes(b, byteorder=endian, signed=k.signed)


# ---------------- Text parsing ----------------
_HEX_SEP = re.compile(r"[\s,_]+")
_HEX_BYTE = re.compile(r"[0-9A-Fa-f]{1,2}")

def parse_hex_bytes(text: str, limit: int = MAX_BYTES) -> bytes:
    """Parse ``"04 03 02 01"``, ``"0x04,0x03"`` or ``"04030201"`` into at most ``limit`` bytes.

    Separated tokens may be a single nibble; a lone run of digits is split in pairs.
    """
    tokens = [t[2:] if t[:2].lower() == "0x" else t for t in _HEX_SEP.split(text.strip()) if t]
    if len(tokens) == 1 and len(tokens[0]) > 2:
        run = tokens[0]
        if len(run) % 2:
            raise ValueError("Continuous hex string must have an even number of digits.")
        tokens = [run[i:i + 2] for i in range(0, len(run), 2)]

    out = bytearray()
    for tok in tokens:
        if not _HEX_BYTE.fullmatch(tok):
            raise ValueError(f"Invalid hex byte: {tok!r}")
        out.append(int(tok, 16))
    if len(out) > limit:
        raise ValueError(f"Expected at most {limit} bytes, got {len(out)}.")
    return bytes(out)

def parse_int(text: str, kind: str | IntKind | None = None) -> int:
    """Parse decimal or 0x/0b/0o-prefixed text; check it fits ``kind`` when given."""
    try:
        val = int(text.strip(), 0)
    except ValueError:
        raise ValueError(f"Not a number: {text!r}") from None
    if kind is not None:
        k = int_kind(kind)
        if not (k.min <= val <= k.max):
            raise ValueError(f"{val} does not fit {k.name} [{k.min}, {k.max}]")
    return val
