# intstream/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Sequence

from . import __version__
from .logic import (
    INT_KINDS,
    int_kind,
    parse_hex_bytes,
    parse_int,
)
from .streams import BinaryReader, BinaryWriter


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _as_bin_per_byte(data: bytes) -> list[str]:
    return [f"{b:08b}" for b in data]

def _op_name(prefix: str, kind: str, endian: str) -> str:
    """Name of the reader/writer method for ``kind``, e.g. ``read_u32_le``."""
    if int_kind(kind).size == 1:
        return f"{prefix}_{kind}"
    return f"{prefix}_{kind}_{endian}"


# ---------- subcommands ----------
def cmd_encode(args: argparse.Namespace) -> int:
    val = parse_int(args.value, args.type)
    writer = BinaryWriter()
    written = getattr(writer, _op_name("write", args.type, args.endian))(val)
    data = writer.getvalue()

    _print_kv("Bytes", " ".join(f"{b:02X}" for b in data))
    _print_kv("Binary", _as_bin_per_byte(data))
    _print_kv("Written", str(written))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    src = args.hex if args.hex is not None else sys.stdin.read()
    kind = int_kind(args.type)
    data = parse_hex_bytes(src, limit=kind.size)

    reader = BinaryReader(data, exact=args.exact)
    val = getattr(reader, _op_name("read", args.type, args.endian))()

    _print_kv("Bytes", " ".join(f"{b:02X}" for b in data))
    _print_kv("Consumed", f"{reader.tell()}/{kind.size}")
    _print_kv("Value", str(val))
    _print_kv("Hex", hex(val & ((1 << kind.bits) - 1)))
    return 0


def cmd_kinds(args: argparse.Namespace) -> int:
    for name, kind in INT_KINDS.items():
        lo, hi = kind.min, kind.max
        orders = "-" if kind.size == 1 else "le be"
        print(f"{name:<5} {kind.bits:>3} bits  {orders:<5}  [{lo}, {hi}]")
    return 0


# ---------- parser ----------
def _add_kind_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--type", choices=tuple(INT_KINDS), default="u32",
        help="integer kind (default: u32)"
    )
    p.add_argument(
        "--endian", choices=("le", "be"), default="le",
        help="byte order, ignored for 8-bit kinds (default: le)"
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="intstream",
        description="Read and write fixed-width integers as raw bytes"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sp = p.add_subparsers(dest="cmd")

    # encode
    pe = sp.add_parser("encode", help="write a number and show the bytes")
    pe.add_argument("value", help="number (dec or 0x… / 0b… / 0o…)")
    _add_kind_args(pe)
    pe.set_defaults(func=cmd_encode)

    # decode
    pd = sp.add_parser("decode", help="read a number from hex bytes")
    pd.add_argument("hex", nargs="?", help="hex like '04 03 02 01' or '04030201'")
    _add_kind_args(pd)
    pd.add_argument(
        "--exact", action="store_true",
        help="fail on short input instead of zero-padding"
    )
    pd.set_defaults(func=cmd_decode)

    # kinds
    pk = sp.add_parser("kinds", help="list supported integer kinds")
    pk.set_defaults(func=cmd_kinds)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (ValueError, EOFError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
