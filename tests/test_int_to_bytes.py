# tests/test_int_to_bytes.py
import pytest

KINDS = ["u8", "i8", "u16", "i16", "u32", "i32", "u64", "i64", "u128", "i128"]


@pytest.mark.parametrize("order", ["le", "be"])
@pytest.mark.parametrize("kind", KINDS)
def test_boundaries_roundtrip(logic, kind, order):
    k = logic.int_kind(kind)
    lo, hi = k.min, k.max
    for val in {lo, 0, 1, hi} | ({-1} if k.signed else set()):
        b = logic.int_to_bytes(val, kind, order)
        assert len(b) == k.size
        assert logic.bytes_to_int(b, kind, order) == val


@pytest.mark.parametrize("order", ["le", "be"])
@pytest.mark.parametrize("kind", KINDS)
def test_out_of_range(logic, kind, order):
    k = logic.int_kind(kind)
    lo, hi = k.min, k.max
    with pytest.raises(ValueError):
        logic.int_to_bytes(lo - 1, kind, order)
    with pytest.raises(ValueError):
        logic.int_to_bytes(hi + 1, kind, order)


def test_u32_layout(logic):
    assert logic.int_to_bytes(0x01020304, "u32", "le") == bytes([0x04, 0x03, 0x02, 0x01])
    assert logic.int_to_bytes(0x01020304, "u32", "be") == bytes([0x01, 0x02, 0x03, 0x04])


def test_single_byte_ignores_order(logic):
    assert logic.int_to_bytes(0xAB, "u8", "le") == logic.int_to_bytes(0xAB, "u8", "be") == b"\xab"
    assert logic.int_to_bytes(-1, "i8") == b"\xff"


def test_bytes_to_int_pads_trailing_positions(logic):
    assert logic.bytes_to_int(b"\x01\x02", "u32", "le") == 0x0201
    assert logic.bytes_to_int(b"\x01\x02", "u32", "be") == 0x01020000
    assert logic.bytes_to_int(b"", "i16", "le") == 0


def test_bytes_to_int_too_long(logic):
    with pytest.raises(ValueError):
        logic.bytes_to_int(b"\x00" * 3, "u16", "le")


def test_kind_table(logic):
    assert set(logic.INT_KINDS) == set(KINDS)
    assert logic.int_kind("i128").bits == 128
    assert logic.int_kind(logic.INT_KINDS["u16"]) is logic.INT_KINDS["u16"]


@pytest.mark.parametrize("bad", ["u24", "int", ""])
def test_unknown_kind(logic, bad):
    with pytest.raises(ValueError):
        logic.int_kind(bad)


def test_byteorder_for(logic):
    assert logic.byteorder_for("le") == "little"
    assert logic.byteorder_for("be") == "big"
    assert logic.byteorder_for("big") == "big"
    with pytest.raises(ValueError):
        logic.byteorder_for("native")
