# tests/test_cli.py
import pytest

from intstream import cli


def test_encode_u32_be(capsys):
    assert cli.main(["encode", "0x01020304", "--type", "u32", "--endian", "be"]) == 0
    out = capsys.readouterr().out
    assert "Bytes: 01 02 03 04" in out
    assert "Written: 4" in out


def test_encode_i16_le_negative(capsys):
    assert cli.main(["encode", "-1", "--type", "i16"]) == 0
    assert "Bytes: FF FF" in capsys.readouterr().out


def test_encode_u8(capsys):
    assert cli.main(["encode", "0xAB", "--type", "u8", "--endian", "be"]) == 0
    out = capsys.readouterr().out
    assert "Bytes: AB" in out
    assert "Binary: 10101011" in out


def test_encode_out_of_range(capsys):
    assert cli.main(["encode", "256", "--type", "u8"]) == 2
    assert "error:" in capsys.readouterr().err


def test_decode_i16(capsys):
    assert cli.main(["decode", "FF 7F", "--type", "i16", "--endian", "le"]) == 0
    out = capsys.readouterr().out
    assert "Value: 32767" in out
    assert "Hex: 0x7fff" in out


def test_decode_short_input_zero_pads(capsys):
    assert cli.main(["decode", "01", "--type", "u32"]) == 0
    out = capsys.readouterr().out
    assert "Consumed: 1/4" in out
    assert "Value: 1" in out


def test_decode_short_input_exact(capsys):
    assert cli.main(["decode", "01", "--type", "u32", "--exact"]) == 2
    assert "Hit EOF after 1/4 bytes" in capsys.readouterr().err


def test_kinds(capsys):
    assert cli.main(["kinds"]) == 0
    out = capsys.readouterr().out
    assert "u128" in out
    assert str(2**127 - 1) in out


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage:" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--version"])
    assert "intstream" in capsys.readouterr().out


def test_decode_rejects_more_bytes_than_kind(capsys):
    assert cli.main(["decode", "01 02 03", "--type", "u16"]) == 2
    assert "at most 2 bytes" in capsys.readouterr().err
