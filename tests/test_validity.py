# tests/test_validity.py
from chardetect.pipeline.validity import decode_byte, decodes_cleanly, distinguishing_bytes


def test_decodes_cleanly():
    assert decodes_cleanly("Привет".encode("cp1251"), "cp1251")
    assert not decodes_cleanly(b"\x81", "cp1252")


def test_unknown_codec_is_not_clean():
    assert not decodes_cleanly(b"abc", "x-no-such-codec")


def test_empty_data_is_clean():
    assert decodes_cleanly(b"", "cp1252")


def test_decode_byte():
    assert decode_byte(0xE9, "latin-1") == "é"
    assert decode_byte(0x81, "cp1252") is None


def test_distinguishing_bytes_latin2():
    distinct = distinguishing_bytes("iso8859_2", "latin-1")
    # c with caron vs e with grave
    assert 0xE8 in distinct
    # e with acute is shared
    assert 0xE9 not in distinct
    assert all(b >= 0x80 for b in distinct)


def test_distinguishing_bytes_with_undefined_slots():
    distinct = distinguishing_bytes("cp1252", "cp1250")
    assert 0x81 not in distinct
    assert 0x83 in distinct
