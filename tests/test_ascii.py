# tests/test_ascii.py
from chardetect.enums import RecognizerKind
from chardetect.pipeline.ascii import detect_ascii


def test_pure_ascii_is_utf8():
    result = detect_ascii(b"Hello, world!\r\n\tIndented")
    assert result is not None
    assert result.name == "UTF-8"
    assert result.confidence == 100
    assert result.kind is RecognizerKind.ASCII


def test_high_byte_rejected():
    assert detect_ascii(b"caf\xe9") is None


def test_escape_rejected():
    assert detect_ascii(b"\x1b$B$3$s\x1b(B") is None


def test_shift_bytes_rejected():
    assert detect_ascii(b"abc\x0edef\x0f") is None


def test_nul_rejected():
    assert detect_ascii(b"abc\x00") is None


def test_empty():
    assert detect_ascii(b"") is None
