"""Byte sequence validity checks."""

from __future__ import annotations


def decodes_cleanly(data: bytes, codec: str) -> bool:
    """Return ``True`` if *data* decodes under *codec* without errors.

    :param data: The raw byte data to test.
    :param codec: A Python codec name.
    """
    try:
        data.decode(codec, errors="strict")
    except (UnicodeDecodeError, LookupError):
        return False
    return True


def decode_byte(byte: int, codec: str) -> str | None:
    """Decode a single byte, or return ``None`` if *codec* leaves it undefined."""
    try:
        return bytes([byte]).decode(codec)
    except UnicodeDecodeError:
        return None


def distinguishing_bytes(codec: str, reference_codec: str) -> frozenset[int]:
    """High bytes that *codec* decodes differently from *reference_codec*.

    Computed as::

        {b for b in range(0x80, 0x100)
         if bytes([b]).decode(codec) != bytes([b]).decode(reference_codec)}

    with undefined bytes treated as distinct from every character.
    """
    return frozenset(
        b
        for b in range(0x80, 0x100)
        if decode_byte(b, codec) != decode_byte(b, reference_codec)
    )
