"""Internal shared utilities for chardetect."""

from __future__ import annotations

import re

from chardetect.errors import HostIntegrationError

#: Default maximum number of bytes to examine during detection.
DEFAULT_MAX_BYTES: int = 200_000

#: Charset reported when no recognizer has an opinion.
DEFAULT_CHARSET: str = "ISO-8859-1"

_NAME_PUNCTUATION = re.compile(r"[-_\s]")


def normalize_charset_name(name: str) -> str:
    """Fold *name* for comparison: lower case, no dashes, underscores or spaces."""
    return _NAME_PUNCTUATION.sub("", name.lower())


def is_utf8_name(name: str) -> bool:
    """Return ``True`` if *name* is one of the spellings of UTF-8."""
    return normalize_charset_name(name) == "utf8"


def _validate_buffer(byte_str: object) -> bytes:
    """Return *byte_str* as :class:`bytes`, or raise if it is not a byte buffer."""
    if isinstance(byte_str, bytes):
        return byte_str
    if isinstance(byte_str, (bytearray, memoryview)):
        return bytes(byte_str)
    msg = f"expected a bytes-like buffer, got {type(byte_str).__name__}"
    raise HostIntegrationError(msg)


def _validate_force(force: object) -> bool:
    """Raise :class:`HostIntegrationError` if *force* is not a bool."""
    if not isinstance(force, bool):
        msg = f"force must be a bool, got {type(force).__name__}"
        raise HostIntegrationError(msg)
    return force


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)
