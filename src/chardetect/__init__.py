"""Charset detection and conversion to UTF-8."""

from __future__ import annotations

from chardetect._utils import (
    DEFAULT_MAX_BYTES,
    _validate_buffer,
    _validate_force,
    _validate_max_bytes,
)
from chardetect.convert import decode, encode
from chardetect.diagnostics import Diagnostic, DiagnosticLog
from chardetect.enums import ErrorPolicy, RecognizerKind, Severity
from chardetect.errors import (
    ChardetectError,
    HostIntegrationError,
    IllegalSequence,
    UnsupportedCharset,
)
from chardetect.pipeline.orchestrator import collect_matches, run_detection
from chardetect.table import DEFAULT_TABLE, RecognizerTable
from chardetect.transcoder import ConversionResult, run_transcode

__version__ = "1.0.0"
__all__ = [
    "DEFAULT_TABLE",
    "ChardetectError",
    "ConversionResult",
    "Diagnostic",
    "DiagnosticLog",
    "ErrorPolicy",
    "HostIntegrationError",
    "IllegalSequence",
    "RecognizerKind",
    "RecognizerTable",
    "Severity",
    "UnsupportedCharset",
    "decode",
    "detect",
    "detect_all",
    "encode",
    "transcode",
]


def _resolve_table(table: RecognizerTable | None) -> RecognizerTable:
    return table if table is not None else DEFAULT_TABLE


def detect(
    byte_str: bytes | bytearray,
    *,
    table: RecognizerTable | None = None,
    diagnostics: DiagnosticLog | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> dict[str, str | int | None]:
    """Detect the charset of the given byte string.

    :param byte_str: The byte sequence to examine.
    :param table: Recognizers to consult.  Defaults to :data:`DEFAULT_TABLE`.
    :param diagnostics: Log that receives the no-match warning.
    :param max_bytes: Maximum number of bytes to examine.
    :returns: A dict with ``'encoding'``, ``'language'`` and ``'confidence'``
        keys.  Confidence is an integer from 0 to 100.
    """
    _validate_max_bytes(max_bytes)
    data = _validate_buffer(byte_str)
    match = run_detection(data, _resolve_table(table), diagnostics, max_bytes=max_bytes)
    return match.to_dict()


def detect_all(
    byte_str: bytes | bytearray,
    *,
    table: RecognizerTable | None = None,
    diagnostics: DiagnosticLog | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> list[dict[str, str | int | None]]:
    """Detect all plausible charsets of the given byte string.

    :param byte_str: The byte sequence to examine.
    :param table: Recognizers to consult.  Defaults to :data:`DEFAULT_TABLE`.
    :param diagnostics: Log that receives the no-match warning.
    :param max_bytes: Maximum number of bytes to examine.
    :returns: A list of dicts with ``'encoding'``, ``'language'`` and
        ``'confidence'`` keys, best first.  When nothing matched, the list
        holds only the fallback match that :func:`detect` returns.
    """
    _validate_max_bytes(max_bytes)
    data = _validate_buffer(byte_str)
    table = _resolve_table(table)
    matches = collect_matches(data, table, max_bytes)
    if not matches:
        return [run_detection(data, table, diagnostics, max_bytes).to_dict()]
    return [m.to_dict() for m in matches]


def transcode(
    byte_str: bytes | bytearray,
    force: bool = False,
    *,
    table: RecognizerTable | None = None,
    diagnostics: DiagnosticLog | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> dict[str, bytes | bool | str | None]:
    """Detect the charset of *byte_str* and convert it to UTF-8.

    :param byte_str: The byte sequence to convert.
    :param force: Drop unconvertible bytes instead of giving up.
    :param table: Recognizers to consult.  Defaults to :data:`DEFAULT_TABLE`.
    :param diagnostics: Log that receives debug and warning messages.
    :param max_bytes: Maximum number of bytes examined by detection.
    :returns: A dict with ``'text'``, ``'converted'``, ``'dropped_bytes'``
        and ``'encoding'`` keys.  When ``'converted'`` is false, ``'text'`` is
        the original input.
    :raises HostIntegrationError: If *byte_str* is not bytes-like or
        *force* is not a bool.
    """
    _validate_max_bytes(max_bytes)
    data = _validate_buffer(byte_str)
    result = run_transcode(
        data,
        _validate_force(force),
        _resolve_table(table),
        diagnostics,
        max_bytes=max_bytes,
    )
    return result.to_dict()
