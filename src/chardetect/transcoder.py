"""Detect-then-convert: turn a buffer of unknown charset into UTF-8."""

from __future__ import annotations

import dataclasses

from chardetect._utils import DEFAULT_MAX_BYTES, is_utf8_name
from chardetect.convert import decode, encode
from chardetect.diagnostics import Diagnostic, DiagnosticLog
from chardetect.enums import ErrorPolicy
from chardetect.errors import IllegalSequence, UnsupportedCharset
from chardetect.pipeline.orchestrator import run_detection
from chardetect.table import DEFAULT_TABLE, RecognizerTable


@dataclasses.dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of :func:`run_transcode`.

    When *converted* is ``False``, *text* is the original input, unchanged.
    *encoding* is the detected charset, or ``None`` for empty input.
    """

    text: bytes
    converted: bool
    dropped_bytes: bool
    encoding: str | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_dict(self) -> dict[str, bytes | bool | str | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'text'``, ``'converted'``, ``'dropped_bytes'``
            and ``'encoding'`` keys.
        """
        return {
            "text": self.text,
            "converted": self.converted,
            "dropped_bytes": self.dropped_bytes,
            "encoding": self.encoding,
        }


def run_transcode(
    data: bytes,
    force: bool = False,
    table: RecognizerTable = DEFAULT_TABLE,
    diagnostics: DiagnosticLog | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> ConversionResult:
    """Detect the charset of *data* and convert it to UTF-8.

    Conversion failures never raise: the original input comes back with
    ``converted=False`` and a warning diagnostic.

    :param data: The raw bytes to convert.
    :param force: Drop unconvertible units instead of failing.
    :param table: The recognizers to consult.
    :param diagnostics: Log that receives debug and warning messages.
    :param max_bytes: Maximum number of bytes examined by detection; the
        whole buffer is always converted.
    """
    log = diagnostics if diagnostics is not None else DiagnosticLog()

    if not data:
        return ConversionResult(data, True, False, None, log.entries)

    match = run_detection(data, table, log, max_bytes=max_bytes)
    log.debug(
        f"Detected encoding: {match.name}, language: {match.language}, "
        f"confidence: {match.confidence}"
    )

    if is_utf8_name(match.name):
        log.debug(f"Detected {match.name}.  No conversion necessary.")
        return ConversionResult(data, True, False, match.name, log.entries)

    policy = ErrorPolicy.LOSSY if force else ErrorPolicy.STRICT
    try:
        decoded = decode(data, match.name, policy)
        encoded = encode(decoded.text, policy)
    except (UnsupportedCharset, IllegalSequence, MemoryError) as exc:
        log.warning(f"{match.name}: {exc} - conversion failed, returning original input")
        return ConversionResult(data, False, False, match.name, log.entries)

    dropped = decoded.dropped or encoded.dropped
    if dropped:
        log.debug(f"Dropped unconvertible {match.name} input while converting")
    return ConversionResult(encoded.data, True, dropped, match.name, log.entries)
