"""Detection orchestrator: run every recognizer and pick the winner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chardetect._utils import DEFAULT_MAX_BYTES
from chardetect.diagnostics import DiagnosticLog
from chardetect.enums import RecognizerKind
from chardetect.pipeline import CharsetMatch, ScanContext

if TYPE_CHECKING:
    from chardetect.table import RecognizerTable


def _rank(entry: tuple[int, CharsetMatch]) -> tuple[int, int, int]:
    order, match = entry
    return (-match.confidence, match.kind, order)


def collect_matches(
    data: bytes, table: RecognizerTable, max_bytes: int = DEFAULT_MAX_BYTES
) -> list[CharsetMatch]:
    """Run every recognizer in *table* over the first *max_bytes* of *data*.

    Ties on confidence go to the higher-priority recognizer kind (BOM, then
    ASCII, then multi-byte, then single-byte), and then to the recognizer
    listed first in the table.

    :returns: Matches with a positive confidence, best first.
    """
    if not data:
        return []
    ctx = ScanContext(truncated=len(data) > max_bytes)
    data = data[:max_bytes]
    found: list[tuple[int, CharsetMatch]] = []
    for order, recognizer in enumerate(table.recognizers):
        match = recognizer.match(data, ctx)
        if match is not None and match.confidence > 0:
            found.append((order, match))
    found.sort(key=_rank)
    return [match for _, match in found]


def run_detection(
    data: bytes,
    table: RecognizerTable,
    diagnostics: DiagnosticLog | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> CharsetMatch:
    """Return the single best :class:`CharsetMatch` for *data*.

    When no recognizer has an opinion the table's fallback charset is
    returned with confidence 0 and a warning is recorded.

    :param data: The raw byte data to examine.
    :param table: The recognizers to consult.
    :param diagnostics: Log that receives the no-match warning.
    :param max_bytes: Maximum number of bytes to examine.
    """
    matches = collect_matches(data, table, max_bytes)
    if matches:
        return matches[0]
    if diagnostics is None:
        diagnostics = DiagnosticLog()
    diagnostics.warning(
        f"No charset match for {len(data)} byte(s) - assuming {table.fallback}."
    )
    return CharsetMatch(table.fallback, None, 0, RecognizerKind.FALLBACK)
