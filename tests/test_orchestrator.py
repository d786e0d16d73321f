# tests/test_orchestrator.py
from __future__ import annotations

import dataclasses

from chardetect.diagnostics import DiagnosticLog
from chardetect.enums import RecognizerKind, Severity
from chardetect.pipeline import CharsetMatch, ScanContext
from chardetect.pipeline.orchestrator import collect_matches, run_detection
from chardetect.table import DEFAULT_TABLE, RecognizerTable


@dataclasses.dataclass(frozen=True)
class _Fixed:
    name: str
    confidence: int
    kind: RecognizerKind = RecognizerKind.SINGLE_BYTE

    @property
    def charsets(self) -> tuple[str, ...]:
        return (self.name,)

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        return CharsetMatch(self.name, None, self.confidence, self.kind)


@dataclasses.dataclass(frozen=True)
class _Length:
    """Reports the number of bytes it was shown, and whether they were cut."""

    kind: RecognizerKind = RecognizerKind.SINGLE_BYTE

    @property
    def charsets(self) -> tuple[str, ...]:
        return ("cut", "whole")

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        name = "cut" if ctx.truncated else "whole"
        return CharsetMatch(name, None, min(100, len(data)), self.kind)


def _table(*recognizers) -> RecognizerTable:
    return RecognizerTable(recognizers)


def test_highest_confidence_wins():
    table = _table(_Fixed("A", 40), _Fixed("B", 70), _Fixed("C", 60))
    assert run_detection(b"data", table).name == "B"


def test_tie_goes_to_higher_priority_kind():
    table = _table(
        _Fixed("single", 50, RecognizerKind.SINGLE_BYTE),
        _Fixed("multi", 50, RecognizerKind.MULTI_BYTE),
    )
    assert run_detection(b"data", table).name == "multi"


def test_bom_beats_everything_on_tie():
    table = _table(
        _Fixed("ascii", 100, RecognizerKind.ASCII),
        _Fixed("bom", 100, RecognizerKind.BOM),
    )
    assert run_detection(b"data", table).name == "bom"


def test_tie_within_kind_goes_to_table_order():
    table = _table(_Fixed("first", 50), _Fixed("second", 50))
    assert run_detection(b"data", table).name == "first"


def test_zero_confidence_is_no_opinion():
    table = _table(_Fixed("zero", 0))
    assert collect_matches(b"data", table) == []


def test_collect_matches_sorted():
    table = _table(_Fixed("A", 10), _Fixed("B", 90), _Fixed("C", 50))
    assert [m.name for m in collect_matches(b"data", table)] == ["B", "C", "A"]


def test_no_match_falls_back_with_warning():
    log = DiagnosticLog()
    result = run_detection(b"data", _table(), log)
    assert result == CharsetMatch("ISO-8859-1", None, 0, RecognizerKind.FALLBACK)
    assert len(log) == 1
    entry = log.entries[0]
    assert entry.severity is Severity.WARNING
    assert "No charset match" in entry.message
    assert "assuming ISO-8859-1" in entry.message


def test_custom_fallback():
    table = RecognizerTable((), fallback="windows-1252")
    assert run_detection(b"data", table).name == "windows-1252"


def test_empty_input_falls_back():
    log = DiagnosticLog()
    result = run_detection(b"", _table(_Fixed("A", 90)), log)
    assert result.name == "ISO-8859-1"
    assert result.confidence == 0
    assert log.warnings()


def test_max_bytes_limits_scan():
    table = _table(_Length())
    result = run_detection(b"a" * 50, table, max_bytes=10)
    assert result.confidence == 10
    assert result.name == "cut"


def test_whole_buffer_is_not_cut():
    table = _table(_Length())
    result = run_detection(b"a" * 50, table, max_bytes=50)
    assert result.confidence == 50
    assert result.name == "whole"


def test_default_table_bom():
    data = b"\xff\xfe" + "Hello world".encode("utf-16-le")
    result = run_detection(data, DEFAULT_TABLE)
    assert result.name == "UTF-16LE"
    assert result.confidence == 100
    assert result.kind is RecognizerKind.BOM


def test_default_table_utf8_bom():
    result = run_detection(b"\xef\xbb\xbfHello", DEFAULT_TABLE)
    assert result.name == "UTF-8"
    assert result.confidence == 100


def test_default_table_ascii():
    result = run_detection(b"Hello world", DEFAULT_TABLE)
    assert result.name == "UTF-8"
    assert result.kind is RecognizerKind.ASCII


def test_default_table_utf8():
    result = run_detection("Héllo wörld café".encode(), DEFAULT_TABLE)
    assert result.name == "UTF-8"
    assert result.confidence == 100
