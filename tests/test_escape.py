# tests/test_escape.py
"""Tests for ISO-2022 escape-sequence recognition."""

from __future__ import annotations

from chardetect.pipeline import ScanContext
from chardetect.pipeline.escape import (
    ISO_2022_CN_ESCAPES,
    ISO_2022_JP_ESCAPES,
    ISO_2022_KR_ESCAPES,
    EscapeRecognizer,
    score_escapes,
)


def test_iso_2022_jp_two_escapes() -> None:
    data = b"Hello \x1b$B$3$s$K$A$O\x1b(B World"
    # Two hits and no shifts: 100 less 10 for each missing piece of evidence.
    assert score_escapes(data, ISO_2022_JP_ESCAPES) == 70


def test_iso_2022_jp_many_escapes() -> None:
    data = b"\x1b$B$3\x1b(B a \x1b$B$s\x1b(B b \x1b$B$K\x1b(B"
    assert score_escapes(data, ISO_2022_JP_ESCAPES) == 100


def test_iso_2022_kr_header_and_shifts() -> None:
    data = b"\x1b$)C\x0e\x3e\x48\x0f"
    assert score_escapes(data, ISO_2022_KR_ESCAPES) == 80


def test_iso_2022_cn() -> None:
    data = b"\x1b$)A\x0e\x3c\x4f\x0f"
    assert score_escapes(data, ISO_2022_CN_ESCAPES) == 80
    assert score_escapes(data, ISO_2022_JP_ESCAPES) == 0
    assert score_escapes(data, ISO_2022_KR_ESCAPES) == 0


def test_unknown_escapes_count_as_misses() -> None:
    data = b"\x1b$B$3\x1b(B\x1bZ\x1bZ\x1b$B\x1b(B"
    # 4 hits, 2 misses: (400 - 200) / 6 = 33, less 10 for thin evidence.
    assert score_escapes(data, ISO_2022_JP_ESCAPES) == 23


def test_only_misses_scores_zero() -> None:
    assert score_escapes(b"\x1bZ\x1bZ", ISO_2022_JP_ESCAPES) == 0


def test_no_escape() -> None:
    assert score_escapes(b"plain ascii", ISO_2022_JP_ESCAPES) == 0


def test_recognizer_match() -> None:
    recognizer = EscapeRecognizer("ISO-2022-JP", "ja", ISO_2022_JP_ESCAPES)
    result = recognizer.match("こんにちは".encode("iso2022_jp"), ScanContext())
    assert result is not None
    assert result.name == "ISO-2022-JP"
    assert result.language == "ja"
    assert result.confidence > 0


def test_recognizer_without_esc() -> None:
    recognizer = EscapeRecognizer("ISO-2022-KR", "ko", ISO_2022_KR_ESCAPES)
    assert recognizer.match(b"\x0e\x0f", ScanContext()) is None
