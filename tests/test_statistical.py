# tests/test_statistical.py
"""Tests for single-byte statistical recognition."""

from __future__ import annotations

import pytest

import chardetect
from chardetect.models import samples
from chardetect.pipeline import ScanContext
from chardetect.pipeline.statistical import (
    SingleByteCharset,
    SingleByteRecognizer,
    native_letter_share,
    score_charset,
)
from chardetect.table import DEFAULT_TABLE

_GERMAN = (
    "Die Größe des Gebäudes überraschte die Besucher. "
    "Natürlich können wir das ändern, wenn es nötig ist."
)
_RUSSIAN = (
    "Привет всем, кто читает этот текст на русском языке. "
    "Жизнь там была спокойной и счастливой."
)


@pytest.mark.parametrize(
    ("text", "codec", "expected"),
    [
        (_GERMAN, "latin-1", "ISO-8859-1"),
        (
            "„Die Größe des Gebäudes überraschte die Besucher“, sagte er. "
            "Natürlich können wir das ändern.",
            "cp1252",
            "windows-1252",
        ),
        (
            "Malý chlapec bydlel se svými rodiči v domě blízko řeky. "
            "Každé ráno chodil do školy.",
            "iso8859_2",
            "ISO-8859-2",
        ),
        (
            "Życie było tam spokojne i szczęśliwe, a wszyscy się znali.",
            "cp1250",
            "windows-1250",
        ),
        (
            "Küçük çocuk ailesiyle birlikte nehrin yakınındaki bir evde yaşıyordu.",
            "iso8859_9",
            "ISO-8859-9",
        ),
        (_RUSSIAN, "cp1251", "windows-1251"),
        (_RUSSIAN, "koi8_r", "KOI8-R"),
        (_RUSSIAN, "iso8859_5", "ISO-8859-5"),
        (
            "Το μικρό αγόρι ζούσε με τους γονείς του σε ένα σπίτι κοντά στο ποτάμι.",
            "iso8859_7",
            "ISO-8859-7",
        ),
        (
            "הילד הקטן גר עם הוריו בבית ליד הנהר. כל בוקר הוא הלך לבית הספר.",
            "iso8859_8",
            "ISO-8859-8",
        ),
    ],
)
def test_detects_single_byte_text(text: str, codec: str, expected: str):
    result = chardetect.detect(text.encode(codec))
    assert result["encoding"] == expected
    assert result["confidence"] > 0


def test_language_is_reported():
    result = chardetect.detect(_GERMAN.encode("latin-1"))
    assert result["language"] == "de"


def test_latin_flag():
    assert SingleByteCharset.build("ISO-8859-1", samples.WESTERN).latin
    assert not SingleByteCharset.build("KOI8-R", samples.CYRILLIC).latin


def test_native_letter_share():
    assert native_letter_share(b" caf\xe9 ") == pytest.approx(0.25)
    assert native_letter_share(b" ") == 0.0


def test_undecodable_data_has_no_opinion():
    charset = SingleByteCharset.build("ISO-8859-6", samples.ARABIC)
    data = "שלום עולם".encode("iso8859_8")
    assert score_charset(data, charset, ScanContext()) is None


def test_niche_penalty_without_distinguishing_bytes():
    data = _GERMAN.encode("latin-1")
    plain = SingleByteCharset.build("ISO-8859-2", samples.CENTRAL_EUROPEAN)
    niche = SingleByteCharset.build(
        "ISO-8859-2", samples.CENTRAL_EUROPEAN, sibling="ISO-8859-1"
    )
    unpenalised = score_charset(data, plain, ScanContext())
    penalised = score_charset(data, niche, ScanContext())
    assert unpenalised is not None
    assert penalised is None or penalised.confidence < unpenalised.confidence


def test_no_penalty_with_distinguishing_bytes():
    data = "Malý chlapec bydlel v domě blízko řeky.".encode("iso8859_2")
    plain = SingleByteCharset.build("ISO-8859-2", samples.CENTRAL_EUROPEAN)
    niche = SingleByteCharset.build(
        "ISO-8859-2", samples.CENTRAL_EUROPEAN, sibling="ISO-8859-1"
    )
    assert score_charset(data, plain, ScanContext()) == score_charset(
        data, niche, ScanContext()
    )


def test_c1_bytes_select_windows_variant():
    recognizer = DEFAULT_TABLE.recognizers[
        next(
            i
            for i, r in enumerate(DEFAULT_TABLE.recognizers)
            if "windows-1252" in r.charsets
        )
    ]
    assert isinstance(recognizer, SingleByteRecognizer)
    iso = recognizer.match(_GERMAN.encode("latin-1"), ScanContext())
    windows = recognizer.match(("“" + _GERMAN + "”").encode("cp1252"), ScanContext())
    assert iso is not None
    assert iso.name == "ISO-8859-1"
    assert windows is not None
    assert windows.name == "windows-1252"


def test_binary_noise_has_no_opinion():
    recognizer = SingleByteRecognizer(
        SingleByteCharset.build("ISO-8859-1", samples.WESTERN)
    )
    assert recognizer.match(bytes(range(0x20)), ScanContext()) is None
