"""Test the supported charsets table generator."""

from __future__ import annotations

import pytest

from chardetect.registry import REGISTRY, lookup_charset
from generate_encoding_table import group_of, main


def test_group_of() -> None:
    assert group_of(lookup_charset("UTF-16LE")) == "unicode"
    assert group_of(lookup_charset("Shift_JIS")) == "multibyte"
    assert group_of(lookup_charset("KOI8-R")) == "singlebyte"


def test_every_charset_listed(capsys: pytest.CaptureFixture[str]) -> None:
    main()
    out = capsys.readouterr().out
    for info in REGISTRY:
        assert f"   * - {info.name}\n" in out


def test_detected_column(capsys: pytest.CaptureFixture[str]) -> None:
    main()
    lines = capsys.readouterr().out.splitlines()
    koi8u = lines.index("   * - KOI8-U")
    assert lines[koi8u + 3] == "     - No"
    koi8r = lines.index("   * - KOI8-R")
    assert lines[koi8r + 3] == "     - Yes"
