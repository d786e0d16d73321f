# tests/test_table.py
from __future__ import annotations

import dataclasses

import pytest

from chardetect.registry import is_supported
from chardetect.table import DEFAULT_TABLE, RecognizerTable, build_default_table


def test_default_table_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_TABLE.fallback = "UTF-8"  # type: ignore[misc]


def test_default_table_fallback():
    assert DEFAULT_TABLE.fallback == "ISO-8859-1"


def test_recognizers_are_a_tuple():
    assert isinstance(DEFAULT_TABLE.recognizers, tuple)


def test_every_reported_charset_is_convertible_except_iso_2022_cn():
    unsupported = [name for name in DEFAULT_TABLE.charsets if not is_supported(name)]
    assert unsupported == ["ISO-2022-CN"]


def test_charsets_are_unique():
    names = DEFAULT_TABLE.charsets
    assert len(names) == len(set(names))
    assert "KOI8-R" in names
    assert "windows-1252" in names


def test_build_default_table_is_equivalent():
    table = build_default_table()
    assert table.charsets == DEFAULT_TABLE.charsets


def test_empty_table():
    table = RecognizerTable(())
    assert table.charsets == ()
