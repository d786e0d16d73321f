# tests/test_errors.py
from __future__ import annotations

import pytest

from chardetect.errors import (
    ChardetectError,
    HostIntegrationError,
    IllegalSequence,
    UnsupportedCharset,
)


def test_unsupported_charset_is_lookup_error():
    err = UnsupportedCharset("ISO-2022-CN")
    assert isinstance(err, ChardetectError)
    assert isinstance(err, LookupError)
    assert err.charset == "ISO-2022-CN"
    assert "ISO-2022-CN" in str(err)


def test_illegal_sequence_carries_position():
    err = IllegalSequence("Shift_JIS", 7, "illegal multibyte sequence")
    assert isinstance(err, ValueError)
    assert err.charset == "Shift_JIS"
    assert err.position == 7
    assert err.reason == "illegal multibyte sequence"
    assert "offset 7" in str(err)


def test_host_integration_error_is_type_error():
    with pytest.raises(TypeError):
        raise HostIntegrationError("bad argument")
