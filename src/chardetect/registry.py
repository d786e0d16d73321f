"""Registry of the charsets chardetect can report and convert.

Each :class:`CharsetInfo` ties a canonical charset name to the Python codec
that decodes it, the PostgreSQL server encoding of the same repertoire (if
any), and the spellings accepted by :func:`lookup_charset`.
"""

from __future__ import annotations

import dataclasses

from chardetect import _latin1
from chardetect._utils import normalize_charset_name
from chardetect.errors import UnsupportedCharset


@dataclasses.dataclass(frozen=True, slots=True)
class CharsetInfo:
    """Metadata for a single charset."""

    name: str
    python_codec: str
    host_name: str | None
    aliases: tuple[str, ...] = ()
    is_multibyte: bool = False


REGISTRY: tuple[CharsetInfo, ...] = (
    # Unicode
    CharsetInfo("UTF-8", "utf-8", "UTF8", ("UTF8", "Unicode"), is_multibyte=True),
    CharsetInfo("UTF-16BE", "utf-16-be", None, is_multibyte=True),
    CharsetInfo("UTF-16LE", "utf-16-le", None, is_multibyte=True),
    CharsetInfo("UTF-32BE", "utf-32-be", None, is_multibyte=True),
    CharsetInfo("UTF-32LE", "utf-32-le", None, is_multibyte=True),
    # CJK multi-byte.  Shift_JIS decodes with the Windows superset, which is
    # what mislabelled Shift_JIS text almost always is.
    CharsetInfo(
        "Shift_JIS",
        "cp932",
        "SJIS",
        ("SJIS", "Mskanji", "ShiftJIS", "windows-31j", "CP932"),
        is_multibyte=True,
    ),
    CharsetInfo("EUC-JP", "euc_jp", "EUC_JP", is_multibyte=True),
    CharsetInfo("EUC-KR", "euc_kr", "EUC_KR", is_multibyte=True),
    CharsetInfo("GB18030", "gb18030", "GB18030", ("GBK", "CP936"), is_multibyte=True),
    CharsetInfo("Big5", "big5", "BIG5", ("CP950",), is_multibyte=True),
    # Stateful 7-bit encodings
    CharsetInfo("ISO-2022-JP", "iso2022_jp_2", None, ("JIS",), is_multibyte=True),
    CharsetInfo("ISO-2022-KR", "iso2022_kr", None, is_multibyte=True),
    # Single-byte
    CharsetInfo("ISO-8859-1", _latin1.CODEC_NAME, "LATIN1", ("LATIN1", "L1")),
    CharsetInfo("ISO-8859-2", "iso8859_2", "LATIN2", ("LATIN2", "L2")),
    CharsetInfo("ISO-8859-5", "iso8859_5", "ISO_8859_5", ("Cyrillic",)),
    CharsetInfo("ISO-8859-6", "iso8859_6", "ISO_8859_6", ("Arabic",)),
    CharsetInfo("ISO-8859-7", "iso8859_7", "ISO_8859_7", ("Greek",)),
    CharsetInfo("ISO-8859-8", "iso8859_8", "ISO_8859_8", ("Hebrew",)),
    CharsetInfo("ISO-8859-9", "iso8859_9", "LATIN5", ("LATIN5", "L5")),
    CharsetInfo("windows-1250", "cp1250", "WIN1250", ("WIN1250", "CP1250")),
    CharsetInfo("windows-1251", "cp1251", "WIN1251", ("WIN1251", "WIN", "CP1251")),
    CharsetInfo("windows-1252", "cp1252", "WIN1252", ("WIN1252", "CP1252")),
    CharsetInfo("windows-1253", "cp1253", "WIN1253", ("WIN1253", "CP1253")),
    CharsetInfo("windows-1254", "cp1254", "WIN1254", ("WIN1254", "CP1254")),
    CharsetInfo("windows-1255", "cp1255", "WIN1255", ("WIN1255", "CP1255")),
    CharsetInfo("windows-1256", "cp1256", "WIN1256", ("WIN1256", "CP1256")),
    CharsetInfo("windows-1257", "cp1257", "WIN1257", ("WIN1257", "CP1257")),
    CharsetInfo("windows-1258", "cp1258", "WIN1258", ("WIN1258", "ABC", "TCVN")),
    CharsetInfo("KOI8-R", "koi8_r", "KOI8R", ("KOI8",)),
    CharsetInfo("KOI8-U", "koi8_u", "KOI8U"),
)


def _build_index(registry: tuple[CharsetInfo, ...]) -> dict[str, CharsetInfo]:
    index: dict[str, CharsetInfo] = {}
    for info in registry:
        for spelling in (info.name, info.host_name or "", *info.aliases):
            if spelling:
                index.setdefault(normalize_charset_name(spelling), info)
    return index


_INDEX: dict[str, CharsetInfo] = _build_index(REGISTRY)


def lookup_charset(name: str) -> CharsetInfo:
    """Resolve *name* to its :class:`CharsetInfo`.

    Matching ignores case, dashes, underscores and spaces, and accepts the
    PostgreSQL encoding names (``LATIN1``, ``WIN1251``, ``SJIS`` ...).

    :param name: A charset name as reported by detection or given by a caller.
    :returns: The registry entry for *name*.
    :raises UnsupportedCharset: If *name* is not a known charset.
    """
    info = _INDEX.get(normalize_charset_name(name))
    if info is None:
        raise UnsupportedCharset(name)
    return info


def is_supported(name: str) -> bool:
    """Return ``True`` if :func:`lookup_charset` would resolve *name*."""
    return normalize_charset_name(name) in _INDEX


def host_encoding_name(name: str) -> str | None:
    """Return the PostgreSQL server encoding for *name*, or ``None``.

    :raises UnsupportedCharset: If *name* is not a known charset.
    """
    return lookup_charset(name).host_name
