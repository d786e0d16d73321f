"""Multi-byte structural recognition for the CJK charsets.

Each analyser walks the data once and tallies, for its charset:

- ``valid``: well-formed multi-byte characters
- ``bad``: lead bytes with a bad trail, stray high bytes, truncated characters
- ``covered``: non-ASCII bytes that sit inside valid characters
- ``mb_bytes``: all bytes of valid characters (trail bytes may be ASCII)
- ``common``: valid characters found in the language's frequent-character set

Confidence is a continuous function of those counts, so a single corrupt
byte lowers the score instead of zeroing it.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from chardetect.enums import RecognizerKind
from chardetect.pipeline import CharsetMatch, ScanContext
from chardetect.pipeline.utf8 import BAD_SEQUENCE_WEIGHT


@dataclasses.dataclass(slots=True)
class MultiByteCounts:
    valid: int = 0
    bad: int = 0
    covered: int = 0
    mb_bytes: int = 0
    common: int = 0

    def add(self, code: int, length: int, high: int, common: frozenset[int]) -> None:
        self.valid += 1
        self.mb_bytes += length
        self.covered += high
        if code in common:
            self.common += 1


def _analyze_shift_jis(
    data: bytes, common: frozenset[int], truncated: bool = False
) -> MultiByteCounts:
    """Shift_JIS / CP932 analysis.

    Lead bytes: 0x81-0x9F, 0xE0-0xFC
    Trail bytes: 0x40-0x7E, 0x80-0xFC
    Half-width katakana (0xA1-0xDF) are single bytes and count as neither
    valid nor bad.
    """
    counts = MultiByteCounts()
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if b < 0x80 or 0xA1 <= b <= 0xDF:
            i += 1
            continue
        if (0x81 <= b <= 0x9F) or (0xE0 <= b <= 0xFC):
            if i + 1 >= length:
                if not truncated:
                    counts.bad += 1
                break
            trail = data[i + 1]
            if (0x40 <= trail <= 0x7E) or (0x80 <= trail <= 0xFC):
                counts.add((b << 8) | trail, 2, 1 + (trail > 0x7F), common)
                i += 2
                continue
        counts.bad += 1
        i += 1
    return counts


def _analyze_euc_jp(
    data: bytes, common: frozenset[int], truncated: bool = False
) -> MultiByteCounts:
    """EUC-JP analysis.

    Two-byte: Lead 0xA1-0xFE, Trail 0xA1-0xFE
    SS2 (half-width katakana): 0x8E + 0xA1-0xDF
    SS3 (JIS X 0212): 0x8F + 0xA1-0xFE + 0xA1-0xFE
    """
    counts = MultiByteCounts()
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if b < 0x80:
            i += 1
            continue
        if b == 0x8F:
            need = 3
        elif b == 0x8E or 0xA1 <= b <= 0xFE:
            need = 2
        else:
            counts.bad += 1
            i += 1
            continue
        if i + need > length:
            if not truncated:
                counts.bad += 1
            break
        if b == 0x8E:
            ok = 0xA1 <= data[i + 1] <= 0xDF
        else:
            ok = all(0xA1 <= data[i + j] <= 0xFE for j in range(1, need))
        if ok:
            counts.add(int.from_bytes(data[i : i + need], "big"), need, need, common)
            i += need
            continue
        counts.bad += 1
        i += 1
    return counts


def _analyze_euc_kr(
    data: bytes, common: frozenset[int], truncated: bool = False
) -> MultiByteCounts:
    """EUC-KR analysis.

    Lead 0xA1-0xFE; Trail 0xA1-0xFE
    """
    counts = MultiByteCounts()
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if b < 0x80:
            i += 1
            continue
        if 0xA1 <= b <= 0xFE:
            if i + 1 >= length:
                if not truncated:
                    counts.bad += 1
                break
            trail = data[i + 1]
            if 0xA1 <= trail <= 0xFE:
                counts.add((b << 8) | trail, 2, 2, common)
                i += 2
                continue
        counts.bad += 1
        i += 1
    return counts


def _analyze_gb18030(
    data: bytes, common: frozenset[int], truncated: bool = False
) -> MultiByteCounts:
    """GB18030 analysis.

    Only strict GB2312 2-byte pairs (lead 0xA1-0xF7, trail 0xA1-0xFE) and
    GB18030 4-byte sequences count as valid.  The broader GBK range is so
    permissive that unrelated single-byte data would score well, so GBK-only
    pairs count as bad.
    """
    counts = MultiByteCounts()
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if b < 0x80:
            i += 1
            continue
        if 0x81 <= b <= 0xFE:
            # Try 4-byte first (byte2 in 0x30-0x39 distinguishes from 2-byte)
            if (
                i + 3 < length
                and 0x30 <= data[i + 1] <= 0x39
                and 0x81 <= data[i + 2] <= 0xFE
                and 0x30 <= data[i + 3] <= 0x39
            ):
                counts.add(int.from_bytes(data[i : i + 4], "big"), 4, 2, common)
                i += 4
                continue
            if i + 1 >= length:
                if not truncated:
                    counts.bad += 1
                break
            trail = data[i + 1]
            if 0xA1 <= b <= 0xF7 and 0xA1 <= trail <= 0xFE:
                counts.add((b << 8) | trail, 2, 2, common)
                i += 2
                continue
        counts.bad += 1
        i += 1
    return counts


def _analyze_big5(
    data: bytes, common: frozenset[int], truncated: bool = False
) -> MultiByteCounts:
    """Big5 analysis.

    Lead 0xA1-0xF9; Trail 0x40-0x7E, 0xA1-0xFE
    """
    counts = MultiByteCounts()
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if b < 0x80:
            i += 1
            continue
        if 0xA1 <= b <= 0xF9:
            if i + 1 >= length:
                if not truncated:
                    counts.bad += 1
                break
            trail = data[i + 1]
            if (0x40 <= trail <= 0x7E) or (0xA1 <= trail <= 0xFE):
                counts.add((b << 8) | trail, 2, 1 + (trail > 0x7F), common)
                i += 2
                continue
        counts.bad += 1
        i += 1
    return counts


_ANALYSERS: dict[str, Callable[[bytes, frozenset[int], bool], MultiByteCounts]] = {
    "Shift_JIS": _analyze_shift_jis,
    "EUC-JP": _analyze_euc_jp,
    "EUC-KR": _analyze_euc_kr,
    "GB18030": _analyze_gb18030,
    "Big5": _analyze_big5,
}


def analyze(
    name: str, data: bytes, common: frozenset[int] = frozenset(), truncated: bool = False
) -> MultiByteCounts:
    """Run the structural analyser for charset *name* over *data*."""
    return _ANALYSERS[name](data, common, truncated)


def structural_confidence(counts: MultiByteCounts, length: int, non_ascii: int) -> int:
    """Turn structural counts into a confidence in ``[0, 100]``.

    The score is the product of byte coverage (non-ASCII bytes explained by
    valid characters) and sequence quality, weighted by multi-byte density
    and by how many characters are common in the charset's language.
    """
    if counts.valid == 0 or non_ascii == 0:
        return 0
    coverage = counts.covered / non_ascii
    quality = counts.valid / (counts.valid + BAD_SEQUENCE_WEIGHT * counts.bad)
    density = min(1.0, 2 * counts.mb_bytes / length)
    frequency = min(1.0, 2 * counts.common / counts.valid)
    return round(100 * coverage * quality * (0.4 + 0.2 * density + 0.4 * frequency))


def common_codes(chars: str, codec: str) -> frozenset[int]:
    """Encode *chars* into *codec* and return their byte codes as integers.

    Characters the codec cannot represent are skipped.
    """
    codes: set[int] = set()
    for char in chars:
        try:
            encoded = char.encode(codec)
        except UnicodeEncodeError:
            continue
        codes.add(int.from_bytes(encoded, "big"))
    return frozenset(codes)


@dataclasses.dataclass(frozen=True, slots=True)
class MultiByteRecognizer:
    """Structural recognizer for one CJK charset."""

    name: str
    language: str
    common: frozenset[int] = frozenset()
    kind: RecognizerKind = RecognizerKind.MULTI_BYTE

    def __post_init__(self) -> None:
        if self.name not in _ANALYSERS:
            msg = f"no structural analyser for {self.name!r}"
            raise ValueError(msg)

    @property
    def charsets(self) -> tuple[str, ...]:
        return (self.name,)

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        non_ascii = ctx.count_non_ascii(data)
        if non_ascii == 0:
            return None
        counts = analyze(self.name, data, self.common, ctx.truncated)
        confidence = structural_confidence(counts, len(data), non_ascii)
        if confidence <= 0:
            return None
        return CharsetMatch(self.name, self.language, confidence, self.kind)
