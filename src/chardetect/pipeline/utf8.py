"""UTF-8 structural validation."""

from __future__ import annotations

import dataclasses

from chardetect.enums import RecognizerKind
from chardetect.pipeline import CharsetMatch, ScanContext

#: Each broken sequence weighs as much as this many valid ones.
BAD_SEQUENCE_WEIGHT: int = 4


@dataclasses.dataclass(frozen=True, slots=True)
class SequenceCounts:
    """Tally of multi-byte sequences seen by a structural scan."""

    valid: int = 0
    bad: int = 0
    covered: int = 0

    def quality(self) -> float:
        """Share of sequences that decoded, with bad ones weighted up."""
        if self.valid == 0:
            return 0.0
        return self.valid / (self.valid + BAD_SEQUENCE_WEIGHT * self.bad)


def count_utf8_sequences(data: bytes, truncated: bool = False) -> SequenceCounts:
    """Count valid and invalid multi-byte UTF-8 sequences in *data*.

    Scanning resumes at the next byte after an invalid sequence, so one bad
    byte does not hide the rest of the buffer.

    :param data: The raw byte data to examine.
    :param truncated: *data* is a prefix of a longer buffer, so an incomplete
        final sequence is not counted as an error.
    """
    i = 0
    length = len(data)
    valid = bad = covered = 0

    while i < length:
        byte = data[i]

        if byte < 0x80:
            i += 1
            continue

        # 0xC0-0xC1 are overlong 2-byte encodings of ASCII, so we start at 0xC2.
        if 0xC2 <= byte <= 0xDF:
            seq_len = 2
        elif 0xE0 <= byte <= 0xEF:
            seq_len = 3
        elif 0xF0 <= byte <= 0xF4:
            seq_len = 4
        else:
            bad += 1
            i += 1
            continue

        if i + seq_len > length:
            if not truncated:
                bad += 1
            break

        if not all(0x80 <= data[i + j] <= 0xBF for j in range(1, seq_len)):
            bad += 1
            i += 1
            continue

        second = data[i + 1]
        if (
            (byte == 0xE0 and second < 0xA0)  # overlong 3-byte
            or (byte == 0xED and second > 0x9F)  # UTF-16 surrogates
            or (byte == 0xF0 and second < 0x90)  # overlong 4-byte
            or (byte == 0xF4 and second > 0x8F)  # above U+10FFFF
        ):
            bad += 1
            i += 1
            continue

        valid += 1
        covered += seq_len
        i += seq_len

    return SequenceCounts(valid, bad, covered)


def detect_utf8(data: bytes, ctx: ScanContext | None = None) -> CharsetMatch | None:
    """Score *data* as UTF-8.

    Confidence is the share of non-ASCII bytes that sit inside valid
    sequences, scaled by the valid-to-invalid sequence ratio.  Well-formed
    UTF-8 with at least one multi-byte sequence scores 100.  Pure ASCII is
    left to the ASCII recognizer.

    :param data: The raw byte data to examine.
    :param ctx: Optional per-call :class:`ScanContext`.
    :returns: A :class:`CharsetMatch` for UTF-8, or ``None``.
    """
    if ctx is None:
        ctx = ScanContext()
    non_ascii = ctx.count_non_ascii(data)
    if non_ascii == 0:
        return None
    counts = count_utf8_sequences(data, truncated=ctx.truncated)
    if counts.valid == 0:
        return None
    coverage = counts.covered / non_ascii
    confidence = round(100 * coverage * counts.quality())
    if confidence <= 0:
        return None
    return CharsetMatch("UTF-8", None, confidence, RecognizerKind.MULTI_BYTE)


@dataclasses.dataclass(frozen=True, slots=True)
class Utf8Recognizer:
    kind: RecognizerKind = RecognizerKind.MULTI_BYTE

    @property
    def charsets(self) -> tuple[str, ...]:
        return ("UTF-8",)

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        return detect_utf8(data, ctx)
