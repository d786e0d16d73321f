"""Charset recognizers and shared detection types."""

from __future__ import annotations

import dataclasses
from typing import Protocol

from chardetect.enums import RecognizerKind

#: Confidence reported by deterministic recognizers (BOM, pure ASCII).
CERTAIN: int = 100

# Byte values >= 0x80, deleted by bytes.translate to count non-ASCII bytes.
HIGH_BYTES: bytes = bytes(range(0x80, 0x100))

# C1 control range; ISO-8859 charsets leave these without graphic meaning.
C1_BYTES: bytes = bytes(range(0x80, 0xA0))


@dataclasses.dataclass(frozen=True, slots=True)
class CharsetMatch:
    """A recognizer's opinion about a buffer.

    *confidence* is an integer in ``[0, 100]``.  *kind* is the class of the
    recognizer that produced the match and is used to break ties.
    """

    name: str
    language: str | None
    confidence: int
    kind: RecognizerKind = RecognizerKind.SINGLE_BYTE

    def to_dict(self) -> dict[str, str | int | None]:
        """Convert this match to a plain dict.

        :returns: A dict with ``'encoding'``, ``'language'`` and
            ``'confidence'`` keys.
        """
        return {
            "encoding": self.name,
            "language": self.language,
            "confidence": self.confidence,
        }


@dataclasses.dataclass(slots=True)
class ScanContext:
    """Per-call state shared by the recognizers of one detection run.

    Created once per :func:`~chardetect.pipeline.orchestrator.collect_matches`
    call, so concurrent detections never share it.
    """

    #: The scanned buffer was cut short at ``max_bytes``.
    truncated: bool = False
    non_ascii_count: int = -1
    high_bytes: frozenset[int] | None = None

    def count_non_ascii(self, data: bytes) -> int:
        if self.non_ascii_count < 0:
            self.non_ascii_count = len(data) - len(data.translate(None, HIGH_BYTES))
        return self.non_ascii_count

    def distinct_high_bytes(self, data: bytes) -> frozenset[int]:
        if self.high_bytes is None:
            self.high_bytes = frozenset(b for b in set(data) if b > 0x7F)
        return self.high_bytes

    def has_c1(self, data: bytes) -> bool:
        return not self.distinct_high_bytes(data).isdisjoint(C1_BYTES)


class Recognizer(Protocol):
    """A charset recognizer in a :class:`~chardetect.table.RecognizerTable`."""

    kind: RecognizerKind

    @property
    def charsets(self) -> tuple[str, ...]:
        """Every charset name this recognizer can report."""
        ...

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        """Return this recognizer's opinion of *data*, or ``None``."""
        ...
