"""Byte Order Mark recognition."""

from __future__ import annotations

import dataclasses

from chardetect.enums import RecognizerKind
from chardetect.pipeline import CERTAIN, CharsetMatch, ScanContext

# Ordered longest-first so UTF-32 is checked before UTF-16
# (UTF-32-LE BOM starts with the same bytes as UTF-16-LE BOM).
_BOMS: tuple[tuple[bytes, str], ...] = (
    (b"\x00\x00\xfe\xff", "UTF-32BE"),
    (b"\xff\xfe\x00\x00", "UTF-32LE"),
    (b"\xef\xbb\xbf", "UTF-8"),
    (b"\xfe\xff", "UTF-16BE"),
    (b"\xff\xfe", "UTF-16LE"),
)

_UTF32_BOMS: frozenset[bytes] = frozenset({b"\x00\x00\xfe\xff", b"\xff\xfe\x00\x00"})


def detect_bom(data: bytes) -> CharsetMatch | None:
    """Check for a byte order mark at the start of *data*.

    A UTF-32 BOM only counts when the payload after it is a whole number of
    4-byte units; otherwise the shorter UTF-16 BOM is tried.

    :param data: The raw byte data to examine.
    :returns: A :class:`CharsetMatch` with confidence 100, or ``None``.
    """
    for bom_bytes, name in _BOMS:
        if data.startswith(bom_bytes):
            if bom_bytes in _UTF32_BOMS and (len(data) - len(bom_bytes)) % 4 != 0:
                continue
            return CharsetMatch(name, None, CERTAIN, RecognizerKind.BOM)
    return None


@dataclasses.dataclass(frozen=True, slots=True)
class BomRecognizer:
    kind: RecognizerKind = RecognizerKind.BOM

    @property
    def charsets(self) -> tuple[str, ...]:
        return tuple(name for _, name in _BOMS)

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        return detect_bom(data)
