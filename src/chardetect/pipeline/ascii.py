"""Pure-ASCII recognition, reported as UTF-8."""

from __future__ import annotations

import dataclasses

from chardetect.enums import RecognizerKind
from chardetect.pipeline import CERTAIN, CharsetMatch, ScanContext

# Translate table that deletes printable ASCII and common whitespace; any
# byte left over means the data is not plain text ASCII.
_ALLOWED_ASCII: bytes = bytes([0x09, 0x0A, 0x0D]) + bytes(range(0x20, 0x7F))


def detect_ascii(data: bytes) -> CharsetMatch | None:
    """Report UTF-8 when *data* is printable 7-bit text.

    Escape, shift-in and shift-out bytes are not allowed, so ISO-2022 text is
    left to the escape-sequence recognizers.

    :param data: The raw byte data to examine.
    :returns: A :class:`CharsetMatch` for UTF-8, or ``None``.
    """
    if not data:
        return None
    if data.translate(None, _ALLOWED_ASCII):
        return None
    return CharsetMatch("UTF-8", None, CERTAIN, RecognizerKind.ASCII)


@dataclasses.dataclass(frozen=True, slots=True)
class AsciiRecognizer:
    kind: RecognizerKind = RecognizerKind.ASCII

    @property
    def charsets(self) -> tuple[str, ...]:
        return ("UTF-8",)

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        return detect_ascii(data)
