"""Recognition of the escape-sequence ISO-2022 encodings.

These encodings are 7-bit: every character set switch is announced by an
ESC (0x1B) sequence, and the Korean and Chinese variants also shift with
SO/SI (0x0E/0x0F).  A recognizer counts the escape sequences it knows
(hits), the ones it does not (misses) and the shift bytes.
"""

from __future__ import annotations

import dataclasses

from chardetect.enums import RecognizerKind
from chardetect.pipeline import CharsetMatch, ScanContext

_ESC = 0x1B
_SHIFT_BYTES = frozenset({0x0E, 0x0F})

# Escape sequences, without the leading ESC.
ISO_2022_JP_ESCAPES: tuple[bytes, ...] = (
    b"$(C",  # KS X 1001:1992
    b"$(D",  # JIS X 0212-1990
    b"$@",  # JIS C 6226-1978
    b"$A",  # GB 2312-80
    b"$B",  # JIS X 0208-1983
    b"&@",  # JIS X 0208 1990, 1997
    b"(B",  # ASCII
    b"(H",  # JIS-Roman
    b"(I",  # half-width katakana
    b"(J",  # JIS-Roman
    b".A",  # ISO-8859-1
    b".F",  # ISO-8859-7
)

ISO_2022_KR_ESCAPES: tuple[bytes, ...] = (b"$)C",)

ISO_2022_CN_ESCAPES: tuple[bytes, ...] = (
    b"$)A",  # GB 2312-80
    b"$)G",  # CNS 11643-1992 Plane 1
    b"$*H",  # CNS 11643-1992 Plane 2
    b"$)E",  # ISO-IR-165
    b"$+I",  # CNS 11643-1992 Plane 3
    b"$+J",  # CNS 11643-1992 Plane 4
    b"$+K",  # CNS 11643-1992 Plane 5
    b"$+L",  # CNS 11643-1992 Plane 6
    b"$+M",  # CNS 11643-1992 Plane 7
    b"N",  # SS2
    b"O",  # SS3
)

# Below this many hits plus shifts the evidence is thin and the score drops.
_MIN_EVIDENCE = 5


def score_escapes(data: bytes, escapes: tuple[bytes, ...]) -> int:
    """Score *data* against one ISO-2022 family's escape sequences.

    :param data: The raw byte data to examine.
    :param escapes: Recognised escape sequences, without the leading ESC.
    :returns: A confidence in ``[0, 100]``; 0 when no known escape occurs.
    """
    hits = misses = shifts = 0
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if b == _ESC:
            for seq in escapes:
                if data.startswith(seq, i + 1):
                    hits += 1
                    i += len(seq) + 1
                    break
            else:
                misses += 1
                i += 1
            continue
        if b in _SHIFT_BYTES:
            shifts += 1
        i += 1

    if hits == 0:
        return 0
    quality = int((100 * hits - 100 * misses) / (hits + misses))
    if hits + shifts < _MIN_EVIDENCE:
        quality -= (_MIN_EVIDENCE - (hits + shifts)) * 10
    return max(quality, 0)


@dataclasses.dataclass(frozen=True, slots=True)
class EscapeRecognizer:
    """Recognizer for one ISO-2022 variant."""

    name: str
    language: str
    escapes: tuple[bytes, ...]
    kind: RecognizerKind = RecognizerKind.MULTI_BYTE

    @property
    def charsets(self) -> tuple[str, ...]:
        return (self.name,)

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        if _ESC not in data:
            return None
        confidence = score_escapes(data, self.escapes)
        if confidence <= 0:
            return None
        return CharsetMatch(self.name, self.language, confidence, self.kind)
