"""The recognizer table consulted by detection.

:data:`DEFAULT_TABLE` is built once at import time and never mutated, so it
can be shared by any number of concurrent detections.  Callers that want a
different set of recognizers build their own :class:`RecognizerTable`.
"""

from __future__ import annotations

import dataclasses

from chardetect._utils import DEFAULT_CHARSET
from chardetect.models import samples
from chardetect.pipeline import Recognizer
from chardetect.pipeline.ascii import AsciiRecognizer
from chardetect.pipeline.bom import BomRecognizer
from chardetect.pipeline.escape import (
    ISO_2022_CN_ESCAPES,
    ISO_2022_JP_ESCAPES,
    ISO_2022_KR_ESCAPES,
    EscapeRecognizer,
)
from chardetect.pipeline.statistical import SingleByteCharset, SingleByteRecognizer
from chardetect.pipeline.structural import MultiByteRecognizer, common_codes
from chardetect.pipeline.utf8 import Utf8Recognizer


@dataclasses.dataclass(frozen=True, slots=True)
class RecognizerTable:
    """An ordered, immutable set of recognizers plus the fallback charset.

    Order matters only for ties between recognizers of the same kind.
    """

    recognizers: tuple[Recognizer, ...]
    fallback: str = DEFAULT_CHARSET

    @property
    def charsets(self) -> tuple[str, ...]:
        """Every charset name a recognizer in this table can report."""
        names: dict[str, None] = {}
        for recognizer in self.recognizers:
            names.update(dict.fromkeys(recognizer.charsets))
        return tuple(names)


def _multi_byte_recognizers() -> tuple[Recognizer, ...]:
    return (
        Utf8Recognizer(),
        MultiByteRecognizer(
            "Shift_JIS", "ja", common_codes(samples.COMMON_JAPANESE, "cp932")
        ),
        MultiByteRecognizer(
            "EUC-JP", "ja", common_codes(samples.COMMON_JAPANESE, "euc_jp")
        ),
        MultiByteRecognizer(
            "EUC-KR", "ko", common_codes(samples.COMMON_KOREAN, "euc_kr")
        ),
        MultiByteRecognizer(
            "GB18030", "zh", common_codes(samples.COMMON_SIMPLIFIED_CHINESE, "gb18030")
        ),
        MultiByteRecognizer(
            "Big5", "zh", common_codes(samples.COMMON_TRADITIONAL_CHINESE, "big5")
        ),
        EscapeRecognizer("ISO-2022-JP", "ja", ISO_2022_JP_ESCAPES),
        EscapeRecognizer("ISO-2022-KR", "ko", ISO_2022_KR_ESCAPES),
        # Reported but not convertible: the registry has no ISO-2022-CN codec.
        EscapeRecognizer("ISO-2022-CN", "zh", ISO_2022_CN_ESCAPES),
    )


def _single_byte_recognizers() -> tuple[Recognizer, ...]:
    build = SingleByteCharset.build
    return (
        SingleByteRecognizer(
            build("ISO-8859-1", samples.WESTERN),
            build("windows-1252", samples.WESTERN),
        ),
        SingleByteRecognizer(
            build("ISO-8859-2", samples.CENTRAL_EUROPEAN, sibling="ISO-8859-1"),
            build("windows-1250", samples.CENTRAL_EUROPEAN, sibling="windows-1252"),
        ),
        SingleByteRecognizer(
            build("ISO-8859-9", samples.TURKISH, sibling="ISO-8859-1"),
            build("windows-1254", samples.TURKISH, sibling="windows-1252"),
        ),
        SingleByteRecognizer(build("ISO-8859-5", samples.CYRILLIC)),
        SingleByteRecognizer(build("windows-1251", samples.CYRILLIC)),
        SingleByteRecognizer(build("KOI8-R", samples.CYRILLIC)),
        SingleByteRecognizer(build("ISO-8859-6", samples.ARABIC)),
        SingleByteRecognizer(build("windows-1256", samples.ARABIC)),
        SingleByteRecognizer(
            build("ISO-8859-7", samples.GREEK), build("windows-1253", samples.GREEK)
        ),
        SingleByteRecognizer(
            build("ISO-8859-8", samples.HEBREW), build("windows-1255", samples.HEBREW)
        ),
    )


def build_default_table() -> RecognizerTable:
    """Build the standard table: BOM, ASCII, multi-byte, then single-byte."""
    return RecognizerTable(
        (BomRecognizer(), AsciiRecognizer())
        + _multi_byte_recognizers()
        + _single_byte_recognizers()
    )


DEFAULT_TABLE: RecognizerTable = build_default_table()
