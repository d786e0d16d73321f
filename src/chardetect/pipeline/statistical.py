"""Statistical bigram recognition for single-byte charsets."""

from __future__ import annotations

import dataclasses

from chardetect.enums import RecognizerKind
from chardetect.models import (
    BigramModel,
    BigramProfile,
    LetterMap,
    score_best_language,
    train_models,
)
from chardetect.pipeline import CERTAIN, HIGH_BYTES, CharsetMatch, ScanContext
from chardetect.pipeline.validity import decodes_cleanly, distinguishing_bytes
from chardetect.registry import lookup_charset

# Confidence multiplier for a niche charset when the data holds none of the
# bytes that set it apart from its common sibling.
NICHE_PENALTY: float = 0.5


def _is_latin_script(texts: dict[str, str]) -> bool:
    """Return ``True`` if most letters of *texts* are ASCII."""
    letters = [c for text in texts.values() for c in text if c.isalpha()]
    ascii_letters = sum(1 for c in letters if c.isascii())
    return 2 * ascii_letters >= len(letters)


def native_letter_share(folded: bytes) -> float:
    """Share of the letters in *folded* that are non-ASCII bytes."""
    letters = folded.translate(None, b" ")
    if not letters:
        return 0.0
    return 1 - len(letters.translate(None, HIGH_BYTES)) / len(letters)


@dataclasses.dataclass(frozen=True, slots=True)
class SingleByteCharset:
    """A single-byte charset with its letter map and language models.

    *distinguishing* is the set of high bytes where this charset differs
    from a more common sibling (``None`` when there is no sibling).  *latin*
    is false when the charset's languages are not written with ASCII letters.
    """

    name: str
    codec: str
    letters: LetterMap
    models: tuple[BigramModel, ...]
    distinguishing: frozenset[int] | None = None
    latin: bool = True

    @classmethod
    def build(
        cls, name: str, texts: dict[str, str], sibling: str | None = None
    ) -> SingleByteCharset:
        """Build the letter map and train models for registry charset *name*.

        :param name: Registry name of the charset.
        :param texts: Reference texts keyed by language code.
        :param sibling: Registry name of the common charset this one is
            easily mistaken for.
        """
        codec = lookup_charset(name).python_codec
        letters = LetterMap(codec)
        distinguishing = None
        if sibling is not None:
            distinguishing = distinguishing_bytes(
                codec, lookup_charset(sibling).python_codec
            )
        return cls(
            name,
            codec,
            letters,
            train_models(letters, texts),
            distinguishing,
            latin=_is_latin_script(texts),
        )


def score_charset(
    data: bytes, charset: SingleByteCharset, ctx: ScanContext
) -> CharsetMatch | None:
    """Score *data* as text in *charset*.

    A charset that cannot decode *data* has no opinion.

    :returns: A :class:`CharsetMatch` with the best-scoring language, or
        ``None``.
    """
    if not decodes_cleanly(data, charset.codec):
        return None
    folded = charset.letters.fold(data)
    score, language = score_best_language(BigramProfile(folded), charset.models)
    if not charset.latin:
        # ASCII letters are foreign to a non-Latin alphabet.
        score *= native_letter_share(folded)
    if charset.distinguishing is not None and not (
        ctx.distinct_high_bytes(data) & charset.distinguishing
    ):
        score *= NICHE_PENALTY
    confidence = min(CERTAIN, round(100 * score))
    if confidence <= 0:
        return None
    return CharsetMatch(charset.name, language, confidence, RecognizerKind.SINGLE_BYTE)


@dataclasses.dataclass(frozen=True, slots=True)
class SingleByteRecognizer:
    """Recognizer for an ISO-8859 charset and, optionally, its Windows variant.

    Data that contains C1 bytes (0x80-0x9F) is scored as *c1_variant*
    instead, since ISO-8859 text does not use that range.
    """

    charset: SingleByteCharset
    c1_variant: SingleByteCharset | None = None
    kind: RecognizerKind = RecognizerKind.SINGLE_BYTE

    @property
    def charsets(self) -> tuple[str, ...]:
        if self.c1_variant is None:
            return (self.charset.name,)
        return (self.charset.name, self.c1_variant.name)

    def match(self, data: bytes, ctx: ScanContext) -> CharsetMatch | None:
        target = self.charset
        if self.c1_variant is not None and ctx.has_c1(data):
            target = self.c1_variant
        return score_charset(data, target, ctx)
