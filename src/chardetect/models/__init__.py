"""Letter folding and bigram scoring for single-byte charsets.

Reference profiles are trained at import time from the texts in
:mod:`chardetect.models.samples`, encoded into each charset.  Scoring is the
cosine similarity between the bigram counts of the folded input and those of
a reference profile.
"""

from __future__ import annotations

import math
import re
from collections import Counter

_SPACE = 0x20
_SPACE_RUNS = re.compile(rb" {2,}")


class LetterMap:
    """Byte translation that keeps letters and folds everything else to a space.

    Upper-case letters are mapped onto the byte of their lower-case form in
    the same charset when that form exists there.  Bytes the charset leaves
    undefined are folded to a space.
    """

    __slots__ = ("codec", "table")

    def __init__(self, codec: str) -> None:
        self.codec = codec
        table = bytearray(range(256))
        for byte in range(256):
            raw = bytes([byte])
            try:
                char = raw.decode(codec)
            except UnicodeDecodeError:
                table[byte] = _SPACE
                continue
            if not char.isalpha():
                table[byte] = _SPACE
                continue
            try:
                lowered = char.lower().encode(codec)
            except UnicodeEncodeError:
                lowered = raw
            table[byte] = lowered[0] if len(lowered) == 1 else byte
        self.table = bytes(table)

    def fold(self, data: bytes) -> bytes:
        """Return *data* folded to lower-case letters and single spaces.

        The result always starts and ends with a space so that word-initial
        and word-final letters form bigrams.
        """
        folded = _SPACE_RUNS.sub(b" ", b" " + data.translate(self.table) + b" ")
        return folded


class BigramProfile:
    """Bigram counts for a folded byte string."""

    __slots__ = ("freq", "norm")

    def __init__(self, folded: bytes) -> None:
        self.freq: Counter[tuple[int, int]] = Counter(zip(folded, folded[1:]))
        # A lone space pair carries no information.
        self.freq.pop((_SPACE, _SPACE), None)
        self.norm: float = math.sqrt(sum(v * v for v in self.freq.values()))

    def __bool__(self) -> bool:
        return bool(self.freq)


class BigramModel:
    """Reference bigram profile of one language in one charset."""

    __slots__ = ("language", "profile")

    def __init__(self, language: str, profile: BigramProfile) -> None:
        self.language = language
        self.profile = profile

    @classmethod
    def train(cls, language: str, text: str, letters: LetterMap) -> BigramModel:
        """Build a model from reference *text* written in *language*.

        Characters the charset cannot represent become word breaks.
        """
        encoded = text.encode(letters.codec, errors="replace")
        return cls(language, BigramProfile(letters.fold(encoded)))

    def score(self, profile: BigramProfile) -> float:
        """Cosine similarity between *profile* and this model, in ``[0, 1]``."""
        if not profile or not self.profile:
            return 0.0
        weights = self.profile.freq
        dot = sum(count * weights.get(pair, 0) for pair, count in profile.freq.items())
        return dot / (profile.norm * self.profile.norm)


def score_best_language(
    profile: BigramProfile, models: tuple[BigramModel, ...]
) -> tuple[float, str | None]:
    """Score *profile* against every model and keep the best.

    :param profile: The bigram profile of the folded input.
    :param models: Candidate language models for one charset.
    :returns: A ``(score, language)`` tuple with the best cosine-similarity
        score and its language code (or ``None`` when nothing scored).
    """
    best_score = 0.0
    best_lang: str | None = None
    for model in models:
        s = model.score(profile)
        if s > best_score:
            best_score = s
            best_lang = model.language
    return best_score, best_lang


def train_models(
    letters: LetterMap, texts: dict[str, str]
) -> tuple[BigramModel, ...]:
    """Train one :class:`BigramModel` per ``language: text`` entry."""
    return tuple(
        BigramModel.train(language, text, letters) for language, text in texts.items()
    )
