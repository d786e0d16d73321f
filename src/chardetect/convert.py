"""Decoding a charset into code points and encoding code points as UTF-8.

Both directions share one error model: under :attr:`ErrorPolicy.STRICT`
the first illegal unit raises :class:`IllegalSequence`; under
:attr:`ErrorPolicy.LOSSY` illegal units are skipped and the result records
that something was dropped.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

from chardetect.enums import ErrorPolicy
from chardetect.errors import HostIntegrationError, IllegalSequence
from chardetect.registry import lookup_charset

logger = logging.getLogger(__name__)

_MAX_CODE_POINT = 0x10FFFF


@dataclasses.dataclass(frozen=True, slots=True)
class DecodeResult:
    text: str
    dropped: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class EncodeResult:
    data: bytes
    dropped: bool = False


def decode(
    data: bytes, charset: str, policy: ErrorPolicy = ErrorPolicy.STRICT
) -> DecodeResult:
    """Decode *data* from *charset* into Unicode text.

    Byte order marks are not stripped.

    :param data: The raw bytes.
    :param charset: Any name :func:`~chardetect.registry.lookup_charset` accepts.
    :param policy: What to do with bytes that cannot be decoded.
    :returns: The decoded text and whether any input was dropped.
    :raises UnsupportedCharset: If *charset* is unknown.
    :raises IllegalSequence: Under the strict policy, at the first bad unit.
    """
    info = lookup_charset(charset)
    try:
        return DecodeResult(data.decode(info.python_codec))
    except UnicodeDecodeError as exc:
        if policy is ErrorPolicy.STRICT:
            raise IllegalSequence(info.name, exc.start, exc.reason) from exc
        logger.debug(
            "Dropping undecodable %s bytes, first at offset %d", info.name, exc.start
        )
    return DecodeResult(data.decode(info.python_codec, errors=policy.value), True)


def _code_points_to_text(
    code_points: Iterable[int], policy: ErrorPolicy
) -> tuple[str, bool]:
    chars: list[str] = []
    dropped = False
    for position, cp in enumerate(code_points):
        if isinstance(cp, bool) or not isinstance(cp, int):
            msg = f"code points must be integers, got {type(cp).__name__} at {position}"
            raise HostIntegrationError(msg)
        if 0 <= cp <= _MAX_CODE_POINT:
            chars.append(chr(cp))
            continue
        if policy is ErrorPolicy.STRICT:
            raise IllegalSequence("UTF-8", position, f"code point {cp:#x} out of range")
        dropped = True
    return "".join(chars), dropped


def encode(
    code_points: str | Iterable[int], policy: ErrorPolicy = ErrorPolicy.STRICT
) -> EncodeResult:
    """Encode Unicode text or a sequence of code points as UTF-8.

    Surrogates and values outside ``0..0x10FFFF`` are illegal.  The output is
    at most four bytes per code point.

    :param code_points: A string, or any iterable of integer code points.
    :param policy: What to do with code points that cannot be encoded.
    :returns: The UTF-8 bytes and whether any input was dropped.
    :raises IllegalSequence: Under the strict policy, at the first bad unit.
    :raises HostIntegrationError: If an item of *code_points* is not an int.
    """
    dropped = False
    if isinstance(code_points, str):
        text = code_points
    else:
        text, dropped = _code_points_to_text(code_points, policy)
    try:
        return EncodeResult(text.encode("utf-8"), dropped)
    except UnicodeEncodeError as exc:
        if policy is ErrorPolicy.STRICT:
            raise IllegalSequence("UTF-8", exc.start, exc.reason) from exc
        logger.debug("Dropping unencodable code point at offset %d", exc.start)
    return EncodeResult(text.encode("utf-8", errors=policy.value), True)
