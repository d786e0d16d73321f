"""Exception hierarchy for chardetect."""

from __future__ import annotations


class ChardetectError(Exception):
    """Base class for every error raised by chardetect."""


class UnsupportedCharset(ChardetectError, LookupError):
    """The named charset has no decoder in the charset registry."""

    def __init__(self, charset: str) -> None:
        super().__init__(f"unsupported charset: {charset!r}")
        self.charset = charset


class IllegalSequence(ChardetectError, ValueError):
    """Strict conversion hit an illegal, unmappable or truncated unit."""

    def __init__(self, charset: str, position: int, reason: str) -> None:
        super().__init__(
            f"illegal sequence for {charset} at offset {position}: {reason}"
        )
        self.charset = charset
        self.position = position
        self.reason = reason


class HostIntegrationError(ChardetectError, TypeError):
    """The caller broke the calling contract (wrong argument type or value)."""
