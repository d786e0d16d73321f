"""Diagnostics collected while detecting and converting a buffer.

Every call gets its own :class:`DiagnosticLog`.  Entries are kept on the log
so callers can inspect them, and each one is also forwarded to the standard
:mod:`logging` machinery under the ``chardetect`` logger hierarchy.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator

from chardetect.enums import Severity

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single message emitted during detection or conversion."""

    severity: Severity
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert this diagnostic to a plain dict.

        :returns: A dict with ``'severity'`` and ``'message'`` keys.
        """
        return {"severity": self.severity.name, "message": self.message}


class DiagnosticLog:
    """Ordered collection of :class:`Diagnostic` entries for one call."""

    __slots__ = ("_entries", "_logger")

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._entries: list[Diagnostic] = []
        self._logger = log if log is not None else logger

    def record(self, severity: Severity, message: str) -> Diagnostic:
        """Append a diagnostic and forward it to the logger."""
        entry = Diagnostic(severity, message)
        self._entries.append(entry)
        self._logger.log(severity, message)
        return entry

    def debug(self, message: str) -> Diagnostic:
        return self.record(Severity.DEBUG, message)

    def warning(self, message: str) -> Diagnostic:
        return self.record(Severity.WARNING, message)

    @property
    def entries(self) -> tuple[Diagnostic, ...]:
        """Snapshot of the entries recorded so far."""
        return tuple(self._entries)

    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(e for e in self._entries if e.severity >= Severity.WARNING)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)
