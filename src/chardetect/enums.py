"""Enumerations for chardetect."""

import enum
import logging


class RecognizerKind(enum.IntEnum):
    """Classes of recognizers, in tie-breaking priority order.

    Lower values win when two recognizers report the same confidence.
    """

    BOM = 0
    ASCII = 1
    MULTI_BYTE = 2
    SINGLE_BYTE = 3
    FALLBACK = 4


class ErrorPolicy(enum.Enum):
    """How the decoder and encoder treat units they cannot convert."""

    STRICT = "strict"
    LOSSY = "ignore"


class Severity(enum.IntEnum):
    """Severity of a diagnostic.  Values are the matching :mod:`logging` levels."""

    DEBUG = logging.DEBUG
    WARNING = logging.WARNING
