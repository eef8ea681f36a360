"""Error codes, exceptions and warnings raised by the synthesizer."""

from __future__ import annotations

import warnings
from enum import IntEnum

SYNTH_VERSION = "3.02b"

# Default pseudo-phoneme that forces the audio output to be flushed.
FLUSH_SYMBOL = "#"

# Default first character of a comment line in the phonetic input.
COMMENT_SYMBOL = ";"

MAX_PHONEME_NUMBER = 65000


class ErrorCode(IntEnum):
    """Numeric codes attached to errors and warnings."""

    MEMORY_OUT = -1
    UNKNOWN_COMMAND = -2
    SYNTAX_ERROR = -3
    COMMAND_LINE = -4
    OUT_FILE = -5
    RENAMING = -6
    NEXT_DIPHONE = -7

    PRG_WRONG_VERSION = -10

    TOO_MANY_PITCH = -20
    TOO_MANY_PHO_WO_PITCH = -21
    PITCH_TOO_HIGH = -22

    PHO_LENGTH = -30
    PHO_READING = -31

    DB_NOT_FOUND = -40
    DB_WRONG_VERSION = -41
    DB_WRONG_ARCHITECTURE = -42
    DB_NO_SILENCE = -43
    INFO_STRING = -44

    BIN_NUMBER_FORMAT = -60
    PERIOD_TOO_LONG = -61
    SMOOTHING = -62
    UNKNOWN_SEGMENT = -63
    CANT_DUPLICATE_SEGMENT = -64
    TOO_MANY_PHONEMES = -65

    BOOK = -70
    CODE = -71

    WARNING_UPGRADE = -80
    WARNING_SATURATION = -81


def _as_code(code: int) -> int:
    """Return the matching ErrorCode member, or the plain integer."""
    try:
        return ErrorCode(code)
    except ValueError:
        return int(code)


class MbrolaError(Exception):
    """A fatal synthesis error carrying a numeric code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = _as_code(code)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MbrolaWarning(UserWarning):
    """A non-fatal condition reported while synthesizing."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = _as_code(code)
        self.message = message

    def __str__(self) -> str:
        return self.message


def warn(code: int, message: str) -> MbrolaWarning:
    """Issue an MbrolaWarning with the given code and return it."""
    warning = MbrolaWarning(code, message)
    warnings.warn(warning, stacklevel=2)
    return warning