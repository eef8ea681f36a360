"""States reported by a parser when asked for the next phone."""

from __future__ import annotations

from enum import IntEnum


class PhoState(IntEnum):
    """Outcome of reading the next phone from a phonetic stream."""

    OK = 0
    EOF = 1
    FLUSH = 2
    ERROR = 3

    def ends_chunk(self) -> bool:
        """True for the states that close the current chunk of input."""
        return self in (PhoState.EOF, PhoState.FLUSH)