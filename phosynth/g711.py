"""u-law, A-law and linear PCM sample conversions."""

from __future__ import annotations

from bisect import bisect_left
from itertools import chain

_SIGN_BIT = 0x80
_QUANT_MASK = 0x0F
_SEG_SHIFT = 4
_SEG_MASK = 0x70
_BIAS = 0x84

# Upper bound of each of the eight logarithmic segments.
_SEG_END = tuple((0x100 << n) - 1 for n in range(8))


def _doubled(values: range) -> list[int]:
    return [v for v in values for _ in range(2)]


# u-law magnitude code -> A-law magnitude code + 1 (CCITT G.711).
_U2A = tuple(
    chain(
        _doubled(range(1, 9)),
        range(9, 25),
        range(25, 32, 2),
        range(33, 45),
        (46, 48),
        range(49, 63),
        range(64, 80),
        range(81, 129),
    )
)

# A-law magnitude code -> u-law magnitude code (CCITT G.711).
_A2U = tuple(
    chain(
        range(1, 16, 2),
        range(16, 32),
        _doubled(range(32, 36)),
        range(36, 48),
        _doubled(range(48, 50)),
        range(50, 64),
        (64, 64),
        range(65, 80),
        (79,),
        range(80, 128),
    )
)


def _segment(value: int) -> int:
    """Index of the first segment whose end is not below value (8 if none)."""
    return bisect_left(_SEG_END, value)


def linear2alaw(pcm_val: int) -> int:
    """Encode a 16-bit linear PCM value as an 8-bit A-law byte."""
    if pcm_val >= 0:
        mask = 0xD5
    else:
        mask = 0x55
        pcm_val = -pcm_val - 8

    seg = _segment(pcm_val)
    if seg >= 8:
        return (0x7F ^ mask) & 0xFF

    shift = 4 if seg < 2 else seg + 3
    code = (seg << _SEG_SHIFT) | ((pcm_val >> shift) & _QUANT_MASK)
    return (code ^ mask) & 0xFF


def alaw2linear(a_val: int) -> int:
    """Decode an A-law byte into a 16-bit linear PCM value."""
    a_val = (a_val & 0xFF) ^ 0x55

    magnitude = (a_val & _QUANT_MASK) << 4
    seg = (a_val & _SEG_MASK) >> _SEG_SHIFT
    if seg == 0:
        magnitude += 8
    else:
        magnitude = (magnitude + 0x108) << max(seg - 1, 0)
    return magnitude if a_val & _SIGN_BIT else -magnitude


def linear2ulaw(pcm_val: int) -> int:
    """Encode a 16-bit linear PCM value as an 8-bit u-law byte."""
    if pcm_val < 0:
        biased = _BIAS - pcm_val
        mask = 0x7F
    else:
        biased = pcm_val + _BIAS
        mask = 0xFF

    seg = _segment(biased)
    if seg >= 8:
        return (0x7F ^ mask) & 0xFF

    code = (seg << 4) | ((biased >> (seg + 3)) & 0xF)
    return (code ^ mask) & 0xFF


def ulaw2linear(u_val: int) -> int:
    """Decode a u-law byte into a 16-bit linear PCM value."""
    code = ~u_val & 0xFF

    biased = (((code & _QUANT_MASK) << 3) + _BIAS) << ((code & _SEG_MASK) >> _SEG_SHIFT)
    return (_BIAS - biased) if code & _SIGN_BIT else (biased - _BIAS)


def alaw2ulaw(aval: int) -> int:
    """Convert an A-law byte to a u-law byte."""
    aval &= 0xFF
    if aval & 0x80:
        return 0xFF ^ _A2U[aval ^ 0xD5]
    return 0x7F ^ _A2U[aval ^ 0x55]


def ulaw2alaw(uval: int) -> int:
    """Convert a u-law byte to an A-law byte."""
    uval &= 0xFF
    if uval & 0x80:
        return 0xD5 ^ (_U2A[0xFF ^ uval] - 1)
    return 0x55 ^ (_U2A[0x7F ^ uval] - 1)