"""Audio sample conversion and audio file headers."""

from __future__ import annotations

import struct
import sys
from array import array
from enum import IntEnum
from typing import BinaryIO, Iterable

from .errors import ErrorCode, MbrolaError
from .g711 import linear2alaw, linear2ulaw


class AudioType(IntEnum):
    """Sample types that synthesized audio can be delivered in."""

    LIN16 = 0  # 16 bits linear, the internal computation format
    LIN8 = 1  # unsigned linear 8 bits
    ULAW = 2  # mu-law, 8 bits
    ALAW = 3  # A-law, 8 bits


class WaveType(IntEnum):
    """Audio file formats, chosen from the output file's extension."""

    RAW = 0
    WAV = 1
    AU = 2
    AIF = 3
    AIFF = 4


_EXTENSIONS = (".raw", ".wav", ".au", ".aif", ".aiff")

_LITTLE_ENDIAN = sys.byteorder == "little"


def _audio_type(sample_type: int) -> AudioType:
    try:
        return AudioType(sample_type)
    except ValueError:
        raise MbrolaError(ErrorCode.WARNING_UPGRADE, "Unknown sample type") from None


def linear_to_lin8(sample: int) -> int:
    """Convert a 16-bit linear sample to an unsigned 8-bit linear byte."""
    return (128 + (sample >> 8)) & 0xFF


def convert_samples(samples: Iterable[int], sample_type: int) -> bytes:
    """Encode 16-bit linear samples as bytes of the requested sample type.

    LIN16 samples are laid out in the machine's native byte order.
    """
    kind = _audio_type(sample_type)
    if kind is AudioType.LIN16:
        return array("h", samples).tobytes()
    if kind is AudioType.LIN8:
        encode = linear_to_lin8
    elif kind is AudioType.ULAW:
        encode = linear2ulaw
    else:
        encode = linear2alaw
    return bytes(encode(sample) for sample in samples)


def zero_samples(count: int, sample_type: int) -> bytes:
    """Return count silent samples encoded in the requested sample type."""
    kind = _audio_type(sample_type)
    if kind is AudioType.LIN16:
        return bytes(2 * count)
    return convert_samples([0], kind) * count


def needs_byteswap(file_format: int) -> bool:
    """True if 16-bit samples must be byte swapped for this file format."""
    fmt = WaveType(file_format)
    if fmt is WaveType.RAW:
        return False
    if fmt is WaveType.WAV:
        return not _LITTLE_ENDIAN
    return _LITTLE_ENDIAN


def _u32(value: int) -> int:
    return value & 0xFFFFFFFF


def header_bytes(file_format: int, audio_length: int, sample_rate: int) -> bytes:
    """Build the header of an audio file holding audio_length 16-bit samples."""
    fmt = WaveType(file_format)
    data_size = audio_length * 2

    if fmt is WaveType.RAW:
        return b""

    if fmt is WaveType.WAV:
        return b"".join(
            (
                b"RIFF",
                struct.pack("<I", _u32(data_size + 44 - 8)),
                b"WAVE",
                b"fmt ",
                struct.pack(
                    "<IHHIIHH",
                    16,  # fmt chunk size
                    1,  # WAVE_FORMAT_PCM
                    1,  # channels
                    _u32(sample_rate),
                    _u32(sample_rate * 2),  # average bytes per second
                    2,  # block align
                    16,  # bits per sample
                ),
                b"data",
                struct.pack("<I", _u32(data_size)),
            )
        )

    if fmt in (WaveType.AIF, WaveType.AIFF):
        return b"".join(
            (
                b"FORM",
                struct.pack(">I", _u32(data_size + 54 - 8)),
                b"AIFF",
                b"COMM",
                struct.pack(">IHIH", 18, 1, _u32(audio_length), 16),
                # 16000 Hz as an 80-bit extended float
                struct.pack(">IIH", 0x400CFA00, 0x00000000, 0x0000),
                b"SSND",
                struct.pack(">III", _u32(data_size + 8), 0, 0),
            )
        )

    size_field = 0xFFFFFFFF if audio_length == 0 else _u32(data_size)
    return b"".join(
        (
            b".snd",
            struct.pack(">II", 7 * 4, size_field),
            struct.pack(">III", 3, _u32(sample_rate), 1),
            b"MBRP",
        )
    )


def write_header(
    file_format: int, audio_length: int, sample_rate: int, stream: BinaryIO
) -> int:
    """Write the header for the format to stream; return the bytes written."""
    header = header_bytes(file_format, audio_length, sample_rate)
    stream.write(header)
    return len(header)


def write_samples(samples: Iterable[int], file_format: int, stream: BinaryIO) -> int:
    """Write 16-bit samples in the byte order of the format; return the count."""
    data = array("h", samples)
    if needs_byteswap(file_format):
        data.byteswap()
    stream.write(data.tobytes())
    return len(data)


def find_file_format(name: str) -> WaveType:
    """Find the file format from the name's extension; no match means RAW."""
    lower = name.lower()
    for index, extension in enumerate(_EXTENSIONS):
        if len(lower) > len(extension) and lower.endswith(extension):
            return WaveType(index)
    return WaveType.RAW