# phosynth

Building blocks for a diphone speech synthesizer. They cover audio output,
sample encoding, phones with pitch patterns, and error reporting.

## Modules

- `phosynth.audio` handles sample conversion and audio file headers.
  - `AudioType` lists the sample types: `LIN16`, `LIN8`, `ULAW`, `ALAW`.
  - `convert_samples(samples, sample_type)` encodes 16-bit linear samples as
    bytes. `LIN16` uses the machine's native byte order.
  - `zero_samples(count, sample_type)` returns silence in the given type.
  - `linear_to_lin8(sample)` converts one sample to unsigned 8-bit.
  - `WaveType` lists the file formats: `RAW`, `WAV`, `AU`, `AIF`, `AIFF`.
  - `find_file_format(name)` picks the format from the file extension. The
    match ignores case. A name with no known extension gives `RAW`.
  - `header_bytes(file_format, audio_length, sample_rate)` builds the header
    for `audio_length` 16-bit samples. `write_header(...)` writes it to a
    binary stream and returns the number of bytes written. A RAW header is
    empty. An AU header for length 0 uses `0xFFFFFFFF` as the size, which
    means "unknown". The AIFF header always records a 16000 Hz rate.
  - `write_samples(samples, file_format, stream)` writes 16-bit samples in
    the format's byte order: little-endian for WAV, big-endian for AU and
    AIFF, native for RAW. It returns the number of samples written.
  - `needs_byteswap(file_format)` tells whether the format's byte order
    differs from the machine's.
- `phosynth.g711` converts single values between 16-bit linear PCM, u-law
  and A-law: `linear2ulaw`, `ulaw2linear`, `linear2alaw`, `alaw2linear`,
  `ulaw2alaw`, `alaw2ulaw`.
- `phosynth.phone` holds the phone types.
  - `Phone(name, length)` is a phoneme with its length in milliseconds and a
    list of `PitchPoint(pos, freq)` in `pitch_points`.
  - `append_f0(pos, f0)` takes the position as a percentage of the length
    and stores it in milliseconds.
  - `reset()` clears the pitch points.
  - `apply_ratio(ratio)` multiplies the length and the positions by `ratio`
    and divides the frequencies by it.
- `phosynth.states.PhoState` gives the outcome of asking a parser for the
  next phone: `OK`, `EOF`, `FLUSH` or `ERROR`. `ends_chunk()` is true for
  `EOF` and `FLUSH`.
- `phosynth.errors` handles errors and warnings.
  - `ErrorCode` lists the numeric codes.
  - `MbrolaError(code, message)` is the exception raised on failure, for
    example for an unknown sample type.
  - `warn(code, message)` issues an `MbrolaWarning` and returns it.

## Install

```
pip install .
```

## Writing audio

```python
from phosynth.audio import find_file_format, write_header, write_samples

fmt = find_file_format("out.wav")  # WaveType.WAV
samples = [0, 1000, -1000]
with open("out.wav", "wb") as out:
    write_header(fmt, len(samples), 16000, out)
    write_samples(samples, fmt, out)
```

## Encoding samples

```python
from phosynth.audio import AudioType, convert_samples
from phosynth.g711 import linear2ulaw, ulaw2linear

ulaw_bytes = convert_samples([0, 1000, -1000], AudioType.ULAW)
code = linear2ulaw(1000)
approx = ulaw2linear(code)
```

## Phones and pitch

```python
from phosynth.phone import Phone

phone = Phone("a", 100.0)
phone.append_f0(0, 120.0)
phone.append_f0(100, 140.0)  # stored at pos 100.0 ms
phone.apply_ratio(2.0)       # length 200 ms, frequencies halved
```

## What the package does not do

The package does not include:

- a reader for phonetic (`.pho`) input,
- pitch interpolation across phones,
- a diphone database,
- a synthesis engine,
- a command-line program.

It provides the audio, phone, state and error pieces that such parts would
use.

## Running the tests

```
pip install .[test]
pytest
```