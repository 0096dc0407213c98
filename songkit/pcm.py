"""16-bit PCM sample helpers: conversion, volume, mixing and file reading."""

from __future__ import annotations

import struct
import time
from itertools import pairwise
from typing import BinaryIO, Iterable, Sequence

INT16_MAX = 32767
INT16_MIN = -32768

_SAMPLE = struct.Struct("<h")


def _f32(value: float) -> float:
    """Round a Python float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _clamp(value: int) -> int:
    return max(INT16_MIN, min(INT16_MAX, value))


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def index_of_max_value(values: Sequence[int]) -> int:
    """Return the index reached by the pairwise-increase scan, or -1 if empty.

    The scan moves to ``i + 1`` whenever ``values[i] < values[i + 1]``, so the
    result is the last position that is larger than its predecessor (0 if none).
    """
    if not values:
        return -1
    result = 0
    for index, (left, right) in enumerate(pairwise(values), start=1):
        if left < right:
            result = index
    return result


def _has_suffix(path: str, suffix: str) -> bool:
    dot = path.rfind(".")
    return dot >= 0 and path[dot:] == suffix


def is_aac_path(path: str) -> bool:
    """True if the text after the last dot of ``path`` is exactly ``.aac``."""
    return _has_suffix(path, ".aac")


def is_png_path(path: str) -> bool:
    """True if the text after the last dot of ``path`` is exactly ``.png``."""
    return _has_suffix(path, ".png")


def current_time_millis() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def read_samples(stream: BinaryIO, count: int) -> list[int]:
    """Read up to ``count`` little-endian 16-bit samples; empty at end of stream."""
    data = stream.read(count * 2)
    usable = len(data) - len(data) % 2
    return [value for (value,) in _SAMPLE.iter_unpack(data[:usable])]


def read_bytes(stream: BinaryIO, count: int) -> bytes:
    """Read up to ``count`` bytes; empty at end of stream."""
    return stream.read(count)


def mix_samples(a: int, b: int) -> int:
    """Mix two 16-bit samples, softening the sum when both share a sign."""
    if a < 0 and b < 0:
        tmp = (a + b) - _cdiv(a * b, INT16_MIN)
    elif a > 0 and b > 0:
        tmp = (a + b) - _cdiv(a * b, INT16_MAX)
    else:
        tmp = a + b
    return _clamp(tmp)


def mix_samples_float(a: float, b: float) -> int:
    """Mix two float samples into one 16-bit sample."""
    ia, ib = int(a), int(b)
    if a < 0 and b < 0:
        tmp = (ia + ib) - _cdiv(ia * ib, INT16_MIN)
    elif a > 0 and b > 0:
        tmp = (ia + ib) - _cdiv(ia * ib, INT16_MAX)
    else:
        tmp = int(_f32(_f32(a) + _f32(b)))
    return _clamp(tmp)


def sample_to_bytes(sample: int) -> bytes:
    """Encode a sample as two bytes, low byte first."""
    return (sample & 0xFFFF).to_bytes(2, "little")


def bytes_to_sample(data: bytes) -> int:
    """Decode two bytes, high byte first, into a signed 16-bit sample."""
    return int.from_bytes(bytes(data[:2]), "big", signed=True)


def adjust_volume(sample: int, volume: float) -> int:
    """Scale a sample by ``volume``, truncating and clamping to 16 bits."""
    return _clamp(int(_f32(sample * _f32(volume))))


def samples_to_bytes(samples: Iterable[int]) -> bytes:
    """Encode samples as little-endian 16-bit PCM."""
    return b"".join(sample_to_bytes(sample) for sample in samples)


def bytes_to_samples(data: bytes, volume: float = 1.0) -> list[int]:
    """Decode little-endian 16-bit PCM, applying ``volume`` unless it is 1.0.

    A trailing odd byte is ignored.
    """
    usable = len(data) - len(data) % 2
    samples = [value for (value,) in _SAMPLE.iter_unpack(bytes(data[:usable]))]
    if volume != 1.0:
        return [adjust_volume(sample, volume) for sample in samples]
    return samples


def resample_nearest(samples: Sequence[int], count: int, ratio: float) -> list[int]:
    """Pick ``count`` samples at positions ``int(i * ratio)``."""
    step = _f32(ratio)
    return [samples[int(_f32(i * step))] for i in range(count)]


def adjust_samples_volume(samples: Iterable[int], volume: float) -> list[int]:
    """Return the samples scaled by ``volume``; unchanged when it is 1.0."""
    if volume != 1.0:
        return [adjust_volume(sample, volume) for sample in samples]
    return list(samples)


def mix_tracks(accompany: Iterable[int], audio: Iterable[int]) -> list[int]:
    """Mix two equally long tracks sample by sample."""
    return [mix_samples(acc, voice) for acc, voice in zip(accompany, audio, strict=True)]


def mix_tracks_to_bytes(accompany: Iterable[int], audio: Iterable[int]) -> bytes:
    """Mix two equally long tracks and encode the result as PCM bytes."""
    return samples_to_bytes(mix_tracks(accompany, audio))