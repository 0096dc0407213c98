"""Reading and writing the 44-byte canonical WAV header around raw PCM."""

from __future__ import annotations

import shutil
import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

HEADER_SIZE = 44
_COPY_CHUNK = 4096

_LAYOUT = struct.Struct("<4sI4s4sIHHIIHH4sI")

PathType = Union[str, "PathLike[str]"]


@dataclass
class WaveHeader:
    """Fields of a canonical WAV header."""

    total_audio_len: int = 0
    total_data_len: int = 0
    sample_rate: int = 0
    channels: int = 0
    byte_rate: int = 0

    def to_bytes(self) -> bytes:
        """Encode as a 44-byte header; block align 4 and 16 bits per sample."""
        return _LAYOUT.pack(
            b"RIFF",
            self.total_data_len & 0xFFFFFFFF,
            b"WAVE",
            b"fmt ",
            16,
            1,
            self.channels & 0xFF,
            self.sample_rate & 0xFFFFFFFF,
            self.byte_rate & 0xFFFFFFFF,
            2 * 16 // 8,
            16,
            b"data",
            self.total_audio_len & 0xFFFFFFFF,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "WaveHeader":
        """Decode the first 44 bytes; 32-bit fields are read as signed."""
        if len(data) < HEADER_SIZE:
            raise ValueError(f"WAV header needs {HEADER_SIZE} bytes, got {len(data)}")
        return cls(
            total_audio_len=struct.unpack_from("<i", data, 40)[0],
            total_data_len=struct.unpack_from("<i", data, 4)[0],
            sample_rate=struct.unpack_from("<i", data, 24)[0],
            channels=data[22],
            byte_rate=struct.unpack_from("<i", data, 28)[0],
        )


def read_wave_header(path: PathType) -> WaveHeader:
    """Read the header of a WAV file.

    A file shorter than the header yields a header with every field zero.
    """
    with open(path, "rb") as stream:
        data = stream.read(HEADER_SIZE)
    if len(data) < HEADER_SIZE:
        return WaveHeader()
    return WaveHeader.from_bytes(data)


def wav_to_pcm(wav_path: PathType, pcm_path: PathType) -> None:
    """Copy everything after the 44-byte header of a WAV file to a PCM file."""
    with open(wav_path, "rb") as source, open(pcm_path, "wb") as target:
        source.read(HEADER_SIZE)
        shutil.copyfileobj(source, target, _COPY_CHUNK)


def pcm_to_wav(pcm_path: PathType, wav_path: PathType, sample_rate: int, channels: int) -> WaveHeader:
    """Wrap a raw PCM file in a WAV header and return the header written."""
    with open(pcm_path, "rb") as source, open(wav_path, "wb") as target:
        source.seek(0, 2)
        total_audio_len = source.tell()
        source.seek(0)
        header = WaveHeader(
            total_audio_len=total_audio_len,
            total_data_len=total_audio_len + 36 + HEADER_SIZE,
            sample_rate=sample_rate,
            channels=channels,
            byte_rate=sample_rate * channels,
        )
        target.write(header.to_bytes())
        shutil.copyfileobj(source, target, _COPY_CHUNK)
    return header