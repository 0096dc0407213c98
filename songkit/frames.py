"""Decoded audio and video frame containers."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass


class MovieFrameType(enum.Enum):
    """Kind of a decoded frame."""

    NONE = 0
    AUDIO = 1
    VIDEO = 2


@dataclass
class MovieFrame(ABC):
    """A decoded frame with a presentation position and duration."""

    position: float = 0.0
    duration: float = 0.0

    @property
    @abstractmethod
    def frame_type(self) -> MovieFrameType:
        """The kind of this frame."""


@dataclass
class AudioFrame(MovieFrame):
    """A block of PCM bytes together with a consumed/filled flag."""

    samples: bytes | bytearray | None = None
    size: int = 0
    data_use_up: bool = True

    @property
    def frame_type(self) -> MovieFrameType:
        return MovieFrameType.AUDIO

    def fill_full_data(self) -> None:
        """Mark the frame as holding unread data."""
        self.data_use_up = False

    def use_up_data(self) -> None:
        """Mark the frame's data as consumed."""
        self.data_use_up = True

    def is_data_use_up(self) -> bool:
        """True when the frame's data has been consumed."""
        return self.data_use_up


@dataclass
class VideoFrame(MovieFrame):
    """A YUV 4:2:0 planar picture."""

    luma: bytearray | None = None
    chroma_b: bytearray | None = None
    chroma_r: bytearray | None = None
    width: int = 0
    height: int = 0

    @property
    def frame_type(self) -> MovieFrameType:
        return MovieFrameType.VIDEO

    def clone(self) -> "VideoFrame":
        """Copy the picture planes into a new frame.

        The luma plane contributes ``width * height`` bytes and each chroma
        plane a quarter of that. Position and duration are not copied.
        """
        luma_length = self.width * self.height
        chroma_length = luma_length // 4
        planes = (
            ("luma", self.luma, luma_length),
            ("chroma_b", self.chroma_b, chroma_length),
            ("chroma_r", self.chroma_r, chroma_length),
        )
        copies = []
        for name, plane, length in planes:
            if plane is None or len(plane) < length:
                raise ValueError(f"{name} plane holds fewer than {length} bytes")
            copies.append(bytearray(plane[:length]))
        return VideoFrame(
            luma=copies[0],
            chroma_b=copies[1],
            chroma_r=copies[2],
            width=self.width,
            height=self.height,
        )