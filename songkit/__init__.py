"""PCM mixing and conversion, WAV headers, 4x4 matrices, frame records, message queues, workers and texture coordinates."""

__version__ = "0.1.0"