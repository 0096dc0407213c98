import pytest

from songkit.wav import (
    HEADER_SIZE,
    WaveHeader,
    pcm_to_wav,
    read_wave_header,
    wav_to_pcm,
)


def _header():
    return WaveHeader(
        total_audio_len=88200,
        total_data_len=88280,
        sample_rate=44100,
        channels=2,
        byte_rate=88200,
    )


def test_header_layout():
    data = _header().to_bytes()
    assert len(data) == HEADER_SIZE
    assert data[0:4] == b"RIFF"
    assert data[8:16] == b"WAVEfmt "
    assert data[36:40] == b"data"
    assert data[16:24] == b"\x10\x00\x00\x00\x01\x00\x02\x00"
    assert data[32:36] == b"\x04\x00\x10\x00"


def test_header_round_trip():
    header = _header()
    assert WaveHeader.from_bytes(header.to_bytes()) == header


def test_header_fields_are_read_signed():
    header = WaveHeader(sample_rate=0xFFFFFFFF)
    assert WaveHeader.from_bytes(header.to_bytes()).sample_rate == -1


def test_from_bytes_too_short():
    with pytest.raises(ValueError):
        WaveHeader.from_bytes(b"RIFF")


def test_pcm_wav_round_trip(tmp_path):
    payload = bytes(range(256)) * 40
    pcm_file = tmp_path / "in.pcm"
    wav_file = tmp_path / "out.wav"
    back_file = tmp_path / "back.pcm"
    pcm_file.write_bytes(payload)

    written = pcm_to_wav(pcm_file, wav_file, 44100, 2)
    assert wav_file.stat().st_size == HEADER_SIZE + len(payload)

    header = read_wave_header(wav_file)
    assert header == written
    assert header.total_audio_len == len(payload)
    assert header.total_data_len == len(payload) + 36 + HEADER_SIZE
    assert header.sample_rate == 44100
    assert header.channels == 2
    assert header.byte_rate == 44100 * 2

    wav_to_pcm(wav_file, back_file)
    assert back_file.read_bytes() == payload


def test_read_wave_header_short_file(tmp_path):
    short = tmp_path / "short.wav"
    short.write_bytes(b"RIFF1234")
    assert read_wave_header(short) == WaveHeader()


def test_read_wave_header_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_wave_header(tmp_path / "missing.wav")


def test_wav_to_pcm_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        wav_to_pcm(tmp_path / "missing.wav", tmp_path / "out.pcm")