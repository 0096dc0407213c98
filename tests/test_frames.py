import pytest

from songkit.frames import AudioFrame, MovieFrame, MovieFrameType, VideoFrame


def _video(width=4, height=2):
    n = width * height
    return VideoFrame(
        luma=bytearray(range(n)),
        chroma_b=bytearray(range(100, 100 + n // 4)),
        chroma_r=bytearray(range(200, 200 + n // 4)),
        width=width,
        height=height,
    )


def test_movie_frame_is_abstract():
    with pytest.raises(TypeError):
        MovieFrame()


def test_frame_types():
    assert AudioFrame().frame_type is MovieFrameType.AUDIO
    assert VideoFrame().frame_type is MovieFrameType.VIDEO


def test_audio_frame_defaults():
    frame = AudioFrame()
    assert (frame.position, frame.duration, frame.size, frame.samples) == (0.0, 0.0, 0, None)
    assert frame.is_data_use_up() is True


def test_audio_frame_fill_and_use_up():
    frame = AudioFrame(samples=b"\x01\x02", size=2)
    frame.fill_full_data()
    assert frame.is_data_use_up() is False
    frame.use_up_data()
    assert frame.is_data_use_up() is True


def test_clone_copies_planes_and_size():
    original = _video()
    copy = original.clone()
    assert (copy.width, copy.height) == (original.width, original.height)
    assert copy.luma == original.luma
    assert copy.chroma_b == original.chroma_b
    assert copy.chroma_r == original.chroma_r


def test_clone_is_independent():
    original = _video()
    copy = original.clone()
    original.luma[0] = 255
    original.chroma_r[0] = 7
    assert copy.luma[0] == 0
    assert copy.chroma_r[0] == 200


def test_clone_truncates_to_plane_sizes():
    original = _video()
    original.luma.extend(b"\xff\xff")
    original.chroma_b.extend(b"\xff")
    copy = original.clone()
    assert len(copy.luma) == 8
    assert len(copy.chroma_b) == 2


def test_clone_does_not_copy_timing():
    original = _video()
    original.position = 3.5
    original.duration = 0.04
    copy = original.clone()
    assert (copy.position, copy.duration) == (0.0, 0.0)


def test_clone_rejects_short_plane():
    original = _video()
    original.luma = bytearray(3)
    with pytest.raises(ValueError):
        original.clone()


def test_clone_rejects_missing_plane():
    original = _video()
    original.chroma_b = None
    with pytest.raises(ValueError):
        original.clone()