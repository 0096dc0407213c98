# songkit

Small, dependency-free building blocks for audio and video tooling.

## Modules

- `songkit.pcm`: 16-bit PCM sample helpers.
  - `mix_samples(a, b)` mixes two samples: when both share a sign the sum is
    softened by their product, and the result is clamped to 16 bits.
    `mix_samples_float` does the same for float inputs.
  - `mix_tracks(accompany, audio)` mixes two equally long tracks sample by
    sample (tracks of different length raise `ValueError`);
    `mix_tracks_to_bytes` returns the mix as little-endian PCM bytes.
  - `adjust_volume(sample, volume)` and `adjust_samples_volume(samples, volume)`
    scale samples, truncating and clamping to 16 bits.
  - `samples_to_bytes` / `bytes_to_samples(data, volume=1.0)` convert between
    samples and little-endian 16-bit PCM; `sample_to_bytes` encodes one sample
    low byte first, `bytes_to_sample` decodes two bytes high byte first.
  - `resample_nearest(samples, count, ratio)` picks `count` samples at
    positions `int(i * ratio)`.
  - `read_samples(stream, count)` and `read_bytes(stream, count)` read from a
    binary stream and return an empty result at end of stream.
  - Also: `index_of_max_value`, `is_aac_path`, `is_png_path`,
    `current_time_millis`.
- `songkit.wav`: the 44-byte RIFF/WAVE header.
  - `WaveHeader` with `to_bytes()` and `WaveHeader.from_bytes(data)`.
  - `read_wave_header(path)` reads a file's header (a file shorter than 44
    bytes gives an all-zero header).
  - `pcm_to_wav(pcm_path, wav_path, sample_rate, channels)` wraps raw PCM in a
    header and returns the header written; `wav_to_pcm(wav_path, pcm_path)`
    copies everything after the first 44 bytes.
- `songkit.matrix`: column-major 4x4 matrices as flat 16-element lists:
  `identity`, `rotation`, `multiply`, `scale`, `translate`,
  `translation_matrix`, `rotate`, `look_at`, `frustum`. Functions return new
  lists rather than changing their arguments.
- `songkit.frames`: frame records `AudioFrame` and `VideoFrame`, with
  `MovieFrameType`. `AudioFrame` tracks whether its data has been consumed
  (`fill_full_data`, `use_up_data`, `is_data_use_up`); `VideoFrame.clone()`
  copies the YUV 4:2:0 planes.
- `songkit.messaging`: a thread-safe FIFO `MessageQueue` (`enqueue`,
  `dequeue(block=True)`, `size`, `flush`, `abort`), `Message` and `Handler`.
  After `abort()`, enqueueing and dequeueing raise `QueueAborted`.
  `Message.execute()` returns `MESSAGE_QUEUE_LOOP_QUIT_FLAG` for a quit
  message, 1 after its handler ran, and 0 without a handler.
- `songkit.worker`: `Worker`, a base class whose `handle_run` runs inline
  (`start`) or on a background thread (`start_async`, then `wait`), with
  `wait_on_notify` / `notify` for simple signalling.
- `songkit.texcoords`: texture-coordinate sets (eight floats, triangle-strip
  order) for drawing a texture into a view: `crop_ratio`, `fill_offsets`,
  `autofit_tex_coords`, `view_fill_tex_coords`, `texture_fill_tex_coords`,
  `square_crop_tex_coords`, plus the constants `QUAD_VERTICES`,
  `FULL_TEX_COORDS` and `VIEW_TEX_COORDS`.

## What it does not do

songkit only computes values and moves bytes. It does not decode or encode
compressed audio or video, play or record sound, resample beyond
nearest-neighbour picking, or draw anything: the texture coordinates and
matrices are meant to be handed to whatever graphics layer you use.

## Install

```
pip install .
```

## Example

```python
from songkit.pcm import mix_tracks_to_bytes
from songkit.wav import pcm_to_wav

accompany = [1000, -2000, 30000]
voice = [500, -1000, 10000]
with open("mixed.pcm", "wb") as out:
    out.write(mix_tracks_to_bytes(accompany, voice))

header = pcm_to_wav("mixed.pcm", "mixed.wav", sample_rate=44100, channels=2)
print(header.total_audio_len)  # 6
```

## Tests

```
pip install ".[test]"
pytest
```