"""Texture coordinates for fitting, filling and cropping a picture into a view.

Coordinates are returned as eight floats, four (s, t) pairs in triangle-strip
order matching the quad ``(-1, -1), (1, -1), (-1, 1), (1, 1)``.
"""

from __future__ import annotations

import struct

TexCoords = tuple[float, float, float, float, float, float, float, float]

QUAD_VERTICES: TexCoords = (-1.0, -1.0, 1.0, -1.0, -1.0, 1.0, 1.0, 1.0)
"""Full-screen quad in triangle-strip order."""

FULL_TEX_COORDS: TexCoords = (0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0)
"""The whole texture, upright."""

VIEW_TEX_COORDS: TexCoords = (0.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0)
"""The whole texture, flipped vertically, as used when drawing to a view."""


def _f32(value: float) -> float:
    """Round a Python float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _require_positive(**sizes: int) -> None:
    for name, value in sizes.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def crop_ratio(screen_width: int, screen_height: int, tex_width: int, tex_height: int) -> float:
    """Fraction of the texture height to cut from each of top and bottom.

    The texture is scaled to the screen width; the ratio is negative when the
    scaled texture is shorter than the screen.
    """
    _require_positive(
        screen_width=screen_width,
        screen_height=screen_height,
        tex_width=tex_width,
        tex_height=tex_height,
    )
    fit_height = int(_f32(_f32(_f32(float(tex_height) * screen_width) / tex_width) + 0.5))
    if fit_height == 0:
        raise ValueError("texture scales to zero height")
    return _f32(float(fit_height - screen_height) / (2 * fit_height))


def fill_offsets(view_width: int, view_height: int, tex_width: int, tex_height: int) -> tuple[float, float]:
    """Horizontal and vertical texture offsets that make the texture fill the view.

    A texture taller (in aspect) than the view is cropped vertically, a wider
    one horizontally; equal aspects need no offset.
    """
    _require_positive(
        view_width=view_width,
        view_height=view_height,
        tex_width=tex_width,
        tex_height=tex_height,
    )
    texture_aspect = _f32(float(tex_height) / float(tex_width))
    view_aspect = _f32(float(view_height) / float(view_width))
    x_offset = 0.0
    y_offset = 0.0
    if texture_aspect > view_aspect:
        expected_height = int(_f32(_f32(_f32(float(tex_height) * view_width) / float(tex_width)) + 0.5))
        y_offset = _f32(float(expected_height - view_height) / (2 * expected_height))
    elif texture_aspect < view_aspect:
        expected_width = int(_f32(float(tex_height * view_width)) / _f32(float(view_height)) + 0.5)
        x_offset = _f32(float(tex_width - expected_width) / (2 * tex_width))
    return x_offset, y_offset


def autofit_tex_coords(screen_width: int, screen_height: int, tex_width: int, tex_height: int) -> TexCoords:
    """Coordinates that crop the texture vertically to fit a portrait screen."""
    ratio = max(crop_ratio(screen_width, screen_height, tex_width, tex_height), 0.0)
    upper = _f32(1.0 - ratio)
    return (0.0, ratio, 1.0, ratio, 0.0, upper, 1.0, upper)


def view_fill_tex_coords(screen_width: int, screen_height: int, tex_width: int, tex_height: int) -> TexCoords:
    """Vertically flipped coordinates that make the texture fill a screen."""
    x, y = fill_offsets(screen_width, screen_height, tex_width, tex_height)
    right = _f32(1.0 - x)
    top = _f32(1.0 - y)
    return (x, top, right, top, x, y, right, y)


def texture_fill_tex_coords(view_width: int, view_height: int, tex_width: int, tex_height: int) -> TexCoords:
    """Upright coordinates that make the texture fill an off-screen target."""
    x, y = fill_offsets(view_width, view_height, tex_width, tex_height)
    right = _f32(1.0 - x)
    top = _f32(1.0 - y)
    return (x, y, right, y, x, top, right, top)


def square_crop_tex_coords(original_width: int, original_height: int) -> TexCoords:
    """Coordinates that take a centred square band out of the texture height."""
    _require_positive(original_width=original_width, original_height=original_height)
    square_length = min(original_width, original_height)
    rectangle_length = original_height if original_height > square_length else original_width
    factor = _f32(float(rectangle_length - square_length) / float(rectangle_length))
    from_y = _f32(factor / 2)
    to_y = _f32(1.0 - factor / 2)
    return (0.0, from_y, 1.0, from_y, 0.0, to_y, 1.0, to_y)