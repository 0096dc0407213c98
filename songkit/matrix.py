"""4x4 column-major float matrices stored as flat 16-element lists."""

from __future__ import annotations

import math
from typing import Sequence

PI = 3.1415926

Matrix = list[float]


def _check(m: Sequence[float]) -> None:
    if len(m) != 16:
        raise ValueError(f"a 4x4 matrix needs 16 values, got {len(m)}")


def _normalize(x: float, y: float, z: float) -> tuple[float, float, float]:
    norm = 1.0 / math.sqrt(x * x + y * y + z * z)
    return x * norm, y * norm, z * norm


def identity() -> Matrix:
    """Return the identity matrix."""
    return [1.0 if i % 5 == 0 else 0.0 for i in range(16)]


def rotation(angle: float, x: float, y: float, z: float) -> Matrix:
    """Return a rotation of ``angle`` degrees about the axis (x, y, z)."""
    m = [0.0] * 15 + [1.0]
    a = angle * PI / 180.0
    s = math.sin(a)
    c = math.cos(a)
    if (x, y, z) == (1.0, 0.0, 0.0):
        m[5] = m[10] = c
        m[6] = s
        m[9] = -s
        m[0] = 1.0
    elif (x, y, z) == (0.0, 1.0, 0.0):
        m[0] = m[10] = c
        m[8] = s
        m[2] = -s
        m[5] = 1.0
    elif (x, y, z) == (0.0, 0.0, 1.0):
        m[0] = m[5] = c
        m[1] = s
        m[4] = -s
        m[10] = 1.0
    else:
        x, y, z = _normalize(x, y, z)
        nc = 1.0 - c
        xy, yz, zx = x * y, y * z, z * x
        xs, ys, zs = x * s, y * s, z * s
        m[0] = x * x * nc + c
        m[4] = xy * nc - zs
        m[8] = zx * nc + ys
        m[1] = xy * nc + zs
        m[5] = y * y * nc + c
        m[9] = yz * nc - xs
        m[2] = zx * nc - ys
        m[6] = yz * nc + xs
        m[10] = z * z * nc + c
    return m


def multiply(lhs: Sequence[float], rhs: Sequence[float]) -> Matrix:
    """Return the product ``lhs * rhs``."""
    _check(lhs)
    _check(rhs)
    return [
        sum(lhs[k * 4 + row] * rhs[col * 4 + k] for k in range(4))
        for col in range(4)
        for row in range(4)
    ]


def scale(m: Sequence[float], x: float, y: float, z: float) -> Matrix:
    """Return ``m`` with its first three columns scaled by x, y and z."""
    _check(m)
    factors = [x] * 4 + [y] * 4 + [z] * 4 + [1.0] * 4
    return [value * factor for value, factor in zip(m, factors)]


def translate(m: Sequence[float], x: float, y: float, z: float) -> Matrix:
    """Return ``m`` followed by a translation of (x, y, z)."""
    _check(m)
    result = list(m)
    for row in range(4):
        result[12 + row] += m[row] * x + m[4 + row] * y + m[8 + row] * z
    return result


def translation_matrix(x: float, y: float, z: float) -> Matrix:
    """Return the identity with x, y and z stored at indices 3, 7 and 11."""
    m = identity()
    m[3] = x
    m[7] = y
    m[11] = z
    return m


def rotate(m: Sequence[float], angle: float, x: float, y: float, z: float) -> Matrix:
    """Return ``m`` multiplied by a rotation of ``angle`` degrees about (x, y, z)."""
    return multiply(m, rotation(angle, x, y, z))


def look_at(
    eye_x: float,
    eye_y: float,
    eye_z: float,
    center_x: float,
    center_y: float,
    center_z: float,
    up_x: float,
    up_y: float,
    up_z: float,
) -> Matrix:
    """Return a view matrix looking from the eye towards the center."""
    fx, fy, fz = _normalize(center_x - eye_x, center_y - eye_y, center_z - eye_z)
    sx, sy, sz = _normalize(
        fy * up_z - fz * up_y,
        fz * up_x - fx * up_z,
        fx * up_y - fy * up_x,
    )
    ux = sy * fz - sz * fy
    uy = sz * fx - sx * fz
    uz = sx * fy - sy * fx
    m = [
        sx, ux, -fx, 0.0,
        sy, uy, -fy, 0.0,
        sz, uz, -fz, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]
    return translate(m, -eye_x, -eye_y, -eye_z)


def frustum(left: float, right: float, bottom: float, top: float, near: float, far: float) -> Matrix:
    """Return a perspective projection for the given frustum planes."""
    r_width = 1.0 / (right - left)
    r_height = 1.0 / (top - bottom)
    r_depth = 1.0 / (near - far)
    m = [0.0] * 16
    m[0] = 2.0 * (near * r_width)
    m[5] = 2.0 * (near * r_height)
    m[8] = 2.0 * ((right + left) * r_width)
    m[9] = (top + bottom) * r_height
    m[10] = (far + near) * r_depth
    m[14] = 2.0 * (far * near * r_depth)
    m[11] = -1.0
    return m