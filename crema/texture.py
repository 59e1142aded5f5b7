"""Packing of RGB float images into RGBA texel rows and back."""

from __future__ import annotations

import struct
from typing import Iterable, Sequence

COPY_BYTES_PER_ROW_ALIGNMENT = 256
BYTES_PER_TEXEL = 4 * 4


def padded_bytes_per_row(width: int, align: int = COPY_BYTES_PER_ROW_ALIGNMENT) -> int:
    """Row size in bytes of RGBA f32 texels, rounded up to the copy alignment."""
    if width < 0:
        raise ValueError("width must not be negative")
    if align < 1:
        raise ValueError("align must be positive")
    unpadded = width * BYTES_PER_TEXEL
    return -(-unpadded // align) * align


def rgb_to_rgba(rgb: Sequence[float] | Iterable[float]) -> list[float]:
    """Interleaved RGB floats expanded to RGBA with opaque alpha."""
    values = list(rgb)
    if len(values) % 3:
        raise ValueError("RGB data length must be a multiple of 3")
    rgba: list[float] = []
    for i in range(0, len(values), 3):
        rgba.extend(values[i : i + 3])
        rgba.append(1.0)
    return rgba


def unpack_padded_rows(
    data: bytes | bytearray | memoryview, width: int, height: int, bytes_per_row: int
) -> list[float]:
    """RGB floats from little-endian RGBA f32 rows laid out with padded strides."""
    row_bytes = width * BYTES_PER_TEXEL
    if width < 0 or height < 0:
        raise ValueError("dimensions must not be negative")
    if bytes_per_row < row_bytes:
        raise ValueError("bytes_per_row is smaller than one row of texels")
    needed = 0 if height == 0 else bytes_per_row * (height - 1) + row_bytes
    if len(data) < needed:
        raise ValueError(f"texture data too short: need {needed} bytes, got {len(data)}")

    row_format = struct.Struct(f"<{width * 4}f")
    rgb: list[float] = []
    for row in range(height):
        texels = row_format.unpack_from(data, row * bytes_per_row)
        for i in range(0, len(texels), 4):
            rgb.extend(texels[i : i + 3])
    return rgb