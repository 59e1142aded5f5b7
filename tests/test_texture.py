import struct

import pytest

from crema.texture import padded_bytes_per_row, rgb_to_rgba, unpack_padded_rows


def _pack_rows(rgba, width, height, stride):
    out = bytearray(stride * height)
    row_len = width * 4
    for row in range(height):
        values = rgba[row * row_len : (row + 1) * row_len]
        struct.pack_into(f"<{row_len}f", out, row * stride, *values)
    return bytes(out)


def test_padded_bytes_per_row_single_texel():
    assert padded_bytes_per_row(1) == 256


@pytest.mark.parametrize("width", [1, 15, 16, 17, 100, 4000])
def test_padded_bytes_per_row_invariants(width):
    padded = padded_bytes_per_row(width)
    assert padded % 256 == 0
    assert padded >= width * 16
    assert padded - width * 16 < 256


def test_padded_bytes_per_row_custom_alignment():
    assert padded_bytes_per_row(3, align=16) == 3 * 16


def test_padded_bytes_per_row_rejects_bad_args():
    with pytest.raises(ValueError):
        padded_bytes_per_row(-1)
    with pytest.raises(ValueError):
        padded_bytes_per_row(4, align=0)


def test_rgb_to_rgba_adds_opaque_alpha():
    assert rgb_to_rgba([0.5, 0.25, 0.125, 1.0, 0.0, 0.75]) == [
        0.5, 0.25, 0.125, 1.0, 1.0, 0.0, 0.75, 1.0,
    ]


def test_rgb_to_rgba_rejects_partial_pixel():
    with pytest.raises(ValueError):
        rgb_to_rgba([0.1, 0.2])


@pytest.mark.parametrize("width,height", [(1, 1), (4, 2), (17, 3)])
def test_round_trip_through_padded_rows(width, height):
    rgb = [((i % 8) / 8.0) for i in range(width * height * 3)]
    stride = padded_bytes_per_row(width)
    data = _pack_rows(rgb_to_rgba(rgb), width, height, stride)
    assert len(data) == stride * height
    assert unpack_padded_rows(data, width, height, stride) == rgb


def test_unpack_tight_rows():
    rgb = [0.5, 0.25, 0.75, 0.0, 1.0, 0.5]
    data = _pack_rows(rgb_to_rgba(rgb), 2, 1, 32)
    assert unpack_padded_rows(data, 2, 1, 32) == rgb


def test_unpack_zero_height_is_empty():
    assert unpack_padded_rows(b"", 4, 0, 256) == []


def test_unpack_rejects_short_data():
    with pytest.raises(ValueError):
        unpack_padded_rows(b"\x00" * 100, 2, 2, 256)


def test_unpack_rejects_small_stride():
    with pytest.raises(ValueError):
        unpack_padded_rows(b"\x00" * 1024, 4, 1, 32)