import math

import pytest

from crema.histogram import NUM_BINS, HistogramData, compute_histogram


def test_histogram_from_solid_color():
    pixels = bytes([255, 0, 0, 255] * 4)
    hist = HistogramData.from_rgba_u8(pixels)
    assert hist.r[255] == 4
    assert hist.r[0] == 0
    assert hist.g[0] == 4
    assert hist.b[0] == 4
    assert hist.max_count == 4


def test_histogram_empty_image():
    hist = HistogramData.from_rgba_u8(b"")
    assert hist.max_count == 1
    assert sum(hist.r) == 0


def test_histogram_gradient():
    pixels = bytearray()
    for i in range(256):
        pixels.extend([i, 128, 0, 255])
    hist = HistogramData.from_rgba_u8(pixels)
    assert hist.r == [1] * 256
    assert hist.g[128] == 256
    assert hist.b[0] == 256


def test_trailing_partial_pixel_ignored():
    hist = compute_histogram([10, 20, 30, 255, 10, 20])
    assert hist.r[10] == 1
    assert hist.g[20] == 1
    assert sum(hist.b) == 1


def test_compute_histogram_matches_direct_construction():
    pixels = bytes([1, 2, 3, 4, 5, 6, 7, 8])
    assert compute_histogram(pixels) == HistogramData.from_rgba_u8(pixels)


def test_outlines_shape():
    hist = compute_histogram(bytes([255, 0, 0, 255] * 4))
    shapes = hist.outlines(256.0, 100.0)
    assert len(shapes) == 3
    color, points = shapes[0]
    assert color == (1.0, 0.0, 0.0, 0.4)
    assert len(points) == NUM_BINS + 2
    assert points[0] == (0.0, 100.0)
    assert points[-1] == (256.0, 100.0)


def test_outlines_heights():
    hist = compute_histogram(bytes([255, 0, 0, 255] * 4))
    (_, red), (_, green), _ = hist.outlines(256.0, 100.0)
    # empty bin sits on the baseline, the fullest bin reaches the top
    assert red[1] == (0.0, 100.0)
    assert red[256] == pytest.approx((255.0, 0.0))
    assert green[1] == pytest.approx((0.0, 0.0))


def test_outlines_log_scale():
    pixels = bytes([0, 0, 0, 255] * 3 + [1, 0, 0, 255])
    hist = compute_histogram(pixels)
    _, red = hist.outlines(256.0, 10.0)[0]
    expected = 10.0 - math.log(2) / math.log(5) * 10.0
    assert red[2][1] == pytest.approx(expected)