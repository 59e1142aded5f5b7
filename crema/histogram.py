"""Per-channel luminance histograms of 8-bit RGBA pixel data."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

HISTOGRAM_HEIGHT = 120.0
NUM_BINS = 256

CHANNEL_COLORS = (
    (1.0, 0.0, 0.0, 0.4),
    (0.0, 1.0, 0.0, 0.4),
    (0.0, 0.4, 1.0, 0.4),
)

Point = tuple[float, float]
Color = tuple[float, float, float, float]


def _bins(values: bytes) -> list[int]:
    counts = Counter(values)
    return [counts.get(i, 0) for i in range(NUM_BINS)]


@dataclass
class HistogramData:
    """Counts of each 8-bit value in the red, green and blue channels."""

    r: list[int]
    g: list[int]
    b: list[int]
    max_count: int

    @classmethod
    def from_rgba_u8(cls, pixels: bytes | bytearray | Iterable[int]) -> HistogramData:
        """Count RGBA pixels; a trailing partial pixel is ignored."""
        data = bytes(pixels)
        data = data[: len(data) // 4 * 4]
        r, g, b = _bins(data[0::4]), _bins(data[1::4]), _bins(data[2::4])
        max_count = max(max(r), max(g), max(b), 1)
        return cls(r=r, g=g, b=b, max_count=max_count)

    def outlines(self, width: float, height: float) -> list[tuple[Color, list[Point]]]:
        """Closed, log-scaled area outlines for each channel with its fill colour."""
        if self.max_count == 0:
            return []
        bin_width = width / NUM_BINS
        top = math.log1p(self.max_count)
        shapes = []
        for bins, color in zip((self.r, self.g, self.b), CHANNEL_COLORS):
            points: list[Point] = [(0.0, height)]
            points.extend(
                (i * bin_width, height - math.log1p(count) / top * height)
                for i, count in enumerate(bins)
            )
            points.append((width, height))
            shapes.append((color, points))
        return shapes


def compute_histogram(rgba_pixels: bytes | bytearray | Iterable[int]) -> HistogramData:
    """Histogram of raw RGBA u8 pixel data."""
    return HistogramData.from_rgba_u8(rgba_pixels)