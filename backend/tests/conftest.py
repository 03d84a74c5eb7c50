"""Shared test fixtures."""

from __future__ import annotations

import io
from collections.abc import Sequence

import numpy as np
import pytest
from PIL import Image

from asciisvg.engine.context import AsciiSettings, MapStrategy, PixelBuffer


# Sample SVGs

WHITE_SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
  <rect x="0" y="0" width="10" height="10" fill="#ffffff"/>
</svg>'''

HALF_FILLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="40" height="20" viewBox="0 0 40 20">
  <rect x="0" y="0" width="20" height="20" fill="#ffffff"/>
</svg>'''

GRADIENT_CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="120" height="80" viewBox="0 0 120 80">
  <defs>
    <linearGradient id="g" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" stop-color="#ffffff"/>
      <stop offset="100%" stop-color="#000000"/>
    </linearGradient>
  </defs>
  <circle cx="60" cy="40" r="35" fill="url(#g)"/>
</svg>'''

MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"><rect'


class SequencePicker:
    """Deterministic stand-in for random.Random: cycles through the palette."""

    def __init__(self) -> None:
        self.calls = 0

    def choice(self, seq: Sequence[str]) -> str:
        ch = seq[self.calls % len(seq)]
        self.calls += 1
        return ch


def make_settings(**overrides) -> AsciiSettings:
    values = dict(
        color="#7ED957",
        background_color="#000000",
        font_size=10.0,
        grid_spacing=1,
        characters="#",
        invert=False,
        threshold=0,
        map_strategy=MapStrategy.LUMINANCE,
        variable_size=False,
    )
    values.update(overrides)
    return AsciiSettings(**values)


def solid_buffer(width: int, height: int, rgba: tuple[int, int, int, int]) -> PixelBuffer:
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[:, :] = rgba
    return PixelBuffer.from_array(arr)


def png_bytes(width: int, height: int, rgba: tuple[int, int, int, int]) -> bytes:
    buf = io.BytesIO()
    Image.new("RGBA", (width, height), rgba).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def picker() -> SequencePicker:
    return SequencePicker()


@pytest.fixture
def white_buffer() -> PixelBuffer:
    return solid_buffer(10, 10, (255, 255, 255, 255))


@pytest.fixture
def gradient_buffer() -> PixelBuffer:
    """16×8 horizontal ramp: x → gray level x * 17, fully opaque."""
    arr = np.zeros((8, 16, 4), dtype=np.uint8)
    for x in range(16):
        arr[:, x] = (x * 17, x * 17, x * 17, 255)
    return PixelBuffer.from_array(arr)
