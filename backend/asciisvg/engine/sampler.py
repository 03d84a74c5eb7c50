"""Grid sampler / glyph mapper — PixelBuffer + AsciiSettings → positioned glyphs.

Samples are taken at the top-left corner of each grid cell (no averaging),
walking rows top-to-bottom and columns left-to-right. That walk order is the
emission order of the glyphs in the output document.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Protocol, Sequence

import numpy as np
from numpy.typing import NDArray

from asciisvg.engine.context import (
    RGBA_CHANNELS,
    AsciiSettings,
    GenerationResult,
    GlyphDescriptor,
    MapStrategy,
    PixelBuffer,
)
from asciisvg.engine.errors import InvalidSettingsError
from asciisvg.svg.serializer import serialize_document

logger = logging.getLogger(__name__)

# ITU-R BT.709 luma weights.
_LUMA_R = 0.2126
_LUMA_G = 0.7152
_LUMA_B = 0.0722

# 8-bit channel ceiling; values live in [0, 255].
_MAX_VALUE = 255.0

# Variable-size glyphs below this size are not perceptible and are dropped.
_MIN_VISIBLE_FONT_SIZE = 0.5


class CharacterPicker(Protocol):
    """Anything with ``random.Random.choice`` semantics."""

    def choice(self, seq: Sequence[str]) -> str: ...


def luminance(r, g, b):
    """Weighted RGB sum. Works on scalars and numpy arrays alike."""
    return _LUMA_R * r + _LUMA_G * g + _LUMA_B * b


def validate_settings(settings: AsciiSettings) -> None:
    if not settings.characters:
        raise InvalidSettingsError("character palette is empty")
    if not math.isfinite(settings.font_size) or settings.font_size <= 0:
        raise InvalidSettingsError(f"font size must be positive, got {settings.font_size}")


def sample_values(
    pixels: NDArray[np.float64],
    strategy: MapStrategy,
    invert: bool,
) -> NDArray[np.float64]:
    """Scalar value per sample from an N×4 RGBA array, after inversion."""
    r, g, b, a = pixels[:, 0], pixels[:, 1], pixels[:, 2], pixels[:, 3]

    if strategy == MapStrategy.OPACITY:
        values = a.copy()
    else:
        # Fully transparent pixels are absent, not black
        values = np.where(a == 0, 0.0, luminance(r, g, b))

    if invert:
        values = _MAX_VALUE - values
    return values


def map_glyphs(
    buffer: PixelBuffer,
    settings: AsciiSettings,
    rng: CharacterPicker | None = None,
) -> list[GlyphDescriptor]:
    """Walk the grid and return the glyphs to emit, in emission order."""
    # Also reached through render_buffer, which skips the pre-decode check
    validate_settings(settings)
    rng = rng or random.Random()
    chars = list(settings.characters)

    step = max(1, int(settings.grid_spacing))
    ys = np.arange(0, buffer.height, step)
    xs = np.arange(0, buffer.width, step)
    if ys.size == 0 or xs.size == 0:
        return []

    # Row-major: every x of row y before moving to y + step
    yy, xx = np.meshgrid(ys, xs, indexing="ij")
    yy = yy.ravel()
    xx = xx.ravel()

    index = (yy * buffer.width + xx) * RGBA_CHANNELS
    in_range = index + RGBA_CHANNELS <= buffer.data.size
    yy, xx, index = yy[in_range], xx[in_range], index[in_range]

    pixels = buffer.data[index[:, None] + np.arange(RGBA_CHANNELS)].astype(np.float64)
    values = sample_values(pixels, settings.map_strategy, settings.invert)

    keep = ~(values < settings.threshold)

    if settings.variable_size:
        sizes = settings.font_size * (values / _MAX_VALUE)
        keep &= ~(sizes < _MIN_VISIBLE_FONT_SIZE)
    else:
        sizes = np.full(values.shape, float(settings.font_size))

    glyphs = [
        GlyphDescriptor(
            x=int(xx[i]),
            y=int(yy[i]),
            font_size=float(sizes[i]),
            char=rng.choice(chars),
            color=settings.color,
        )
        for i in np.flatnonzero(keep)
    ]

    logger.debug(
        "Sampled %d cells at step %d, emitted %d glyphs",
        values.size,
        step,
        len(glyphs),
    )
    return glyphs


def render_buffer(
    buffer: PixelBuffer,
    settings: AsciiSettings,
    rng: CharacterPicker | None = None,
) -> GenerationResult:
    """Map a decoded buffer to a finished SVG document sized to the buffer."""
    glyphs = map_glyphs(buffer, settings, rng)
    svg = serialize_document(glyphs, buffer.width, buffer.height, settings.background_color)
    return GenerationResult(svg_content=svg, width=buffer.width, height=buffer.height)
