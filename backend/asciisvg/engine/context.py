"""Data model shared by the decoder, the sampler, and the serializer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# Channels per pixel in every buffer: R, G, B, A.
RGBA_CHANNELS = 4


class MapStrategy(str, enum.Enum):
    """Which channel combination produces a sample's scalar value."""

    LUMINANCE = "luminance"
    OPACITY = "opacity"


@dataclass(frozen=True)
class AsciiSettings:
    """Parameters for one generation call.

    Fully populated by the caller; the core never fills defaults.
    """

    color: str
    background_color: str
    font_size: float
    grid_spacing: int
    characters: str
    invert: bool
    threshold: int
    map_strategy: MapStrategy
    variable_size: bool


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded image at its natural size.

    ``data`` is a flat uint8 array of length width × height × 4,
    row-major with the origin at the top-left corner.
    """

    width: int
    height: int
    data: NDArray[np.uint8]

    def __post_init__(self) -> None:
        expected = self.width * self.height * RGBA_CHANNELS
        if self.data.size != expected:
            raise ValueError(
                f"RGBA buffer has {self.data.size} samples, expected {expected} "
                f"for {self.width}x{self.height}"
            )

    @classmethod
    def from_array(cls, rgba: NDArray) -> PixelBuffer:
        """Build a buffer from an H×W×4 array (as returned by Pillow via numpy)."""
        arr = np.asarray(rgba, dtype=np.uint8)
        if arr.ndim != 3 or arr.shape[2] != RGBA_CHANNELS:
            raise ValueError(f"expected an HxWx4 array, got shape {arr.shape}")
        height, width = arr.shape[:2]
        return cls(width=int(width), height=int(height), data=arr.reshape(-1))


@dataclass(frozen=True)
class GlyphDescriptor:
    x: int
    y: int
    font_size: float
    char: str
    color: str


@dataclass(frozen=True)
class GenerationResult:
    svg_content: str
    width: int
    height: int
