"""FastAPI dependency injection."""

from __future__ import annotations

from asciisvg.config import settings
from asciisvg.engine.decoder import CairoPillowDecoder, ImageDecoder


def get_decoder() -> ImageDecoder:
    return CairoPillowDecoder(max_source_bytes=settings.asciisvg_max_source_bytes)
