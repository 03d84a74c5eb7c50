"""Async entry point: source + settings → GenerationResult."""

from __future__ import annotations

import asyncio
import logging
import time

from asciisvg.engine.context import AsciiSettings, GenerationResult
from asciisvg.engine.decoder import CairoPillowDecoder, ImageDecoder
from asciisvg.engine.sampler import CharacterPicker, render_buffer, validate_settings

logger = logging.getLogger(__name__)


async def generate_ascii_svg(
    source: str | bytes,
    settings: AsciiSettings,
    is_svg_code: bool,
    decoder: ImageDecoder | None = None,
    rng: CharacterPicker | None = None,
) -> GenerationResult:
    """Decode ``source`` and map it to a glyph SVG.

    Decoding runs in a worker thread so the event loop stays free; sampling
    follows sequentially once the pixels are available. ``DecodeError`` and
    ``InvalidSettingsError`` propagate to the caller untouched.
    """
    validate_settings(settings)
    decoder = decoder or CairoPillowDecoder()

    start = time.perf_counter()
    buffer = await asyncio.to_thread(decoder.decode, source, is_svg_code)
    result = render_buffer(buffer, settings, rng)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Generated %dx%d ASCII SVG (%d chars) in %.0fms",
        result.width,
        result.height,
        len(result.svg_content),
        elapsed,
    )
    return result
