"""Image decoding — SVG markup or encoded image bytes to an RGBA pixel buffer.

SVG markup is rasterized with CairoSVG at the document's intrinsic size,
then read back through Pillow exactly like an uploaded PNG/JPEG would be.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol
from urllib.parse import unquote_to_bytes

import cairosvg
import numpy as np
from PIL import Image

from asciisvg.engine.context import PixelBuffer
from asciisvg.engine.errors import DecodeError

logger = logging.getLogger(__name__)

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[^;,]*)(?P<params>(?:;[^;,]*)*),(?P<payload>.*)$", re.DOTALL)
_SVG_MIME = "image/svg+xml"


class ImageDecoder(Protocol):
    """Host capability: turn a source into a PixelBuffer or raise DecodeError."""

    def decode(self, source: str | bytes, is_svg_code: bool) -> PixelBuffer: ...


class CairoPillowDecoder:
    """Default decoder backed by CairoSVG + Pillow."""

    def __init__(self, max_source_bytes: int | None = None) -> None:
        self.max_source_bytes = max_source_bytes

    def decode(self, source: str | bytes, is_svg_code: bool) -> PixelBuffer:
        if is_svg_code:
            raw = source.encode("utf-8") if isinstance(source, str) else source
            return self.decode_markup(raw)

        if isinstance(source, str):
            mime, raw = parse_data_uri(source)
            if mime == _SVG_MIME:
                return self.decode_markup(raw)
            return self.decode_bytes(raw)

        return self.decode_bytes(source)

    def decode_markup(self, raw: bytes) -> PixelBuffer:
        """Rasterize SVG markup at its natural size."""
        self._check_size(raw)
        try:
            png_data = cairosvg.svg2png(bytestring=raw)
        except Exception as e:
            logger.warning("SVG rasterization failed: %s", e)
            raise DecodeError(f"could not render SVG markup: {e}") from e
        if not png_data:
            raise DecodeError("SVG rendered to an empty image")
        return _read_rgba(png_data)

    def decode_bytes(self, raw: bytes) -> PixelBuffer:
        """Decode PNG/JPEG/GIF/... bytes through Pillow."""
        self._check_size(raw)
        return _read_rgba(raw)

    def _check_size(self, raw: bytes) -> None:
        if not raw:
            raise DecodeError("empty source")
        if self.max_source_bytes is not None and len(raw) > self.max_source_bytes:
            raise DecodeError(
                f"source is {len(raw)} bytes, limit is {self.max_source_bytes}"
            )


def _read_rgba(raw: bytes) -> PixelBuffer:
    with _open_image(raw) as img:
        width, height = img.size
        if width <= 0 or height <= 0:
            raise DecodeError(f"decoded image has no pixels ({width}x{height})")
        rgba = np.asarray(img.convert("RGBA"), dtype=np.uint8)

    logger.debug("Decoded %dx%d image (%d bytes in)", width, height, len(raw))
    return PixelBuffer.from_array(rgba)


@contextmanager
def _open_image(raw: bytes) -> Iterator[Image.Image]:
    """Open encoded bytes with Pillow; the image and its buffer are closed on every path."""
    buf = io.BytesIO(raw)
    try:
        with Image.open(buf) as img:
            img.load()
            yield img
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        logger.warning("Image decode failed: %s", e)
        raise DecodeError(f"could not decode image bytes: {e}") from e
    finally:
        buf.close()


def parse_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a ``data:`` URI into (mime type, payload bytes)."""
    match = _DATA_URI_RE.match(uri.strip())
    if not match:
        raise DecodeError("source is not a data URI")

    mime = match.group("mime").strip().lower() or "text/plain"
    params = [p.strip().lower() for p in match.group("params").split(";") if p.strip()]
    payload = match.group("payload")

    if "base64" in params:
        try:
            return mime, base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"invalid base64 payload: {e}") from e
    return mime, unquote_to_bytes(payload)
