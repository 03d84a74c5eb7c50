"""Write the glyph SVG document."""

from __future__ import annotations

from collections.abc import Iterable
from xml.sax.saxutils import escape

from asciisvg.engine.context import GlyphDescriptor

SVG_MIME_TYPE = "image/svg+xml"
DOWNLOAD_FILENAME = "ascii-art.svg"


def format_font_size(size: float) -> str:
    """Font sizes are always written with two decimals."""
    return f"{size:.2f}"


def escape_glyph(char: str) -> str:
    """Escape ``&``, ``<`` and ``>``; quotes are left alone (text content, not attributes)."""
    return escape(char)


def serialize_glyph(glyph: GlyphDescriptor) -> str:
    """One centered ``<text>`` element per glyph."""
    return (
        f'<text x="{glyph.x}" y="{glyph.y}" font-size="{format_font_size(glyph.font_size)}"'
        f' fill="{glyph.color}" text-anchor="middle" dominant-baseline="middle">'
        f"{escape_glyph(glyph.char)}</text>"
    )


def serialize_document(
    glyphs: Iterable[GlyphDescriptor],
    width: int,
    height: int,
    background_color: str,
) -> str:
    """Wrap glyphs into a self-contained SVG sized to the source image."""
    lines = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}"'
        f' xmlns="http://www.w3.org/2000/svg" style="background-color: {background_color}">',
    ]
    lines.extend(f"  {serialize_glyph(g)}" for g in glyphs)
    lines.append("</svg>")
    return "\n".join(lines)
