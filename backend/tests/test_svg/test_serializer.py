"""Tests for the glyph SVG serializer."""

from asciisvg.engine.context import GlyphDescriptor
from asciisvg.svg.serializer import escape_glyph, format_font_size, serialize_document, serialize_glyph


def test_glyph_element():
    g = GlyphDescriptor(x=8, y=16, font_size=12.345, char="$", color="#7ED957")
    assert serialize_glyph(g) == (
        '<text x="8" y="16" font-size="12.35" fill="#7ED957"'
        ' text-anchor="middle" dominant-baseline="middle">$</text>'
    )


def test_font_size_two_decimals():
    assert format_font_size(15) == "15.00"
    assert format_font_size(0.5) == "0.50"


def test_escape_only_markup_characters():
    assert escape_glyph("&") == "&amp;"
    assert escape_glyph("<") == "&lt;"
    assert escape_glyph(">") == "&gt;"
    assert escape_glyph('"') == '"'
    assert escape_glyph("#") == "#"


def test_document_wrapper():
    glyphs = [
        GlyphDescriptor(x=0, y=0, font_size=5, char="a", color="red"),
        GlyphDescriptor(x=5, y=0, font_size=5, char="b", color="red"),
    ]
    svg = serialize_document(glyphs, 30, 20, "#000000")
    lines = svg.splitlines()
    assert lines[0] == (
        '<svg width="30" height="20" viewBox="0 0 30 20"'
        ' xmlns="http://www.w3.org/2000/svg" style="background-color: #000000">'
    )
    assert lines[-1] == "</svg>"
    assert svg.index(">a</text>") < svg.index(">b</text>")


def test_empty_document():
    svg = serialize_document([], 4, 4, "white")
    assert "<text" not in svg
    assert svg.endswith("</svg>")
