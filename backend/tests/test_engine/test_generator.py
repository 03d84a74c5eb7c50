"""Tests for the async generation entry point."""

from __future__ import annotations

import asyncio
import re

import pytest

from asciisvg.engine.context import MapStrategy
from asciisvg.engine.decoder import CairoPillowDecoder
from asciisvg.engine.errors import DecodeError, InvalidSettingsError
from asciisvg.engine.generator import generate_ascii_svg
from tests.conftest import (
    GRADIENT_CIRCLE_SVG,
    MALFORMED_SVG,
    WHITE_SQUARE_SVG,
    SequencePicker,
    make_settings,
    png_bytes,
    solid_buffer,
)


class StubDecoder:
    """Returns a fixed buffer and records what it was asked to decode."""

    def __init__(self, buffer):
        self.buffer = buffer
        self.calls = []

    def decode(self, source, is_svg_code):
        self.calls.append((source, is_svg_code))
        return self.buffer


def _run(coro):
    return asyncio.run(coro)


def test_white_square_scenario():
    settings = make_settings(grid_spacing=10, characters="@")
    result = _run(generate_ascii_svg(WHITE_SQUARE_SVG, settings, True, rng=SequencePicker()))
    assert (result.width, result.height) == (10, 10)
    assert re.findall(r"<text [^>]*>", result.svg_content) == [
        '<text x="0" y="0" font-size="10.00" fill="#7ED957" text-anchor="middle" dominant-baseline="middle">'
    ]


def test_gradient_circle_has_glyphs_and_gaps():
    settings = make_settings(grid_spacing=8, threshold=18, variable_size=True, font_size=15)
    result = _run(generate_ascii_svg(GRADIENT_CIRCLE_SVG, settings, True))
    n = len(re.findall(r"<text ", result.svg_content))
    cells = 15 * 10  # ceil(120/8) * ceil(80/8)
    assert 0 < n < cells
    assert (result.width, result.height) == (120, 80)


def test_png_upload_bytes():
    settings = make_settings(grid_spacing=2, map_strategy=MapStrategy.OPACITY)
    result = _run(generate_ascii_svg(png_bytes(6, 4, (0, 0, 0, 255)), settings, False))
    assert (result.width, result.height) == (6, 4)
    assert len(re.findall(r"<text ", result.svg_content)) == 6


def test_malformed_markup_rejects():
    with pytest.raises(DecodeError):
        _run(generate_ascii_svg(MALFORMED_SVG, make_settings(), True))


def test_empty_palette_fails_before_decode():
    decoder = StubDecoder(solid_buffer(2, 2, (0, 0, 0, 255)))
    with pytest.raises(InvalidSettingsError):
        _run(generate_ascii_svg("<svg/>", make_settings(characters=""), True, decoder=decoder))
    assert decoder.calls == []


def test_injected_decoder_is_used():
    decoder = StubDecoder(solid_buffer(9, 3, (0, 0, 0, 255)))
    result = _run(generate_ascii_svg("ignored", make_settings(grid_spacing=3), False, decoder=decoder))
    assert decoder.calls == [("ignored", False)]
    assert (result.width, result.height) == (9, 3)


def test_declared_size_round_trips_through_decoder():
    settings = make_settings(grid_spacing=8, characters="01")
    result = _run(generate_ascii_svg(GRADIENT_CIRCLE_SVG, settings, True))
    buf = CairoPillowDecoder().decode(result.svg_content, is_svg_code=True)
    assert (buf.width, buf.height) == (result.width, result.height)
