"""ASCII SVG generation engine."""

from asciisvg.engine.context import AsciiSettings, GenerationResult, GlyphDescriptor, MapStrategy, PixelBuffer
from asciisvg.engine.errors import AsciiSvgError, DecodeError, InvalidSettingsError
from asciisvg.engine.generator import generate_ascii_svg
