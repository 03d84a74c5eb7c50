"""Error taxonomy for the generation core."""

from __future__ import annotations


class AsciiSvgError(Exception):
    """Base class for every error raised by the generation core."""


class DecodeError(AsciiSvgError):
    """The source image could not be loaded, parsed, or read back as pixels."""


class InvalidSettingsError(AsciiSvgError):
    """Settings that make glyph mapping undefined (e.g. an empty palette)."""
