"""Settings as the HTTP/CLI collaborator sees them: defaults and input ranges live here."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from asciisvg.engine.context import AsciiSettings, MapStrategy

FONT_SIZE_RANGE = (4, 100)
GRID_SPACING_RANGE = (2, 50)
THRESHOLD_RANGE = (0, 255)

# Demo source shown before anything is uploaded: a white-to-black gradient disc
DEFAULT_SVG = """<svg viewBox="0 0 500 500" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <linearGradient id="grad1" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" style="stop-color:rgb(255,255,255);stop-opacity:1" />
      <stop offset="100%" style="stop-color:rgb(0,0,0);stop-opacity:1" />
    </linearGradient>
  </defs>
  <circle cx="250" cy="250" r="200" fill="url(#grad1)" />
</svg>"""


class AsciiSettingsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    color: str = Field(default="#7ED957", description="Glyph fill color")
    background_color: str = Field(default="#000000", description="Document background color")
    font_size: float = Field(
        default=15,
        ge=FONT_SIZE_RANGE[0],
        le=FONT_SIZE_RANGE[1],
        description="Base font size in output units",
    )
    grid_spacing: int = Field(
        default=8,
        ge=GRID_SPACING_RANGE[0],
        le=GRID_SPACING_RANGE[1],
        description="Pixel distance between samples",
    )
    characters: str = Field(default="01$&#@", description="Palette, one glyph picked at random per cell")
    invert: bool = False
    threshold: int = Field(
        default=18,
        ge=THRESHOLD_RANGE[0],
        le=THRESHOLD_RANGE[1],
        description="Samples with a value below this emit nothing",
    )
    map_strategy: MapStrategy = MapStrategy.LUMINANCE
    variable_size: bool = Field(default=True, description="Scale glyph size with sample value")

    def to_settings(self) -> AsciiSettings:
        return AsciiSettings(
            color=self.color,
            background_color=self.background_color,
            font_size=self.font_size,
            grid_spacing=self.grid_spacing,
            characters=self.characters,
            invert=self.invert,
            threshold=self.threshold,
            map_strategy=self.map_strategy,
            variable_size=self.variable_size,
        )
