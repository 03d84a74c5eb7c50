"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from asciisvg.models.settings import DEFAULT_SVG, AsciiSettingsModel


class GenerateRequest(BaseModel):
    svg: str | None = Field(default=None, description="Raw SVG code")
    image: str | None = Field(
        default=None,
        description="Uploaded image as a data URI; takes precedence over svg",
    )
    settings: AsciiSettingsModel = Field(default_factory=AsciiSettingsModel)

    def resolve_source(self) -> tuple[str, bool]:
        """(source, is_svg_code): an upload wins, then SVG code, then the demo SVG."""
        if self.image:
            return self.image, False
        return self.svg or DEFAULT_SVG, True
