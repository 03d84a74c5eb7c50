"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from asciisvg.engine.context import GenerationResult
from asciisvg.models.settings import AsciiSettingsModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class GenerateResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    svg_content: str
    width: int
    height: int

    @classmethod
    def from_result(cls, result: GenerationResult) -> GenerateResponse:
        return cls(svg_content=result.svg_content, width=result.width, height=result.height)


class DefaultsResponse(BaseModel):
    settings: AsciiSettingsModel
    ranges: dict[str, tuple[int, int]] = Field(default_factory=dict)
    svg: str = ""
