"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from asciisvg.models.responses import DefaultsResponse, HealthResponse
from asciisvg.models.settings import (
    DEFAULT_SVG,
    FONT_SIZE_RANGE,
    GRID_SPACING_RANGE,
    THRESHOLD_RANGE,
    AsciiSettingsModel,
)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0")


@router.get("/defaults", response_model=DefaultsResponse)
async def defaults() -> DefaultsResponse:
    return DefaultsResponse(
        settings=AsciiSettingsModel(),
        ranges={
            "fontSize": FONT_SIZE_RANGE,
            "gridSpacing": GRID_SPACING_RANGE,
            "threshold": THRESHOLD_RANGE,
        },
        svg=DEFAULT_SVG,
    )
