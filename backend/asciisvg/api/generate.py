"""POST /api/generate and /api/download — source + settings to ASCII SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from asciisvg.dependencies import get_decoder
from asciisvg.engine.context import GenerationResult
from asciisvg.engine.decoder import ImageDecoder
from asciisvg.engine.errors import DecodeError, InvalidSettingsError
from asciisvg.engine.generator import generate_ascii_svg
from asciisvg.engine.session import GENERIC_FAILURE_MESSAGE
from asciisvg.models.requests import GenerateRequest
from asciisvg.models.responses import GenerateResponse
from asciisvg.svg.serializer import DOWNLOAD_FILENAME, SVG_MIME_TYPE

router = APIRouter()
logger = logging.getLogger(__name__)


async def _run(req: GenerateRequest, decoder: ImageDecoder) -> GenerationResult:
    source, is_svg_code = req.resolve_source()
    try:
        return await generate_ascii_svg(source, req.settings.to_settings(), is_svg_code, decoder=decoder)
    except DecodeError as e:
        logger.warning("Decode failed: %s", e)
        raise HTTPException(status_code=422, detail=GENERIC_FAILURE_MESSAGE) from e
    except InvalidSettingsError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    req: GenerateRequest,
    decoder: ImageDecoder = Depends(get_decoder),
) -> GenerateResponse:
    result = await _run(req, decoder)
    return GenerateResponse.from_result(result)


@router.post("/download")
async def download(
    req: GenerateRequest,
    decoder: ImageDecoder = Depends(get_decoder),
) -> Response:
    result = await _run(req, decoder)
    return Response(
        content=result.svg_content,
        media_type=SVG_MIME_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"'},
    )
