"""SBV to WebVTT conversion endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.core.config import Settings, get_settings
from app.schemas import ConversionRequest
from app.services.filename import sanitize_filename
from app.services.italics import parse_phrase_list
from app.services.sbv_converter import sbv_to_vtt

logger = logging.getLogger(__name__)

router = APIRouter()

VTT_MEDIA_TYPE = "text/vtt; charset=utf-8"


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Convert SBV subtitles to WebVTT",
    description=(
        "Converts SBV subtitle content to a WebVTT file download, italicizing "
        "the listed phrases wherever they appear as whole words"
    ),
    response_class=Response,
    responses={200: {"content": {"text/vtt": {}}, "description": "WebVTT document"}},
)
async def convert_sbv(
    request: ConversionRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Convert an SBV document to a downloadable WebVTT file.

    Args:
        request: Conversion request with SBV text and optional phrase list

    Returns:
        WebVTT document as an attachment

    Raises:
        HTTPException: If the SBV text is missing or conversion fails unexpectedly
    """
    if not request.sbv_text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="sbvText is required",
        )

    try:
        phrases = parse_phrase_list(request.italics_text)
        vtt = sbv_to_vtt(request.sbv_text, phrases)
    except Exception as e:
        logger.error("Unexpected error converting SBV: %s", e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unexpected error: {str(e)}",
        )

    filename = sanitize_filename(
        request.output_name or settings.default_output_name,
        default=settings.default_output_name,
    )
    logger.info(
        "Converted SBV document (%d chars, %d italic phrases) to %s",
        len(request.sbv_text),
        len(phrases),
        filename,
    )

    return Response(
        content=vtt,
        media_type=VTT_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Cache-Control": "no-store",
        },
    )
