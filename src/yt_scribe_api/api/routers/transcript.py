"""YouTube transcript router."""

import asyncio
import logging

from fastapi import APIRouter, Depends, Query

from yt_scribe.core.transcriber import YouTubeTranscriber
from yt_scribe.core.video_id import extract_video_id
from yt_scribe.transcription.errors import ScribeError

from ...api.models.transcript import (
    LanguageInfo,
    LanguagesData,
    LanguagesResponse,
    TranscriptData,
    TranscriptRequest,
    TranscriptResponse,
)
from ...dependencies import get_transcriber
from ...exceptions import from_scribe_error

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/transcript", response_model=TranscriptResponse)
async def get_transcript(
    request: TranscriptRequest,
    transcriber: YouTubeTranscriber = Depends(get_transcriber)
):
    """
    Fetch the transcript of a YouTube video.

    Args:
        request: Transcript request
        transcriber: Pipeline instance

    Returns:
        Transcript in the requested format

    Raises:
        APIError: Mapped from the pipeline's error taxonomy
    """
    logger.info(f"Transcript requested: url={request.url} format={request.format} lang={request.language or 'default'}")
    try:
        result = await asyncio.to_thread(
            transcriber.transcribe,
            request.url,
            request.language,
            request.format,
            request.timestamps
        )
    except ScribeError as e:
        logger.warning(f"Transcript request failed: {e}")
        raise from_scribe_error(e) from e

    return TranscriptResponse(
        data=TranscriptData(
            video_id=result.video_id,
            language=result.language,
            is_auto_generated=result.is_auto_generated,
            format=result.format,
            transcript=result.transcript
        )
    )


@router.get("/languages", response_model=LanguagesResponse)
async def get_languages(
    url: str = Query(..., description="YouTube URL or bare video ID"),
    transcriber: YouTubeTranscriber = Depends(get_transcriber)
):
    """
    List caption tracks available for a YouTube video.

    Args:
        url: YouTube URL or video ID
        transcriber: Pipeline instance

    Returns:
        Available caption languages
    """
    try:
        tracks = await asyncio.to_thread(transcriber.list_languages, url)
    except ScribeError as e:
        logger.warning(f"Language listing failed: {e}")
        raise from_scribe_error(e) from e

    video_id = extract_video_id(url)
    return LanguagesResponse(
        data=LanguagesData(
            video_id=video_id,
            languages=[
                LanguageInfo(code=t.language_code, name=t.display_name, is_auto_generated=t.is_auto_generated)
                for t in tracks
            ]
        )
    )
