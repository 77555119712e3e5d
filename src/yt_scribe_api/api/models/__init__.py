"""API models package."""

from .base import BaseResponse, SuccessResponse, HealthStatus, HealthResponse
from .transcript import (
    TranscriptRequest,
    SegmentModel,
    TranscriptData,
    TranscriptResponse,
    LanguageInfo,
    LanguagesData,
    LanguagesResponse,
)

__all__ = [
    # Base models
    "BaseResponse",
    "SuccessResponse",
    "HealthStatus",
    "HealthResponse",

    # Transcript models
    "TranscriptRequest",
    "SegmentModel",
    "TranscriptData",
    "TranscriptResponse",
    "LanguageInfo",
    "LanguagesData",
    "LanguagesResponse",
]
