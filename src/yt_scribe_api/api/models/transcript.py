"""Transcript models for the API."""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .base import SuccessResponse


class TranscriptRequest(BaseModel):
    """Transcript request model."""

    url: str = Field(..., description="YouTube URL or bare video ID")
    language: Optional[str] = Field(default=None, max_length=35, description="Caption language code, e.g. 'en' or 'de'")
    format: Literal["text", "srt", "json"] = Field(default="text", description="Output format")
    timestamps: bool = Field(default=False, description="Prefix text lines with [MM:SS]")

    @field_validator("url")
    @classmethod
    def strip_url(cls, v):
        """Trim surrounding whitespace; ID extraction happens in the pipeline so bad input maps to 400."""
        v = v.strip()
        if not v:
            raise ValueError("url must not be empty")
        return v


class SegmentModel(BaseModel):
    """One timed transcript line."""

    text: str
    startMs: int
    durationMs: int


class TranscriptData(BaseModel):
    """Transcript payload."""

    video_id: str
    language: str
    is_auto_generated: bool
    format: str
    transcript: Union[str, List[SegmentModel]]


class LanguageInfo(BaseModel):
    """An available caption track."""

    code: str
    name: str
    is_auto_generated: bool


class LanguagesData(BaseModel):
    """Caption track listing for a video."""

    video_id: str
    languages: List[LanguageInfo] = Field(default_factory=list)


class TranscriptResponse(SuccessResponse[TranscriptData]):
    """Transcript response model."""
    pass


class LanguagesResponse(SuccessResponse[LanguagesData]):
    """Language listing response model."""
    pass
