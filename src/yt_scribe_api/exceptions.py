"""Custom exceptions for the HTTP API."""

from typing import Any, Dict, List, Optional

from yt_scribe.transcription.errors import (
    CaptionsDisabledError,
    InvalidVideoIdError,
    LanguageUnavailableError,
    ScribeError,
    TranscriptionError,
    VideoUnavailableError,
)


class APIError(Exception):
    """Base API exception class."""

    def __init__(
        self,
        detail: str,
        status_code: int = 500,
        error_code: str = "API_ERROR",
        extra: Optional[Dict[str, Any]] = None
    ):
        self.detail = detail
        self.message = detail
        self.status_code = status_code
        self.error_code = error_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.error_code, "message": self.message}
        error.update(self.extra)
        return {"success": False, "error": error}


class InvalidVideoError(APIError):
    """The input does not contain a YouTube video ID."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, status_code=400, error_code="INVALID_VIDEO_ID")


class VideoNotFoundError(APIError):
    """Video removed, private or otherwise not playable."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, status_code=404, error_code="VIDEO_UNAVAILABLE")


class CaptionsNotFoundError(APIError):
    """Video has no caption tracks."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, status_code=404, error_code="CAPTIONS_DISABLED")


class LanguageNotFoundError(APIError):
    """Requested caption language is not available."""

    def __init__(self, detail: str, available: List[str]):
        super().__init__(
            detail=detail,
            status_code=404,
            error_code="LANGUAGE_UNAVAILABLE",
            extra={"available": list(available)}
        )


class ExternalServiceError(APIError):
    """External service error exception."""

    def __init__(self, detail: str, service_name: str = "youtube"):
        super().__init__(
            detail=f"{service_name}: {detail}",
            status_code=502,
            error_code="EXTERNAL_SERVICE_ERROR"
        )


def from_scribe_error(error: ScribeError) -> APIError:
    """Map a pipeline error onto its HTTP representation."""
    if isinstance(error, InvalidVideoIdError):
        return InvalidVideoError(str(error))
    if isinstance(error, VideoUnavailableError):
        return VideoNotFoundError(str(error))
    if isinstance(error, LanguageUnavailableError):
        return LanguageNotFoundError(str(error), error.available)
    if isinstance(error, CaptionsDisabledError):
        return CaptionsNotFoundError(str(error))
    if isinstance(error, TranscriptionError):
        return ExternalServiceError(str(error))
    return APIError(str(error))
