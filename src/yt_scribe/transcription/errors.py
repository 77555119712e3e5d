"""Error taxonomy surfaced by the transcript pipeline."""

from typing import Iterable, List, Optional


class ScribeError(Exception):
    """Base class for transcript-related errors."""
    pass


class InvalidVideoIdError(ScribeError):
    """No YouTube video ID could be parsed from the input."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'Could not extract a valid YouTube video ID from: "{value}"')


class VideoUnavailableError(ScribeError):
    """The watch page reports the video as not playable."""

    def __init__(self, video_id: str, reason: Optional[str] = None):
        self.video_id = video_id
        self.reason = reason
        detail = f"{video_id} ({reason})" if reason else video_id
        super().__init__(f"Video not found or unavailable: {detail}")


class CaptionsDisabledError(ScribeError):
    """The video has no caption tracks at all."""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"Captions are disabled for video: {video_id}")


class LanguageUnavailableError(ScribeError):
    """Caption tracks exist, but not in the requested language."""

    def __init__(self, language: str, available: Iterable[str]):
        self.language = language
        self.available: List[str] = list(available)
        available_list = ", ".join(self.available) if self.available else "none"
        super().__init__(f'Language "{language}" is not available. Available languages: {available_list}')


class TranscriptionError(ScribeError):
    """Network failure, bad HTTP status, malformed response or an unexpected API error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
