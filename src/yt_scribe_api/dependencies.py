"""FastAPI dependencies for service injection."""

from functools import lru_cache

from yt_scribe.core.transcriber import YouTubeTranscriber


@lru_cache()
def get_transcriber() -> YouTubeTranscriber:
    """
    Shared transcriber instance.

    The transcriber holds configuration only; page state and sessions are
    created per call, so sharing it across requests is safe.
    """
    return YouTubeTranscriber()
