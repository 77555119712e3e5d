"""
Transcript acquisition pipeline.

resolve video ID -> fetch watch page -> playability gate -> reuse or build the
get_transcript params -> Innertube call -> parse segments -> format.

Each call builds and discards its own page state and params; nothing is shared
between calls, so one YouTubeTranscriber can serve concurrent callers.
"""

from typing import List, Optional

from ..transcription.errors import (
    CaptionsDisabledError,
    InvalidVideoIdError,
    LanguageUnavailableError,
    ScribeError,
)
from ..transcription.models import CaptionTrackInfo, PageState, TranscriptionResult
from ..utils.formatting import TRANSCRIPT_FORMATS, format_segments
from ..utils.logging import get_logger
from .config import Config, config as default_config
from .innertube_client import InnertubeClient
from .language_catalog import caption_tracks, ensure_playable, find_track
from .page_state import PageStateFetcher
from .segment_parser import parse_transcript_segments
from .session import SessionFactory, new_session
from .transcript_params import build_transcript_params, decode_language, extract_existing_params
from .video_id import extract_video_id

logger = get_logger("transcriber")


class YouTubeTranscriber:
    """Fetches YouTube captions through the watch page and the get_transcript endpoint."""

    def __init__(
        self,
        app_config: Optional[Config] = None,
        session_factory: SessionFactory = new_session,
        page_fetcher: Optional[PageStateFetcher] = None,
        api_client: Optional[InnertubeClient] = None,
    ):
        self.config = app_config or default_config
        self.page_fetcher = page_fetcher or PageStateFetcher(self.config.youtube, session_factory)
        self.api_client = api_client or InnertubeClient(
            self.config.youtube,
            session_factory,
            error_body_preview_chars=self.config.transcription.error_body_preview_chars,
        )

    def _resolve_video_id(self, url_or_id: str) -> str:
        video_id = extract_video_id(url_or_id)
        if not video_id:
            raise InvalidVideoIdError(url_or_id)
        return video_id

    def resolve_params(self, state: PageState, language: str) -> str:
        """
        Pick the get_transcript params for *language*.

        The page ships params for whatever language it rendered in; those are
        reused only when they decode to the requested language.
        """
        existing = extract_existing_params(state.initial_data)
        if existing:
            existing_lang = decode_language(existing)
            logger.info(f"Found transcript params for lang={existing_lang}")
            if existing_lang.lower() == language.lower():
                return existing

        logger.info(f"Building transcript params for lang={language}")
        try:
            return build_transcript_params(state.video_id, language)
        except ValueError as e:
            logger.warning(f"Cannot encode transcript params for lang={language!r}: {e}")
            raise LanguageUnavailableError(language, state.track_language_codes) from e

    def _missing_transcript_error(self, state: PageState, language: str) -> ScribeError:
        """Tell "wrong language" apart from "no captions at all"."""
        codes = state.track_language_codes
        if codes:
            return LanguageUnavailableError(language, codes)
        return CaptionsDisabledError(state.video_id)

    def transcribe(
        self,
        url_or_id: str,
        language: Optional[str] = None,
        output_format: Optional[str] = None,
        timestamps: bool = False,
    ) -> TranscriptionResult:
        """
        Fetch and format the transcript of a YouTube video.

        Args:
            url_or_id: Any supported YouTube URL or a bare video ID
            language: Requested caption language code, defaults to config
            output_format: ``text``, ``srt`` or ``json``, defaults to config
            timestamps: Prefix ``text`` lines with ``[MM:SS]``

        Returns:
            TranscriptionResult whose ``language`` is the requested code

        Raises:
            InvalidVideoIdError, VideoUnavailableError, CaptionsDisabledError,
            LanguageUnavailableError, TranscriptionError
            ValueError: If *output_format* is not supported
        """
        language = (language or "").strip() or self.config.transcription.default_language
        output_format = output_format or self.config.transcription.default_format
        if output_format not in TRANSCRIPT_FORMATS:
            raise ValueError(f"Unsupported transcript format: {output_format!r}")

        video_id = self._resolve_video_id(url_or_id)
        state = self.page_fetcher.fetch(video_id)
        ensure_playable(state)

        params = self.resolve_params(state, language)
        cookie_header = state.cookie_header if self.config.youtube.forward_cookies else None

        try:
            response = self.api_client.get_transcript(params, state.visitor_data, cookie_header)
        except CaptionsDisabledError as e:
            logger.warning(f"Transcript API refused params for {video_id} lang={language}")
            raise self._missing_transcript_error(state, language) from e

        segments = parse_transcript_segments(response)
        if not segments:
            raise self._missing_transcript_error(state, language)

        track = find_track(caption_tracks(state), language)
        is_auto_generated = bool(track and track.is_auto_generated)

        logger.info(f"Transcribed {video_id}: {len(segments)} segments, lang={language}, auto={is_auto_generated}")
        return TranscriptionResult(
            video_id=video_id,
            language=language,
            is_auto_generated=is_auto_generated,
            format=output_format,
            transcript=format_segments(segments, output_format, timestamps),
        )

    def list_languages(self, url_or_id: str) -> List[CaptionTrackInfo]:
        """
        List the caption tracks available for a video.

        Raises:
            InvalidVideoIdError, VideoUnavailableError, TranscriptionError
            CaptionsDisabledError: If the video has no caption tracks
        """
        video_id = self._resolve_video_id(url_or_id)
        state = self.page_fetcher.fetch(video_id)
        ensure_playable(state)

        tracks = caption_tracks(state)
        if not tracks:
            raise CaptionsDisabledError(video_id)
        logger.info(f"Found {len(tracks)} caption tracks for {video_id}")
        return tracks


def transcribe(
    url_or_id: str,
    language: Optional[str] = None,
    output_format: Optional[str] = None,
    timestamps: bool = False,
) -> TranscriptionResult:
    """Module-level shortcut for ``YouTubeTranscriber().transcribe``."""
    return YouTubeTranscriber().transcribe(url_or_id, language, output_format, timestamps)


def list_languages(url_or_id: str) -> List[CaptionTrackInfo]:
    """Module-level shortcut for ``YouTubeTranscriber().list_languages``."""
    return YouTubeTranscriber().list_languages(url_or_id)
