"""Core modules of the transcript acquisition pipeline."""

from .config import config, Config, YouTubeConfig, TranscriptionConfig, LoggingConfig
from .video_id import extract_video_id, is_video_id
from .page_state import PageStateFetcher, parse_page_state
from .transcript_params import build_transcript_params, decode_language, extract_existing_params
from .innertube_client import InnertubeClient
from .segment_parser import parse_transcript_segments
from .language_catalog import caption_tracks, ensure_playable, find_track
from .transcriber import YouTubeTranscriber, transcribe, list_languages

__all__ = [
    'config',
    'Config',
    'YouTubeConfig',
    'TranscriptionConfig',
    'LoggingConfig',
    'extract_video_id',
    'is_video_id',
    'PageStateFetcher',
    'parse_page_state',
    'build_transcript_params',
    'decode_language',
    'extract_existing_params',
    'InnertubeClient',
    'parse_transcript_segments',
    'caption_tracks',
    'ensure_playable',
    'find_track',
    'YouTubeTranscriber',
    'transcribe',
    'list_languages',
]
