"""Caption track listing and the playability gate shared with transcription."""

from typing import List, Optional

from ..transcription.errors import VideoUnavailableError
from ..transcription.models import CaptionTrackInfo, PageState

PLAYABLE_STATUSES = ("OK", "LIVE_STREAM_OFFLINE")
AUTO_GENERATED_KIND = "asr"


def ensure_playable(state: PageState) -> None:
    """
    Raise VideoUnavailableError unless the player reports the video as playable.

    A page without a player response or status is let through; missing tracks
    are reported later, where they are needed.
    """
    status = state.playability_status
    if status and status not in PLAYABLE_STATUSES:
        raise VideoUnavailableError(state.video_id, state.playability_reason or "unknown reason")


def caption_tracks(state: PageState) -> List[CaptionTrackInfo]:
    """Map the player response's caption tracks to CaptionTrackInfo objects."""
    tracks = []
    for track in state.caption_tracks:
        code = track.get("languageCode") or ""
        name = (track.get("name") or {}).get("simpleText") or code
        tracks.append(CaptionTrackInfo(
            language_code=code,
            display_name=name,
            is_auto_generated=track.get("kind") == AUTO_GENERATED_KIND,
        ))
    return tracks


def find_track(tracks: List[CaptionTrackInfo], language: str) -> Optional[CaptionTrackInfo]:
    """First track whose code starts with *language*, compared case-insensitively."""
    wanted = language.lower()
    for track in tracks:
        if track.language_code.lower().startswith(wanted):
            return track
    return None
