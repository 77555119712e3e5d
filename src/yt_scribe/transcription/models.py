from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class TranscriptSegment:
    """One timed line of transcript text, offsets in milliseconds."""
    text: str
    start_ms: int
    duration_ms: int = 0

    @property
    def end_ms(self) -> int:
        """Calculate end offset of the segment."""
        return self.start_ms + self.duration_ms

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "startMs": self.start_ms,
            "durationMs": self.duration_ms
        }


@dataclass(frozen=True)
class CaptionTrackInfo:
    """An available caption track as listed in the player response."""
    language_code: str
    display_name: str
    is_auto_generated: bool = False


@dataclass
class PageState:
    """Session artifacts scraped from a single watch page fetch."""
    video_id: str
    player_response: Optional[Dict[str, Any]] = None
    initial_data: Optional[Dict[str, Any]] = None
    visitor_data: Optional[str] = None
    client_version: str = ""
    cookie_header: str = ""

    @property
    def caption_tracks(self) -> List[Dict[str, Any]]:
        """Raw caption track entries, empty when the player response has none."""
        player = self.player_response or {}
        renderer = (player.get("captions") or {}).get("playerCaptionsTracklistRenderer") or {}
        tracks = renderer.get("captionTracks") or []
        return [t for t in tracks if isinstance(t, dict)]

    @property
    def track_language_codes(self) -> List[str]:
        return [t.get("languageCode", "") for t in self.caption_tracks]

    @property
    def playability_status(self) -> Optional[str]:
        return ((self.player_response or {}).get("playabilityStatus") or {}).get("status")

    @property
    def playability_reason(self) -> Optional[str]:
        return ((self.player_response or {}).get("playabilityStatus") or {}).get("reason")


@dataclass
class TranscriptionResult:
    """Result of a transcription request."""
    video_id: str
    language: str
    is_auto_generated: bool
    format: str
    transcript: Union[str, List[Dict[str, Any]]]
