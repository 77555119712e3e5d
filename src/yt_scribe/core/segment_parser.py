"""Flatten a get_transcript response into TranscriptSegment objects."""

from typing import Any, Dict, List, Optional

from ..transcription.models import TranscriptSegment
from ..utils.logging import get_logger

logger = get_logger("segment_parser")

SEGMENT_LIST_PATH = (
    "elementsCommand",
    "transformEntityCommand",
    "arguments",
    "transformTranscriptSegmentListArguments",
    "overwrite",
    "initialSegments",
)


def _dig(obj: Any, path) -> Any:
    for key in path:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def _parse_ms(value: Any) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def segment_text(renderer: Dict[str, Any]) -> str:
    """Prefer the pre-joined attributed string, falling back to concatenated runs."""
    snippet = renderer.get("snippet") or {}
    content = (snippet.get("elementsAttributedString") or {}).get("content")
    if content is None:
        runs = snippet.get("runs")
        if isinstance(runs, list):
            content = "".join(str((r or {}).get("text") or "") for r in runs)
    return str(content or "").replace("\n", " ").strip()


def parse_segment(item: Any) -> Optional[TranscriptSegment]:
    """Parse one ``transcriptSegmentRenderer`` item; returns None if it has no renderer."""
    renderer = (item or {}).get("transcriptSegmentRenderer") if isinstance(item, dict) else None
    if not isinstance(renderer, dict):
        return None
    start_ms = _parse_ms(renderer.get("startMs"))
    end_ms = _parse_ms(renderer.get("endMs"))
    return TranscriptSegment(text=segment_text(renderer), start_ms=start_ms, duration_ms=end_ms - start_ms)


def parse_transcript_segments(response: Dict[str, Any]) -> List[TranscriptSegment]:
    """
    Return the segments of the first action carrying a non-empty segment list.

    Entries whose text is empty after flattening newlines are dropped; the
    source order is kept as-is.
    """
    for action in response.get("actions") or []:
        items = _dig(action, SEGMENT_LIST_PATH)
        if not items or not isinstance(items, list):
            continue

        segments = []
        for item in items:
            seg = parse_segment(item)
            if seg is not None and seg.text:
                segments.append(seg)

        if segments:
            logger.info(f"Parsed {len(segments)} transcript segments")
            return segments

    logger.info("No transcript segments found in API response")
    return []
