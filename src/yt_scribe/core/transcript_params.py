"""
Codec for the opaque ``params`` token accepted by ``youtubei/v1/get_transcript``.

The token is a base64-rendered protobuf message with a fixed layout observed
from the web client:

    field 1 (0x0a)  video ID
    field 2 (0x12)  URL-escaped base64 of a nested message
                      field 1 (0x0a) ""
                      field 2 (0x12) language code
                      field 3 (0x1a) ""
    field 3 (0x18)  varint 1
    field 5 (0x2a)  panel identifier
    field 6 (0x30)  varint 1
    field 7 (0x38)  varint 1
    field 8 (0x40)  varint 1

This is not a general protobuf encoder. Every length is written as a single
byte, so a field longer than 127 bytes cannot be represented and is rejected.
"""

import base64
import binascii
import json
import re
from typing import Any, Dict, Optional
from urllib.parse import quote, unquote

from ..utils.logging import get_logger

logger = get_logger("transcript_params")

TRANSCRIPT_PANEL_ID = "engagement-panel-searchable-transcript"
SEARCH_PANEL_ID = "engagement-panel-searchable-transcript-search-panel"
DEFAULT_LANGUAGE = "en"
MAX_FIELD_LENGTH = 0x7F

TAG_VIDEO_ID = 0x0A
TAG_LANGUAGE = 0x12
TAG_EMPTY = 0x1A
TAG_PANEL_ID = 0x2A
FIXED_FLAGS = bytes([0x18, 0x01])
TRAILING_FLAGS = bytes([0x30, 0x01, 0x38, 0x01, 0x40, 0x01])

PARAMS_IN_PANEL_RE = re.compile(r'"getTranscriptEndpoint":\{"params":"([^"]+)"')


def _length_delimited(tag: int, value: bytes) -> bytes:
    if len(value) > MAX_FIELD_LENGTH:
        raise ValueError(
            f"Field 0x{tag:02x} is {len(value)} bytes; single-byte lengths allow at most {MAX_FIELD_LENGTH}")
    return bytes([tag, len(value)]) + value


def _b64decode_lenient(value: str) -> bytes:
    """Decode standard or URL-safe base64, tolerating missing padding."""
    s = value.strip().replace("-", "+").replace("_", "/")
    s += "=" * (-len(s) % 4)
    return base64.b64decode(s, validate=True)


def _read_varint(data: bytes, pos: int):
    result = 0
    shift = 0
    while True:
        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result, pos
        shift += 7


def _find_length_delimited(data: bytes, tag: int) -> Optional[bytes]:
    """Walk top-level fields of *data* and return the payload of the first field with *tag*."""
    pos = 0
    while pos < len(data):
        key, pos = _read_varint(data, pos)
        wire_type = key & 0x07
        if wire_type == 2:
            length, pos = _read_varint(data, pos)
            payload = data[pos:pos + length]
            if len(payload) != length:
                return None
            if key == tag:
                return payload
            pos += length
        elif wire_type == 0:
            _, pos = _read_varint(data, pos)
        else:
            return None
    return None


def encode_language_token(language: str) -> str:
    """Build the URL-escaped base64 nested message carrying *language*."""
    inner = (
        _length_delimited(TAG_VIDEO_ID, b"")
        + _length_delimited(TAG_LANGUAGE, language.encode("utf-8"))
        + _length_delimited(TAG_EMPTY, b"")
    )
    return quote(base64.b64encode(inner).decode("ascii"), safe="")


def encode_params(video_id: str, language: str) -> bytes:
    """Assemble the raw token bytes for *video_id* in *language*."""
    return (
        _length_delimited(TAG_VIDEO_ID, video_id.encode("utf-8"))
        + _length_delimited(TAG_LANGUAGE, encode_language_token(language).encode("ascii"))
        + FIXED_FLAGS
        + _length_delimited(TAG_PANEL_ID, SEARCH_PANEL_ID.encode("utf-8"))
        + TRAILING_FLAGS
    )


def build_transcript_params(video_id: str, language: str) -> str:
    """Return the base64 ``params`` value requesting *language* captions for *video_id*."""
    return base64.b64encode(encode_params(video_id, language)).decode("ascii")


def decode_language(params: str) -> str:
    """
    Read the language code embedded in a ``params`` token.

    Falls back to ``"en"`` when the token cannot be decoded.
    """
    try:
        outer = _b64decode_lenient(unquote(params))
        lang_field = _find_length_delimited(outer, TAG_LANGUAGE)
        if not lang_field:
            return DEFAULT_LANGUAGE
        inner = _b64decode_lenient(unquote(lang_field.decode("ascii")))
        lang = _find_length_delimited(inner, TAG_LANGUAGE)
        if not lang:
            return DEFAULT_LANGUAGE
        return lang.decode("utf-8")
    except (binascii.Error, ValueError, IndexError) as e:
        logger.debug(f"Could not decode language from transcript params: {e}")
        return DEFAULT_LANGUAGE


def extract_existing_params(initial_data: Optional[Dict[str, Any]]) -> Optional[str]:
    """Find the ready-made ``params`` in the page's searchable-transcript engagement panel."""
    if not initial_data:
        return None
    for panel in initial_data.get("engagementPanels") or []:
        renderer = (panel or {}).get("engagementPanelSectionListRenderer") or {}
        if renderer.get("panelIdentifier") != TRANSCRIPT_PANEL_ID:
            continue
        # Substring search survives changes to the renderer nesting
        m = PARAMS_IN_PANEL_RE.search(json.dumps(panel, separators=(",", ":")))
        return m.group(1) if m else None
    return None
