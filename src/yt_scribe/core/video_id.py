"""Resolve free-form user input into an 11-character YouTube video ID."""

import re
from typing import Optional
from urllib.parse import urlparse, parse_qs

VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
PATH_ID_RE = re.compile(r"^/(?:shorts|embed|v)/([A-Za-z0-9_-]{11})")
# Last resort for partial URLs that urlparse cannot make sense of
LOOSE_ID_RE = re.compile(r"(?:v=|/(?:embed|v|shorts)/)([A-Za-z0-9_-]{11})")

WATCH_HOSTS = ("youtube.com", "m.youtube.com")


def is_video_id(value: Optional[str]) -> bool:
    return bool(value) and VIDEO_ID_RE.match(value) is not None


def extract_video_id(url_or_id: Optional[str]) -> Optional[str]:
    """
    Extract the video ID from a URL or bare ID.

    Supports watch?v=, youtu.be/, /shorts/, /embed/ and /v/ links on the
    www., m. and bare youtube.com hosts.

    Args:
        url_or_id: YouTube URL or video ID

    Returns:
        Video ID if found, None otherwise
    """
    s = (url_or_id or "").strip()
    if not s:
        return None
    if is_video_id(s):
        return s

    try:
        u = urlparse(s if s.startswith("http") else f"https://{s}")
        host = (u.hostname or "").lower()
    except ValueError:
        host = ""
        u = None

    if host.startswith("www."):
        host = host[4:]

    if u is not None and host == "youtu.be":
        vid = u.path.lstrip("/").split("/")[0]
        if is_video_id(vid):
            return vid

    if u is not None and host in WATCH_HOSTS:
        qs = parse_qs(u.query)
        if qs.get("v") and is_video_id(qs["v"][0]):
            return qs["v"][0]
        m = PATH_ID_RE.match(u.path)
        if m:
            return m.group(1)

    m = LOOSE_ID_RE.search(s)
    return m.group(1) if m else None
