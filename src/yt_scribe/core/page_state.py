"""
Watch page scraping.

Fetches ``/watch?v=<id>`` the way a desktop browser would and pulls out the
session artifacts the transcript endpoint needs: the embedded
``ytInitialPlayerResponse`` and ``ytInitialData`` documents, the visitor token,
the web client version and the cookies issued on this fetch.

Every extraction returns ``None`` on absent or malformed data; deciding whether
a missing piece is fatal is left to the orchestration layer.
"""

import json
import re
from typing import Any, Dict, List, Optional

import requests

from ..transcription.errors import TranscriptionError
from ..transcription.models import PageState
from ..utils.logging import get_logger
from .config import YouTubeConfig, config as default_config
from .session import SessionFactory, new_session

logger = get_logger("page_state")

# Bounded-greedy: stop at the first `};` followed by the next script-scope boundary
PLAYER_RESPONSE_RE = re.compile(
    r"var ytInitialPlayerResponse\s*=\s*(\{.+?\});\s*(?:var|const|let|</script>)", re.S)
INITIAL_DATA_RE = re.compile(
    r"var ytInitialData\s*=\s*(\{.+?\});\s*(?:var|const|let|</script>)", re.S)
VISITOR_DATA_RE = re.compile(r'"visitorData":"([^"]+)"')
CLIENT_VERSION_RE = re.compile(r'"INNERTUBE_CLIENT_VERSION":"([^"]+)"')


def extract_embedded_json(html: str, pattern: re.Pattern) -> Optional[Dict[str, Any]]:
    """Return the JSON object captured by *pattern*, or None if missing or unparseable."""
    m = pattern.search(html)
    if not m:
        return None
    try:
        data = json.loads(m.group(1))
    except json.JSONDecodeError as e:
        logger.debug(f"Ignoring malformed embedded JSON: {e}")
        return None
    return data if isinstance(data, dict) else None


def extract_visitor_data(html: str) -> Optional[str]:
    m = VISITOR_DATA_RE.search(html)
    return m.group(1) if m else None


def extract_client_version(html: str) -> Optional[str]:
    m = CLIENT_VERSION_RE.search(html)
    return m.group(1) if m else None


def _set_cookie_pairs(response: requests.Response) -> List[str]:
    """name=value part of each Set-Cookie header on one response."""
    raw_headers = getattr(response.raw, "headers", None)
    if raw_headers is None or not hasattr(raw_headers, "getlist"):
        # No urllib3 response behind it; the parsed jar is all there is
        return [f"{cookie.name}={cookie.value}" for cookie in response.cookies]
    return [value.split(";", 1)[0].strip() for value in raw_headers.getlist("Set-Cookie")]


def build_cookie_header(consent_cookie: str, response: requests.Response) -> str:
    """
    Join the consent cookie with every cookie set while loading the page.

    Raw ``Set-Cookie`` headers are read from each redirect hop and the final
    response, so cookies the jar would refuse (expired, other domain) still count.
    """
    parts = [consent_cookie]
    for hop in list(response.history) + [response]:
        parts.extend(_set_cookie_pairs(hop))
    return "; ".join(p for p in parts if p)


def parse_page_state(video_id: str, html: str, cookie_header: str, fallback_client_version: str) -> PageState:
    """Build a PageState from watch page HTML."""
    return PageState(
        video_id=video_id,
        player_response=extract_embedded_json(html, PLAYER_RESPONSE_RE),
        initial_data=extract_embedded_json(html, INITIAL_DATA_RE),
        visitor_data=extract_visitor_data(html),
        client_version=extract_client_version(html) or fallback_client_version,
        cookie_header=cookie_header,
    )


class PageStateFetcher:
    """Fetches a watch page and extracts its embedded session state."""

    def __init__(self, yt_config: Optional[YouTubeConfig] = None, session_factory: SessionFactory = new_session):
        self.config = yt_config or default_config.youtube
        self._session_factory = session_factory

    def _headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.config.web_user_agent,
            "Accept-Language": self.config.accept_language,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Cookie": self.config.consent_cookie,
        }

    def fetch(self, video_id: str) -> PageState:
        """
        Fetch the watch page for *video_id*.

        Raises:
            TranscriptionError: on a network failure or non-2xx status
        """
        logger.info(f"Fetching page data for {video_id}")
        session = self._session_factory()
        try:
            resp = session.get(
                self.config.watch_url,
                params={"v": video_id},
                headers=self._headers(),
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise TranscriptionError(f"Network error fetching YouTube page for video {video_id}: {e}") from e
        finally:
            session.close()

        if not resp.ok:
            raise TranscriptionError(
                f"HTTP {resp.status_code} fetching YouTube page for video {video_id}",
                status_code=resp.status_code,
            )

        state = parse_page_state(
            video_id,
            resp.text,
            build_cookie_header(self.config.consent_cookie, resp),
            self.config.fallback_client_version,
        )
        logger.debug(
            f"Page state for {video_id}: player_response={'yes' if state.player_response else 'no'}, "
            f"initial_data={'yes' if state.initial_data else 'no'}, "
            f"visitor_data={'yes' if state.visitor_data else 'no'}, client_version={state.client_version}"
        )
        return state
