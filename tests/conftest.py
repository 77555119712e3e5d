"""Pytest configuration and fixtures for the transcript pipeline tests."""

import json
import os
import sys
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, Mock

import pytest
import requests
from requests.cookies import cookiejar_from_dict

# Add the src directory to path so the suite runs without an install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("API_DEBUG", "true")

from yt_scribe.core.config import Config
from yt_scribe.core.transcriber import YouTubeTranscriber


VIDEO_ID = "dQw4w9WgXcQ"


def make_response(status_code: int = 200, body: Any = "", cookies: Optional[Dict[str, str]] = None) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    resp = requests.Response()
    resp.status_code = status_code
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.encoding = "utf-8"
    resp.url = "https://www.youtube.com/"
    if cookies:
        resp.cookies = cookiejar_from_dict(cookies)
    return resp


def make_track(code: str, name: Optional[str] = None, kind: Optional[str] = None) -> Dict[str, Any]:
    track = {
        "baseUrl": f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang={code}",
        "languageCode": code,
    }
    if name:
        track["name"] = {"simpleText": name}
    if kind:
        track["kind"] = kind
    return track


def make_player_response(tracks: Optional[List[Dict[str, Any]]] = None, status: str = "OK",
                         reason: Optional[str] = None) -> Dict[str, Any]:
    playability = {"status": status}
    if reason:
        playability["reason"] = reason
    player = {"playabilityStatus": playability, "videoDetails": {"videoId": VIDEO_ID}}
    if tracks is not None:
        player["captions"] = {"playerCaptionsTracklistRenderer": {"captionTracks": tracks}}
    return player


def make_initial_data(params: Optional[str] = None) -> Dict[str, Any]:
    panels = [
        {"engagementPanelSectionListRenderer": {"panelIdentifier": "engagement-panel-structured-description"}},
    ]
    if params:
        panels.append({
            "engagementPanelSectionListRenderer": {
                "panelIdentifier": "engagement-panel-searchable-transcript",
                "content": {
                    "continuationItemRenderer": {
                        "continuationEndpoint": {
                            "getTranscriptEndpoint": {"params": params}
                        }
                    }
                },
            }
        })
    return {"responseContext": {}, "engagementPanels": panels}


def make_watch_html(player_response: Optional[Dict[str, Any]] = None,
                    initial_data: Optional[Dict[str, Any]] = None,
                    visitor_data: Optional[str] = "CgtWaXNpdG9yMTIz",
                    client_version: Optional[str] = "2.20250101.00.00") -> str:
    """Render a minimal watch page carrying the embedded documents the fetcher looks for."""
    parts = ["<!DOCTYPE html><html><head><script>"]
    cfg = {}
    if visitor_data:
        cfg["visitorData"] = visitor_data
    if client_version:
        cfg["INNERTUBE_CLIENT_VERSION"] = client_version
    parts.append(f"ytcfg.set({json.dumps(cfg, separators=(',', ':'))});</script>")
    if player_response is not None:
        parts.append(f"<script>var ytInitialPlayerResponse = {json.dumps(player_response)};var meta = 1;</script>")
    if initial_data is not None:
        parts.append(f"<script>var ytInitialData = {json.dumps(initial_data)};</script>")
    parts.append("</head><body></body></html>")
    return "".join(parts)


def make_segment_item(text: Optional[str], start_ms: Any = None, end_ms: Any = None,
                      runs: Optional[List[str]] = None) -> Dict[str, Any]:
    renderer: Dict[str, Any] = {}
    if start_ms is not None:
        renderer["startMs"] = str(start_ms)
    if end_ms is not None:
        renderer["endMs"] = str(end_ms)
    snippet: Dict[str, Any] = {}
    if text is not None:
        snippet["elementsAttributedString"] = {"content": text}
    if runs is not None:
        snippet["runs"] = [{"text": r} for r in runs]
    renderer["snippet"] = snippet
    return {"transcriptSegmentRenderer": renderer}


def make_api_response(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "responseContext": {},
        "actions": [
            {"clickTrackingParams": "abc"},
            {
                "elementsCommand": {
                    "transformEntityCommand": {
                        "arguments": {
                            "transformTranscriptSegmentListArguments": {
                                "overwrite": {"initialSegments": items}
                            }
                        }
                    }
                }
            },
        ],
    }


@pytest.fixture
def video_id():
    return VIDEO_ID


@pytest.fixture
def app_config():
    """Fresh configuration detached from the module-level singleton."""
    return Config()


@pytest.fixture
def mock_session():
    """A MagicMock standing in for requests.Session."""
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_response(200, make_watch_html(make_player_response([make_track("en")])))
    session.post.return_value = make_response(200, make_api_response([make_segment_item("Hello", 0, 1000)]))
    return session


@pytest.fixture
def session_factory(mock_session):
    return Mock(return_value=mock_session)


@pytest.fixture
def transcriber(app_config, session_factory):
    return YouTubeTranscriber(app_config, session_factory=session_factory)
