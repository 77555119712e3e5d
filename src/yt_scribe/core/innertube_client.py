"""
Client for YouTube's internal ``get_transcript`` endpoint.

Requests are sent with the Android app's client context. The web context puts
consent and auth gates in front of this endpoint; the Android one does not.
"""

from typing import Any, Dict, Optional

import requests

from ..transcription.errors import CaptionsDisabledError, TranscriptionError
from ..utils.logging import get_logger
from .config import YouTubeConfig, config as default_config
from .session import SessionFactory, new_session

logger = get_logger("innertube_client")

PRECONDITION_FAILED = "FAILED_PRECONDITION"


class InnertubeClient:
    """Performs the transcript POST and classifies API-level errors."""

    def __init__(
        self,
        yt_config: Optional[YouTubeConfig] = None,
        session_factory: SessionFactory = new_session,
        error_body_preview_chars: int = 200,
    ):
        self.config = yt_config or default_config.youtube
        self._session_factory = session_factory
        self._preview_chars = error_body_preview_chars

    def _headers(self, cookie_header: Optional[str]) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.config.android_user_agent,
            "X-Youtube-Client-Name": self.config.android_client_id,
            "X-Youtube-Client-Version": self.config.android_client_version,
        }
        if cookie_header:
            headers["Cookie"] = cookie_header
        return headers

    def build_payload(self, params: str, visitor_data: Optional[str] = None) -> Dict[str, Any]:
        client: Dict[str, Any] = {
            "clientName": self.config.android_client_name,
            "clientVersion": self.config.android_client_version,
            "androidSdkVersion": self.config.android_sdk_version,
            "hl": self.config.hl,
            "gl": self.config.gl,
        }
        if visitor_data:
            client["visitorData"] = visitor_data
        return {"params": params, "context": {"client": client}}

    def get_transcript(
        self,
        params: str,
        visitor_data: Optional[str] = None,
        cookie_header: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        POST *params* to get_transcript and return the decoded response document.

        Raises:
            CaptionsDisabledError: the API answered with FAILED_PRECONDITION
            TranscriptionError: network failure, non-2xx status, unparseable body
                or any other API-reported error
        """
        logger.info("Fetching transcript via API")
        session = self._session_factory()
        try:
            resp = session.post(
                self.config.transcript_api_url,
                params={"prettyPrint": "false"},
                json=self.build_payload(params, visitor_data),
                headers=self._headers(cookie_header),
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise TranscriptionError(f"Network error calling YouTube transcript API: {e}") from e
        finally:
            session.close()

        if not resp.ok:
            body = (resp.text or "")[:self._preview_chars]
            logger.warning(f"Transcript API returned HTTP {resp.status_code}")
            raise TranscriptionError(
                f"YouTube transcript API returned HTTP {resp.status_code}: {body}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise TranscriptionError(f"Failed to parse YouTube transcript API response: {e}") from e
        if not isinstance(data, dict):
            raise TranscriptionError("Failed to parse YouTube transcript API response: expected a JSON object")

        error = data.get("error")
        if error:
            if not isinstance(error, dict):
                error = {"message": str(error)}
            status = str(error.get("status") or "")
            message = str(error.get("message") or "Unknown API error")
            logger.warning(f"Transcript API error: status={status or '-'} message={message}")
            if status == PRECONDITION_FAILED:
                raise CaptionsDisabledError("(API precondition failed - captions may be unavailable)")
            raise TranscriptionError(f"YouTube API error: {message}")

        return data
