"""
Configuration for the yt-scribe transcript pipeline.
All protocol constants are centralized here and can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _parse_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _parse_optional_float_env(name: str) -> Optional[float]:
    value = os.getenv(name, '').strip()
    if not value:
        return None
    seconds = float(value)
    return seconds if seconds > 0 else None


# =============================================================================
# LOGGING
# =============================================================================

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))

# =============================================================================
# YOUTUBE PROTOCOL
# =============================================================================

@dataclass
class YouTubeConfig:
    """Endpoints and client fingerprints used against the watch page and Innertube."""
    watch_url: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_WATCH_URL', 'https://www.youtube.com/watch'))
    transcript_api_url: str = field(default_factory=lambda: os.getenv(
        'YT_SCRIBE_TRANSCRIPT_API_URL', 'https://www.youtube.com/youtubei/v1/get_transcript'))

    # Desktop browser fingerprint for the watch page
    web_user_agent: str = field(default_factory=lambda: os.getenv(
        'YT_SCRIBE_WEB_USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'))
    accept_language: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_ACCEPT_LANGUAGE', 'en-US,en;q=0.9'))
    # Skips the EU consent interstitial
    consent_cookie: str = field(default_factory=lambda: os.getenv(
        'YT_SCRIBE_CONSENT_COOKIE', 'CONSENT=YES+cb.20210328-17-p0.en+FX+000'))
    fallback_client_version: str = field(default_factory=lambda: os.getenv(
        'YT_SCRIBE_FALLBACK_CLIENT_VERSION', '2.20241121.01.00'))

    # Android client fingerprint for get_transcript
    android_user_agent: str = field(default_factory=lambda: os.getenv(
        'YT_SCRIBE_ANDROID_USER_AGENT', 'com.google.android.youtube/19.47.37 (Linux; U; Android 14) gzip'))
    android_client_name: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_ANDROID_CLIENT_NAME', 'ANDROID'))
    android_client_id: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_ANDROID_CLIENT_ID', '3'))
    android_client_version: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_ANDROID_CLIENT_VERSION', '19.47.37'))
    android_sdk_version: int = field(default_factory=lambda: int(os.getenv('YT_SCRIBE_ANDROID_SDK_VERSION', '34')))
    hl: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_HL', 'en'))
    gl: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_GL', 'US'))

    # None means requests waits indefinitely; callers wrap the pipeline in their own timeout
    request_timeout: Optional[float] = field(default_factory=lambda: _parse_optional_float_env('YT_SCRIBE_REQUEST_TIMEOUT'))
    forward_cookies: bool = field(default_factory=lambda: _parse_bool_env('YT_SCRIBE_FORWARD_COOKIES', False))

# =============================================================================
# TRANSCRIPTION
# =============================================================================

@dataclass
class TranscriptionConfig:
    """Defaults for transcript requests."""
    default_language: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_DEFAULT_LANGUAGE', 'en'))
    default_format: str = field(default_factory=lambda: os.getenv('YT_SCRIBE_DEFAULT_FORMAT', 'text'))
    error_body_preview_chars: int = field(default_factory=lambda: int(os.getenv('YT_SCRIBE_ERROR_BODY_PREVIEW', '200')))

# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class Config:
    """Main configuration container."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    youtube: YouTubeConfig = field(default_factory=YouTubeConfig)
    transcription: TranscriptionConfig = field(default_factory=TranscriptionConfig)

    def validate(self) -> list:
        """Return a list of configuration problems, empty when valid."""
        errors = []
        if self.transcription.default_format not in ('text', 'srt', 'json'):
            errors.append(f"YT_SCRIBE_DEFAULT_FORMAT must be text, srt or json, got {self.transcription.default_format!r}")
        if not self.transcription.default_language.strip():
            errors.append("YT_SCRIBE_DEFAULT_LANGUAGE must not be empty")
        if self.transcription.error_body_preview_chars < 0:
            errors.append("YT_SCRIBE_ERROR_BODY_PREVIEW must be non-negative")
        if self.youtube.android_sdk_version < 1:
            errors.append("YT_SCRIBE_ANDROID_SDK_VERSION must be positive")
        return errors


config = Config()
