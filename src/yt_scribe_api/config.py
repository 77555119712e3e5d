"""Configuration management for the HTTP API."""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from yt_scribe.core.config import config as scribe_config


def _parse_origins() -> List[str]:
    origins_str = os.getenv("API_CORS_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


@dataclass
class APIConfig:
    """API configuration settings."""

    host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))
    debug: bool = field(default_factory=lambda: os.getenv("API_DEBUG", "false").lower() == "true")

    cors_origins: List[str] = field(default_factory=_parse_origins)

    title: str = field(default_factory=lambda: os.getenv("API_TITLE", "yt-scribe API"))
    description: str = "HTTP access to YouTube transcripts and caption track listings"
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "0.1.0"))
    environment: str = field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    log_level: str = field(default_factory=lambda: os.getenv("API_LOG_LEVEL", "INFO"))

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.port < 1 or self.port > 65535:
            errors.append("API_PORT must be between 1 and 65535")

        if not self.title.strip():
            errors.append("API_TITLE must not be empty")

        return errors


@lru_cache()
def get_api_config() -> APIConfig:
    """Get validated API configuration; pipeline settings are checked too."""
    config = APIConfig()

    errors = config.validate()
    errors.extend(scribe_config.validate())
    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config
