"""HTTP API for yt-scribe."""
