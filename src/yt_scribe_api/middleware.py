"""Request tracing and CORS for the transcript API."""

import logging
import time
import uuid

from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from .config import get_api_config


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_SECONDS = 10.0


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs its outcome and latency."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"[{request_id}] {route} crashed after {time.perf_counter() - started:.3f}s")
            raise

        elapsed = time.perf_counter() - started
        log = logger.warning if elapsed > SLOW_REQUEST_SECONDS else logger.info
        log(f"[{request_id}] {route} -> {response.status_code} in {elapsed:.3f}s")
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_cors_middleware(app) -> None:
    """Allow the configured browser origins to call the read-only endpoints."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_api_config().cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER]
    )


def setup_middleware(app) -> None:
    # Last added runs first
    app.add_middleware(RequestLoggingMiddleware)
    setup_cors_middleware(app)
