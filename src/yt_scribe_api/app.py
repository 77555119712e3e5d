"""Main FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .api.models.base import HealthResponse, HealthStatus
from .config import get_api_config
from .exceptions import APIError
from .middleware import setup_middleware


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Args:
        app: FastAPI application instance
    """
    logger.info("Starting yt-scribe API...")
    config = get_api_config()
    logger.info(f"Environment: {config.environment}")
    logger.info(f"Debug mode: {config.debug}")

    yield

    logger.info("Shutting down yt-scribe API...")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    config = get_api_config()

    app = FastAPI(
        title=config.title,
        description=config.description,
        version=config.version,
        debug=config.debug,
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None
    )

    setup_middleware(app)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            data=HealthStatus(
                status="healthy",
                message="yt-scribe API is running",
                version=config.version
            )
        )

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            "message": "yt-scribe API",
            "version": config.version,
            "docs": "/docs" if config.debug else "Documentation disabled in production"
        }

    @app.exception_handler(APIError)
    async def api_error_handler(request, exc: APIError):
        """Handle API errors."""
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    from .api.routers import health, transcript

    app.include_router(
        health.router,
        prefix="/api/v1",
        tags=["Health"]
    )

    app.include_router(
        transcript.router,
        prefix="/api/v1/youtube",
        tags=["YouTube Transcripts"]
    )

    logger.info("FastAPI application created successfully")
    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    config = get_api_config()
    uvicorn.run(
        "yt_scribe_api.app:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
