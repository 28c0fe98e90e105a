"""
Organization Repositories Aggregation API - FastAPI Application

Main entry point for the API server.
Configuration is read once from settings (.env file / environment) and
injected into the app; requests never re-read it.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from org_repos.logging_setup import setup_logging
from org_repos.settings import Settings, get_settings
from api.dependencies import AppState, lifespan_handler
from api.routers import health, orgs

logger = logging.getLogger(__name__)

GREETING = "Hello, World!\n"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        settings: Configuration to serve with. Loaded from the environment
            when omitted.

    Returns:
        Configured FastAPI application instance
    """
    cfg = settings or get_settings()

    app = FastAPI(
        title="Organization Repositories API",
        description="Aggregates the public repositories of a GitHub user's organizations",
        version="0.1.0",
        lifespan=lifespan_handler  # Starts/stops the fan-out pool
    )
    app.state.app_state = AppState(cfg)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness greeting"""
        return GREETING

    # Mount routers
    app.include_router(orgs.router, tags=["orgs"])
    app.include_router(health.router, prefix="/health", tags=["health"])

    logger.info(f"FastAPI application created (env={cfg.env}, user={cfg.github.user})")

    return app


def main() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    cfg = get_settings()
    setup_logging(cfg.log_level)

    logger.info(f"Starting API server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")

    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        workers=cfg.api_workers if not cfg.api_reload else 1,  # Workers only work without reload
        log_level=cfg.log_level.lower()
    )


if __name__ == "__main__":
    main()
