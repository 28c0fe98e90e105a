"""
API Dependencies - Application state and FastAPI dependency injection

Settings are injected once when the app is created (see api.main.create_app)
and never re-read per request. The fan-out thread pool lives for the whole
application and is shared by all /orgs requests.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Request

from org_repos.adapters.github.github import GitHub_API, build_github_api
from org_repos.settings import Settings

logger = logging.getLogger(__name__)


class AppState:
    """
    Application state - holds settings, the GitHub client and the worker pool.

    One instance per FastAPI app, shared across all requests. Nothing in here
    is request data.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.executor: Optional[ThreadPoolExecutor] = None
        self._github_api: Optional[GitHub_API] = None
        self._github_lock = threading.Lock()

    def start(self) -> None:
        """Create the shared fan-out thread pool"""
        if self.executor is None:
            logger.info(f"Starting fan-out pool with {self.settings.max_workers} workers")
            self.executor = ThreadPoolExecutor(
                max_workers=self.settings.max_workers,
                thread_name_prefix="org-repos",
            )

    def shutdown(self) -> None:
        if self.executor is not None:
            logger.info("Shutting down fan-out pool...")
            self.executor.shutdown(wait=True)
            self.executor = None

    def get_github_api(self) -> GitHub_API:
        """
        Return the shared GitHub client, building it on first use.

        Raises:
            MissingCredentialError: if a token is required but not configured
        """
        with self._github_lock:
            if self._github_api is None:
                self._github_api = build_github_api(self.settings.github)
            return self._github_api

    def get_status(self) -> Dict[str, Any]:
        """Configuration summary, without secrets"""
        github = self.settings.github
        return {
            "env": self.settings.env,
            "user": github.user,
            "token_configured": github.token is not None and bool(github.token.get_secret_value()),
            "token_required": github.require_token,
            "failure_policy": self.settings.failure_policy.value,
            "max_workers": self.settings.max_workers,
            "pool_started": self.executor is not None,
        }


def get_app_state(request: Request) -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        def example(state: AppState = Depends(get_app_state)):
            settings = state.settings
            ...
    """
    return request.app.state.app_state


@asynccontextmanager
async def lifespan_handler(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    state: AppState = app.state.app_state
    logger.info("FastAPI starting up...")
    state.start()

    yield  # App is now running

    logger.info("FastAPI shutting down...")
    state.shutdown()
    logger.info("Shutdown complete")
