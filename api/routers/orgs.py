"""
Orgs Router - Aggregated public repositories of the configured user's organizations
"""

import logging
from typing import List

import requests
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from org_repos.errors import MissingCredentialError
from api.dependencies import get_app_state, AppState
from api.schemas.orgs import OrgReposItem
from api.services import orgs_service

router = APIRouter()
logger = logging.getLogger(__name__)


def _server_error(message: str) -> PlainTextResponse:
    return PlainTextResponse(content=message + "\n", status_code=500)


@router.get(
    "/orgs",
    response_model=None,
    responses={
        200: {"model": List[OrgReposItem], "description": "Repositories per organization"},
        500: {"content": {"text/plain": {}}, "description": "Missing credential or upstream failure"},
    },
)
def get_orgs(state: AppState = Depends(get_app_state)) -> Response:
    """
    List the configured user's organizations and their public repositories.

    Repositories are fetched concurrently, one task per organization. An
    organization whose fetch fails is left out of the result (or reported
    with an `error` field, depending on APP_FAILURE_POLICY). Entries are in
    completion order.
    """
    # sync endpoint: runs in FastAPI's threadpool, off the event loop
    try:
        entries = orgs_service.get_org_repos(state)
    except MissingCredentialError as e:
        logger.error(f"Configuration error: {e}")
        return _server_error(str(e))
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Failed to list organizations for {state.settings.github.user}: {e}")
        return _server_error(str(e) or e.__class__.__name__)

    try:
        body = orgs_service.encode_org_repos(entries)
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to encode aggregation results: {e}", exc_info=True)
        return _server_error(f"Failed to encode response: {e}")

    return Response(content=body, media_type="application/json")
