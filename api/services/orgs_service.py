"""
Orgs Service - Runs the organization/repository aggregation for the API

Wraps the aggregation coordinator with the app's settings and shared pool.
"""

import json
import logging
from typing import List

from org_repos.aggregation.coordinator import aggregate_org_repos
from org_repos.aggregation.schemas import OrganizationRepositories

from api.dependencies import AppState

logger = logging.getLogger(__name__)


def get_org_repos(state: AppState) -> List[OrganizationRepositories]:
    """
    Aggregate the public repositories of the configured user's organizations.

    Raises:
        MissingCredentialError: if a token is required but not configured
        requests.RequestException, ValueError: if the organizations cannot be listed
    """
    cfg = state.settings
    api = state.get_github_api()
    return aggregate_org_repos(
        api,
        cfg.github.user,
        executor=state.executor,
        policy=cfg.failure_policy,
        max_workers=cfg.max_workers,
    )


def encode_org_repos(entries: List[OrganizationRepositories]) -> str:
    """
    Serialize aggregation results as a JSON array.

    Raises:
        TypeError, ValueError: if a repository record is not JSON-serializable
    """
    return json.dumps([entry.to_dict() for entry in entries], allow_nan=False) + "\n"
