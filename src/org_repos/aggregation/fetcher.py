"""
Repository Fetcher - fetches one organization's public repositories

Runs inside a worker thread. Results go onto the completion queue shared
with the coordinator; failures are logged and never retried.
"""

import logging
import queue
from typing import TYPE_CHECKING

import requests

from org_repos.aggregation.schemas import FailurePolicy, OrganizationRepositories

if TYPE_CHECKING:
    from org_repos.adapters.github.github import GitHub_API

logger = logging.getLogger(__name__)


def fetch_org_repos(
    api: "GitHub_API",
    org_name: str,
    results: "queue.Queue[OrganizationRepositories]",
    policy: FailurePolicy = FailurePolicy.OMIT,
) -> bool:
    """
    Fetch the public repositories of `org_name` and put them on `results`.

    Args:
        api: GitHub API wrapper (shared, read-only)
        org_name: Organization login
        results: Completion queue, sized so that put() never blocks
        policy: OMIT drops a failed organization, REPORT emits it with the error

    Returns:
        True if the repositories were fetched, False otherwise
    """
    try:
        repos = api.list_org_public_repos(org_name)
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Error fetching repos for org {org_name}: {e}")
        if policy is FailurePolicy.REPORT:
            results.put_nowait(OrganizationRepositories(org_name=org_name, repos=[], error=str(e)))
        return False

    logger.debug(f"Fetched {len(repos)} repos for org {org_name}")
    results.put_nowait(OrganizationRepositories(org_name=org_name, repos=repos))
    return True
