"""
Aggregation Coordinator - fan-out/fan-in over a user's organizations

Flow for one call:
1. List the organizations of the user (single blocking call, errors propagate)
2. Submit one fetch_org_repos task per organization to the thread pool
3. Wait until every task has completed (success or failure)
4. Drain the completion queue into a list (completion order)

Every call owns its completion queue and futures, so concurrent calls
sharing the same executor and API client never see each other's results.
"""

import logging
import queue
from concurrent.futures import ALL_COMPLETED, Executor, Future, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING, Dict, List, Optional

from org_repos.aggregation.fetcher import fetch_org_repos
from org_repos.aggregation.schemas import FailurePolicy, OrganizationRepositories

if TYPE_CHECKING:
    from org_repos.adapters.github.github import GitHub_API

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


def list_org_names(api: "GitHub_API", user: str) -> List[str]:
    """Organization logins of `user`, in the order the API returns them."""
    org_names = []
    for org in api.list_user_orgs(user):
        login = api.org_login(org)
        if not login:
            logger.warning(f"Skipping organization without login for user {user}: {org!r}")
            continue
        org_names.append(login)
    return org_names


def _drain(results: "queue.Queue[OrganizationRepositories]") -> List[OrganizationRepositories]:
    collected = []
    while True:
        try:
            collected.append(results.get_nowait())
        except queue.Empty:
            return collected


def _fan_out(
    api: "GitHub_API",
    org_names: List[str],
    executor: Executor,
    policy: FailurePolicy,
) -> List[OrganizationRepositories]:
    results: "queue.Queue[OrganizationRepositories]" = queue.Queue(maxsize=len(org_names))

    futures: Dict[Future, str] = {
        executor.submit(fetch_org_repos, api, org_name, results, policy): org_name
        for org_name in org_names
    }

    # Barrier: all N tasks must finish before the queue is read
    done, _ = wait(futures, return_when=ALL_COMPLETED)

    for future in done:
        error = future.exception()
        if error is None:
            continue
        org_name = futures[future]
        logger.error(f"Unexpected error fetching repos for org {org_name}: {error!r}", exc_info=error)
        if policy is FailurePolicy.REPORT:
            results.put_nowait(OrganizationRepositories(org_name=org_name, repos=[], error=str(error)))

    return _drain(results)


def aggregate_org_repos(
    api: "GitHub_API",
    user: str,
    executor: Optional[Executor] = None,
    policy: FailurePolicy = FailurePolicy.OMIT,
    max_workers: Optional[int] = None,
) -> List[OrganizationRepositories]:
    """
    Fetch the public repositories of every organization `user` belongs to.

    Args:
        api: GitHub API wrapper, shared read-only by all tasks
        user: GitHub login whose organizations are aggregated
        executor: Thread pool to run fetches on. When None, a private pool of
            `max_workers` threads is created for this call and shut down after.
        policy: What to do with organizations whose fetch fails
        max_workers: Size of the private pool (ignored when executor is given)

    Returns:
        One OrganizationRepositories per organization, in completion order.
        Under FailurePolicy.OMIT failed organizations are absent.

    Raises:
        requests.RequestException, ValueError: if the organizations cannot be listed
    """
    logger.info(f"Listing organizations for user {user}")
    org_names = list_org_names(api, user)
    logger.info(f"Found {len(org_names)} organizations for user {user}")

    if not org_names:
        return []

    if executor is not None:
        aggregated = _fan_out(api, org_names, executor, policy)
    else:
        workers = min(max_workers or DEFAULT_MAX_WORKERS, len(org_names))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="org-repos") as pool:
            aggregated = _fan_out(api, org_names, pool, policy)

    succeeded = sum(1 for entry in aggregated if not entry.failed)
    logger.info(f"Aggregated {len(org_names)} organizations for user {user}, {succeeded} succeeded")
    return aggregated
