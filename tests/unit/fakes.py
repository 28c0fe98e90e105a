"""In-memory stand-in for GitHub_API used by the unit tests."""
import threading
from typing import Any, Dict, List, Optional

import requests

from org_repos.adapters.github.github import GitHub_API


class FakeGitHubAPI:
    """Serves canned organizations and repositories; failures raise requests errors."""

    org_login = staticmethod(GitHub_API.org_login)

    def __init__(
        self,
        orgs: Dict[str, List[str]],
        repos: Dict[str, List[Any]],
        failing_orgs: Optional[Dict[str, Exception]] = None,
        list_error: Optional[Exception] = None,
    ):
        self.orgs = orgs
        self.repos = repos
        self.failing_orgs = failing_orgs or {}
        self.list_error = list_error
        self.repo_calls: List[str] = []
        self._lock = threading.Lock()

    def list_user_orgs(self, user: str) -> List[Dict[str, Any]]:
        if self.list_error is not None:
            raise self.list_error
        return [{"login": name, "id": i} for i, name in enumerate(self.orgs.get(user, []))]

    def list_org_public_repos(self, org_name: str) -> List[Any]:
        with self._lock:
            self.repo_calls.append(org_name)
        if org_name in self.failing_orgs:
            raise self.failing_orgs[org_name]
        return self.repos.get(org_name, [])


def connection_error(org_name: str) -> requests.ConnectionError:
    return requests.ConnectionError(f"connection refused for {org_name}")
