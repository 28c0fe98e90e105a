# Folder in charge of GitHub API interactions
import logging
from typing import Any, Dict, List, Optional

from org_repos.adapters.github.client import GitHub_APIClient
from org_repos.errors import MissingCredentialError
from org_repos.settings import GitHubSettings

logger = logging.getLogger(__name__)


class GitHub_API():
    """Wrapper class for the GitHub organization/repository endpoints"""
    def __init__(self, settings: GitHubSettings):
        self._client: GitHub_APIClient = GitHub_APIClient(settings)

    @property
    def authenticated(self) -> bool:
        return self._client.authenticated

    def list_user_orgs(self, user: str) -> List[Dict[str, Any]]:
        """Lists the organizations `user` publicly belongs to (or all of them for the token owner)"""
        return self._client.get_paginated(f"users/{user}/orgs")

    def list_org_public_repos(self, org_name: str) -> List[Dict[str, Any]]:
        """Lists the public repositories of an organization"""
        return self._client.get_paginated(f"orgs/{org_name}/repos", params={"type": "public"})

    @staticmethod
    def org_login(org: Dict[str, Any]) -> Optional[str]:
        """Organization identifier used in /orgs/{org} URLs"""
        return org.get("login")


def build_github_api(settings: GitHubSettings) -> GitHub_API:
    """
    Create a GitHub_API from settings.

    Raises:
        MissingCredentialError: if a token is required but not configured
    """
    if settings.token is None or not settings.token.get_secret_value():
        if settings.require_token:
            raise MissingCredentialError("GITHUB_TOKEN")
        logger.info("No GitHub token configured, using anonymous access")
        settings = settings.model_copy(update={"token": None})
    return GitHub_API(settings)
