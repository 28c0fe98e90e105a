"""Exceptions raised by the aggregation service."""


class OrgReposError(Exception):
    """Base class for errors raised by org_repos"""


class MissingCredentialError(OrgReposError):
    """Raised when a GitHub token is required but not configured"""

    def __init__(self, variable: str = "GITHUB_TOKEN"):
        self.variable = variable
        super().__init__(f"{variable} is not set")
