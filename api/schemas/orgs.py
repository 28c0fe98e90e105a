"""
Orgs API Schemas - Response models for the /orgs endpoint

Used for OpenAPI documentation; repository records are passed through as
returned by GitHub.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class OrgReposItem(BaseModel):
    """Public repositories of one organization"""

    org_name: str = Field(..., description="Organization login")
    repos: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Repository records as returned by the GitHub API"
    )
    error: Optional[str] = Field(
        None,
        description="Fetch error (only present when APP_FAILURE_POLICY=report)"
    )
