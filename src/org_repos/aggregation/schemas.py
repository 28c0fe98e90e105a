from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# Opaque repository record, passed through exactly as the remote API returns it
Repository = Dict[str, Any]


class FailurePolicy(str, Enum):
    """What to do with an organization whose repositories could not be fetched"""
    OMIT = "omit"      # drop the organization from the result
    REPORT = "report"  # keep it, with empty repos and the error text


@dataclass(frozen=True)
class OrganizationRepositories:
    """Public repositories of one organization"""
    org_name: str
    repos: List[Repository] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation; `error` only appears when set."""
        data: Dict[str, Any] = {"org_name": self.org_name, "repos": self.repos}
        if self.error is not None:
            data["error"] = self.error
        return data
