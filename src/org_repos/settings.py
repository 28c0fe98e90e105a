from typing import Literal, Optional

from pydantic import AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from org_repos.aggregation.schemas import FailurePolicy


class GitHubSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="GITHUB_", extra="ignore")

    token: Optional[SecretStr] = None  # GITHUB_TOKEN
    api_base_url: AnyHttpUrl = "https://api.github.com"
    user: str = "Shaurya0108"  # account whose organizations are aggregated
    require_token: bool = True  # False = anonymous access (lower rate limits)

    # ---- HTTP behaviour ----
    request_timeout: float = Field(default=10.0, gt=0)
    total_retries: int = Field(default=0, ge=0)  # no retries unless asked for
    backoff_factor: float = 1.0
    per_page: int = Field(default=100, ge=1, le=100)
    max_pages: int = Field(default=10, ge=1)
    verify_ssl: bool = True


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- API server configuration ----
    api_host: str = "127.0.0.1"  # localhost for dev, 0.0.0.0 for docker/prod
    api_port: int = 8080
    api_reload: bool = False
    api_workers: int = 1

    # ---- aggregation ----
    max_workers: int = Field(default=8, ge=1)  # size of the fan-out thread pool
    failure_policy: FailurePolicy = FailurePolicy.OMIT

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_ENV, APP_LOG_LEVEL, etc.
        env_nested_delimiter='__',
        extra = "ignore"
    )

    # ---- integrations ----
    github: GitHubSettings = Field(default_factory=GitHubSettings)


def get_settings() -> Settings:
    """Read settings from the environment and .env file."""
    return Settings()
