"""
CLI for running one organization/repository aggregation and printing the JSON.
"""

import argparse
import json
import logging
import sys

import requests

from org_repos.adapters.github.github import build_github_api
from org_repos.aggregation.coordinator import aggregate_org_repos
from org_repos.aggregation.schemas import FailurePolicy
from org_repos.errors import OrgReposError
from org_repos.logging_setup import setup_logging
from org_repos.settings import get_settings

logger = logging.getLogger(__name__)


def main(argv=None):
    cfg = get_settings()

    parser = argparse.ArgumentParser(
        description="Fetch the public repositories of every organization a GitHub user belongs to."
    )

    parser.add_argument(
        "--user",
        default=cfg.github.user,
        help="GitHub login whose organizations are aggregated."
    )

    parser.add_argument(
        "--policy",
        choices=[p.value for p in FailurePolicy],
        default=cfg.failure_policy.value,
        help="What to do with organizations whose repositories cannot be fetched."
    )

    parser.add_argument(
        "--max-workers",
        type=int,
        default=cfg.max_workers,
        help="Number of organizations fetched concurrently."
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the JSON output."
    )

    args = parser.parse_args(argv)
    # stdout carries the JSON, logs go to stderr
    setup_logging(cfg.log_level)

    try:
        api = build_github_api(cfg.github)
        entries = aggregate_org_repos(
            api,
            args.user,
            policy=FailurePolicy(args.policy),
            max_workers=args.max_workers,
        )
        json.dump([entry.to_dict() for entry in entries], sys.stdout, indent=args.indent)
        sys.stdout.write("\n")

    except (OrgReposError, requests.RequestException, ValueError, TypeError) as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
