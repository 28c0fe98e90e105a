"""
Unit tests for the HTTP surface.

The GitHub client built by AppState is replaced with an in-memory fake;
the missing-credential tests use the real factory.
"""
import json
from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from api.main import create_app
from org_repos.aggregation.schemas import FailurePolicy
from org_repos.settings import GitHubSettings, Settings

from fakes import FakeGitHubAPI, connection_error


def make_settings(failure_policy=FailurePolicy.OMIT, **github):
    github.setdefault("token", "test-token")
    github.setdefault("user", "X")
    return Settings(max_workers=4, failure_policy=failure_policy, github=GitHubSettings(**github))


@pytest.fixture
def fake_api():
    return FakeGitHubAPI(
        orgs={"X": ["A", "B"]},
        repos={"A": [{"name": "r1"}, {"name": "r2"}]},
        failing_orgs={"B": connection_error("B")},
    )


@pytest.fixture
def client(fake_api):
    app = create_app(make_settings())
    with patch("api.dependencies.build_github_api", return_value=fake_api):
        with TestClient(app) as test_client:
            yield test_client


class TestRoot:
    def test_greeting(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.text == "Hello, World!\n"
        assert resp.headers["content-type"].startswith("text/plain")


class TestOrgsEndpoint:
    """Test suite for GET /orgs."""

    def test_failed_org_is_absent(self, client):
        resp = client.get("/orgs")

        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/json"
        assert resp.json() == [{"org_name": "A", "repos": [{"name": "r1"}, {"name": "r2"}]}]

    def test_all_orgs_present(self, fake_api, client):
        fake_api.failing_orgs.clear()

        body = client.get("/orgs").json()

        assert {entry["org_name"] for entry in body} == {"A", "B"}
        assert all(isinstance(entry["repos"], list) for entry in body)

    def test_listing_failure_returns_500(self, fake_api, client):
        fake_api.list_error = requests.HTTPError("401 Client Error: Unauthorized")

        resp = client.get("/orgs")

        assert resp.status_code == 500
        assert resp.headers["content-type"].startswith("text/plain")
        assert "Unauthorized" in resp.text

    def test_encoding_failure_returns_500(self, fake_api, client):
        fake_api.failing_orgs.clear()
        fake_api.repos["A"] = [{"stars": float("nan")}]

        resp = client.get("/orgs")

        assert resp.status_code == 500
        assert "Failed to encode response" in resp.text

    def test_repeated_calls_are_set_equal(self, fake_api, client):
        fake_api.failing_orgs.clear()

        first = client.get("/orgs").json()
        second = client.get("/orgs").json()

        key = lambda body: sorted(json.dumps(entry, sort_keys=True) for entry in body)
        assert key(first) == key(second)

    def test_report_policy_includes_error(self, fake_api):
        app = create_app(make_settings(failure_policy=FailurePolicy.REPORT))
        with patch("api.dependencies.build_github_api", return_value=fake_api):
            with TestClient(app) as test_client:
                body = test_client.get("/orgs").json()

        by_name = {entry["org_name"]: entry for entry in body}
        assert set(by_name) == {"A", "B"}
        assert "error" not in by_name["A"]
        assert by_name["B"]["repos"] == []
        assert "connection refused" in by_name["B"]["error"]


class TestCredentials:
    """GET /orgs with and without a configured token."""

    def test_missing_token_returns_500(self):
        app = create_app(make_settings(token=None, require_token=True))
        with TestClient(app) as test_client:
            resp = test_client.get("/orgs")

        assert resp.status_code == 500
        assert "GITHUB_TOKEN is not set" in resp.text

    def test_anonymous_variant_succeeds_without_token(self):
        app = create_app(make_settings(token=None, require_token=False))
        anonymous = FakeGitHubAPI(orgs={"X": ["A"]}, repos={"A": ["r1"]})

        with patch("org_repos.adapters.github.github.GitHub_API", return_value=anonymous):
            with TestClient(app) as test_client:
                resp = test_client.get("/orgs")

        assert resp.status_code == 200
        assert resp.json() == [{"org_name": "A", "repos": ["r1"]}]


class TestHealth:
    def test_ready_reports_configuration(self, client):
        resp = client.get("/health/ready")

        assert resp.status_code == 200
        body = resp.json()
        assert body["ready"] is True
        assert body["details"]["user"] == "X"
        assert body["details"]["token_configured"] is True
        assert body["details"]["failure_policy"] == "omit"
        assert body["details"]["pool_started"] is True
        assert "test-token" not in resp.text
