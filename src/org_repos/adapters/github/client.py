import logging
from typing import Any, Dict, List, Optional

import certifi  # Provides Mozilla's CA bundle for SSL certificate verification
import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from org_repos.settings import GitHubSettings

logger = logging.getLogger(__name__)

USER_AGENT = "org-repos-aggregator"


class GitHub_APIClient:
    def __init__(self,
                settings: GitHubSettings,
                status_forcelist: tuple = (429, 500, 502, 503, 504)):
        """
        Initializes a requests.Session with:
            - Authorization header (only when a token is configured)
            - GitHub JSON accept header
            - HTTPAdapter with the configured retry budget (none by default)
        """
        self.settings = settings
        self.session = requests.Session()

        if settings.verify_ssl:
            self._verify: Any = certifi.where()
        else:
            self._verify = False
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        retry_strategy = Retry(
            total=settings.total_retries,
            connect=settings.total_retries,
            read=settings.total_retries,
            backoff_factor=settings.backoff_factor,
            status_forcelist=status_forcelist,
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        })
        if settings.token is not None:
            self.session.headers["Authorization"] = f"Bearer {settings.token.get_secret_value()}"

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self.session.headers

    def _url(self, path: str) -> str:
        api_base_url: str = str(self.settings.api_base_url)
        return f"{api_base_url.rstrip('/')}/{path.lstrip('/')}"

    def _handle_response(self, resp: requests.Response) -> Any:
        """
        Handle API response with proper error checking and JSON parsing.

        Args:
            resp: HTTP response object

        Returns:
            Parsed JSON data

        Raises:
            requests.HTTPError: For 4xx/5xx HTTP status codes
            ValueError: If response is not valid JSON
        """
        try:
            resp.raise_for_status()
        except requests.HTTPError:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text[:200]}")
            raise

        if not resp.content:
            logger.warning(f"Empty response received for {resp.url}")
            return {}

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Invalid JSON response from {resp.url}: {resp.text[:200]}...")
            raise ValueError(f"Invalid JSON response from {resp.url}: {e}") from e

    def _request(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        logger.debug(f"GET {url} params={params}")
        return self.session.get(
            url,
            params=params,
            timeout=self.settings.request_timeout,
            verify=self._verify,
        )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Perform a GET request against the GitHub API, returning parsed JSON."""
        resp = self._request(self._url(path), params=params)
        return self._handle_response(resp)

    def get_paginated(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        """
        GET a list endpoint and follow `Link: rel="next"` headers.

        Stops after `max_pages` pages; items from every page are concatenated
        in the order GitHub returns them.
        """
        query = {"per_page": self.settings.per_page}
        query.update(params or {})

        items: List[Any] = []
        url: Optional[str] = self._url(path)
        pages = 0
        while url is not None:
            # the "next" link already carries the query string
            resp = self._request(url, params=query if pages == 0 else None)
            page = self._handle_response(resp)
            if not isinstance(page, list):
                if page:
                    raise ValueError(f"Expected a JSON array from {resp.url}, got {type(page).__name__}")
                page = []
            items.extend(page)
            pages += 1

            url = resp.links.get("next", {}).get("url")
            if url is not None and pages >= self.settings.max_pages:
                logger.warning(f"Stopping pagination of {path} after {pages} pages")
                break

        return items
