# pexels_cache/clients/pexels_client.py - Pexels REST API client
import os
from typing import Any
from urllib.parse import urljoin

import requests

from ..core.config import get_config_value
from ..core.exceptions import ConfigurationError, NetworkFailure, NotFound, RemoteFormatFailure
from ..core.logging_config import get_logger, log_with_context
from ..domain.models import Photo, SearchPage
from ..domain.repositories import CatalogClient

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.pexels.com/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_PER_PAGE = 80


class PexelsClient(CatalogClient):
    """
    CatalogClient for the Pexels API.

    One attempt per call; retry policy belongs to the caller. Every failure
    is reported as NetworkFailure, RemoteFormatFailure or NotFound.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key or os.getenv("PEXELS_API_KEY")
        if not self.api_key:
            raise ConfigurationError("PEXELS_API_KEY environment variable is required")

        base_url = base_url or get_config_value("pexels.base_url", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout or float(get_config_value("pexels.timeout_sec", DEFAULT_TIMEOUT))
        self.max_per_page = int(get_config_value("search.max_per_page", DEFAULT_MAX_PER_PAGE))
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": self.api_key,
                "User-Agent": get_config_value("pexels.user_agent", "pexels-cache/0.1 (+local)"),
            }
        )

    def search(self, query: str, page: int, per_page: int) -> SearchPage:
        if page < 1:
            raise ValueError("page must be >= 1")
        if per_page < 1:
            raise ValueError("per_page must be > 0")

        params = {
            "query": query.strip(),
            "page": page,
            "per_page": min(per_page, self.max_per_page),
        }
        log_with_context(logger, "debug", "Pexels search", query=query, page=page, per_page=per_page)
        payload = self._get(urljoin(self.base_url, "v1/search"), params=params)
        return self._parse_search_page(payload)

    def fetch_next_page(self, next_page_url: str) -> SearchPage:
        payload = self._get(next_page_url)
        return self._parse_search_page(payload)

    def fetch_by_id(self, photo_id: int) -> Photo:
        log_with_context(logger, "debug", "Pexels photo lookup", photo_id=photo_id)
        payload = self._get(urljoin(self.base_url, f"v1/photos/{photo_id}"), photo_id=photo_id)
        return Photo.from_dict(payload)

    def _get(self, url: str, params: dict | None = None, photo_id: int | None = None) -> Any:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise NetworkFailure(f"Request timed out: {e}", details={"url": url}) from e
        except requests.exceptions.RequestException as e:
            raise NetworkFailure(f"Request failed: {e}", details={"url": url}) from e

        if response.status_code == 404 and photo_id is not None:
            raise NotFound(f"Photo {photo_id} not found", details={"photo_id": photo_id})
        if response.status_code >= 400:
            raise NetworkFailure(
                f"Pexels API returned HTTP {response.status_code}",
                details={"url": url, "status_code": response.status_code},
            )

        try:
            return response.json()
        except ValueError as e:
            raise RemoteFormatFailure(f"Invalid JSON response: {e}", details={"url": url}) from e

    @staticmethod
    def _parse_search_page(payload: Any) -> SearchPage:
        if not isinstance(payload, dict) or not isinstance(payload.get("photos"), list):
            raise RemoteFormatFailure("Search response has no 'photos' list")

        next_page = payload.get("next_page")
        if next_page is not None and not isinstance(next_page, str):
            raise RemoteFormatFailure("Field 'next_page' is not a string")

        return SearchPage(
            photos=[Photo.from_dict(item) for item in payload["photos"]],
            next_page=next_page or None,
        )
