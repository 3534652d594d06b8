"""CMS API client: authenticated JSON requests against the content backend."""

from __future__ import annotations

from typing import Any, Optional

import requests

from contentforge.common.config import Settings
from contentforge.common.logging import setup_logging

from .exceptions import ContentClientError

logger = setup_logging(module_name="contentforge.clients.cms")


class CMSClient:
    """Thin wrapper over the CMS REST API (sites, categories, articles).

    Response bodies are decoded and returned as-is; callers check the
    shape before treating a result as a collection. There are no retries:
    network errors, non-2xx statuses and non-JSON bodies raise
    ContentClientError immediately.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or Settings.load()
        self.base_url = self.settings.cms.base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update({
            "Content-Type": "application/json",
            "x-api-key": self.settings.cms.api_key,
        })

    # --- Sites ---

    def list_sites(self) -> Any:
        return self._request("GET", "/api/sites")

    # --- Categories ---

    def list_categories(self, site: str) -> Any:
        return self._request("GET", "/api/categories", params={"site": site})

    def create_category(self, site_id: Any, name: str, slug: str) -> Any:
        body = {"site_id": site_id, "name": name, "slug": slug}
        return self._request("POST", "/api/categories", json=body)

    # --- Articles ---

    def list_articles(
        self,
        site: str,
        status: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """List a site's articles, optionally filtered by status.

        Args:
            site: Site slug.
            status: "published" or "draft"; None returns both.
            limit: Maximum number of articles the CMS should return.
        """
        params: dict[str, Any] = {"site": site}
        if status:
            params["status"] = status
        if limit is not None:
            params["limit"] = limit
        return self._request("GET", "/api/articles", params=params)

    def create_article(self, payload: dict) -> Any:
        return self._request("POST", "/api/articles", json=payload)

    # --- Transport ---

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and decode the JSON body.

        Raises:
            ContentClientError: On network failure, non-2xx status or a
                body that is not JSON.
        """
        url = f"{self.base_url}{path}"
        try:
            resp = self._session.request(
                method,
                url,
                params=params,
                json=json,
                timeout=self.settings.request_timeout,
            )
            resp.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.warning("CMS %s %s failed with status %s", method, path, status)
            raise ContentClientError(
                f"CMS {method} {path} failed with status {status}",
                status_code=status,
            ) from exc
        except requests.RequestException as exc:
            logger.warning("CMS %s %s failed: %s", method, path, exc)
            raise ContentClientError(f"CMS {method} {path} failed: {exc}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise ContentClientError(
                f"CMS {method} {path} returned a non-JSON body",
                status_code=resp.status_code,
            ) from exc

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> CMSClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
