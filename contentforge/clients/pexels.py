"""Pexels stock photo search."""

from __future__ import annotations

from typing import Union

import httpx

from contentforge.common.config import Settings
from contentforge.common.logging import setup_logging
from contentforge.common.models import ImageResult

from .exceptions import ContentClientError

logger = setup_logging(module_name="contentforge.clients.pexels")

MISSING_KEY_ERROR = "No Pexels API key configured"
MAX_PER_PAGE = 80


class PexelsClient:
    """Searches Pexels for landscape stock photos."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings.load()

    @property
    def configured(self) -> bool:
        return bool(self.settings.pexels.api_key)

    def search(self, query: str, count: int = 3) -> Union[list[dict], dict]:
        """Search photos matching ``query``.

        Args:
            query: Free-text search query.
            count: Number of photos to request.

        Returns:
            List of image dicts (id, url, alt, photographer, pexelsUrl), or
            an ``{"error": ...}`` dict when no API key is configured.

        Raises:
            ContentClientError: If the Pexels request fails.
        """
        if not self.configured:
            return {"error": MISSING_KEY_ERROR}

        per_page = min(max(count, 1), MAX_PER_PAGE)
        url = f"{self.settings.pexels.base_url.rstrip('/')}/v1/search"

        try:
            response = httpx.get(
                url,
                params={
                    "query": query,
                    "per_page": per_page,
                    "orientation": "landscape",
                },
                headers={"Authorization": self.settings.pexels.api_key},
                timeout=self.settings.request_timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Pexels API error: %s", e.response.status_code)
            raise ContentClientError(
                f"Pexels search failed with status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error("Pexels not reachable: %s", e)
            raise ContentClientError(f"Pexels search failed: {e}") from e
        except ValueError as e:
            raise ContentClientError("Pexels returned a non-JSON body") from e

        photos = data.get("photos") if isinstance(data, dict) else None
        results = [
            ImageResult.from_pexels(photo, query).model_dump()
            for photo in (photos or [])
        ]
        logger.info("Pexels returned %d photos for %r", len(results), query)
        return results
