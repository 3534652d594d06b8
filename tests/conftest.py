"""Shared test fixtures for ContentForge."""

import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

# Ensure contentforge is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from contentforge.clients.cms import CMSClient
from contentforge.clients.exceptions import ContentClientError
from contentforge.common.config import Settings


class FakeCMS:
    """In-memory stand-in for the CMS API.

    Args:
        sites: Site records returned by list_sites().
        categories: Mapping of site slug to category records.
        articles: Mapping of site slug to article records.
        reflect_creations: When False, list_categories() keeps returning the
            initial listing even after create_category() calls.
        fail_titles: Article titles whose creation raises ContentClientError.
    """

    def __init__(
        self,
        sites: list[dict] | None = None,
        categories: dict[str, list[dict]] | None = None,
        articles: dict[str, list[dict]] | None = None,
        reflect_creations: bool = True,
        fail_titles: set[str] | None = None,
    ):
        self.sites = sites if sites is not None else []
        self.categories = {k: list(v) for k, v in (categories or {}).items()}
        self._initial_categories = {k: list(v) for k, v in self.categories.items()}
        self.articles = articles or {}
        self.reflect_creations = reflect_creations
        self.fail_titles = fail_titles or set()
        self.created_categories: list[dict] = []
        self.created_articles: list[dict] = []
        self.calls: list[tuple[str, Any]] = []
        self._next_id = 100

    def list_sites(self):
        self.calls.append(("list_sites", None))
        return self.sites

    def list_categories(self, site):
        self.calls.append(("list_categories", site))
        source = self.categories if self.reflect_creations else self._initial_categories
        return list(source.get(site, []))

    def list_articles(self, site, status=None, limit=None):
        self.calls.append(("list_articles", (site, status, limit)))
        articles = self.articles.get(site, [])
        if isinstance(articles, list) and status:
            articles = [a for a in articles if a.get("status") == status]
        return articles

    def create_category(self, site_id, name, slug):
        self.calls.append(("create_category", name))
        self._next_id += 1
        category = {"id": self._next_id, "name": name, "slug": slug, "site_id": site_id}
        self.created_categories.append(category)
        site_slug = next(s["slug"] for s in self.sites if s["id"] == site_id)
        self.categories.setdefault(site_slug, []).append(category)
        return category

    def create_article(self, payload):
        self.calls.append(("create_article", payload["title"]))
        if payload["title"] in self.fail_titles:
            raise ContentClientError("CMS POST /api/articles failed with status 500", status_code=500)
        self._next_id += 1
        article = {"id": self._next_id, **payload}
        self.created_articles.append(article)
        return article


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings()


@pytest.fixture
def sample_sites() -> list[dict]:
    return [
        {"id": 1, "name": "PickWise", "slug": "pickwise", "domain": "pickwise.com"},
        {"id": 2, "name": "Pet Picks", "slug": "petpicks", "domain": "petpicks.io"},
    ]


@pytest.fixture
def sample_categories() -> dict[str, list[dict]]:
    return {
        "pickwise": [
            {"id": 10, "name": "Robot Vacuums", "slug": "robot-vacuums", "site_id": 1},
            {"id": 11, "name": "Air Purifiers", "slug": "air-purifiers", "site_id": 1},
        ],
        "petpicks": [
            {"id": 20, "name": "Cat Litter", "slug": "cat-litter", "site_id": 2},
        ],
    }


@pytest.fixture
def sample_articles() -> dict[str, list[dict]]:
    return {
        "pickwise": [
            {
                "id": 501,
                "title": "Best Robot Vacuums 2026",
                "slug": "best-robot-vacuums-2026",
                "category_name": "Robot Vacuums",
                "status": "published",
                "created_at": "2026-01-04T10:00:00Z",
            },
            {
                "id": 502,
                "title": "Roborock S8 Review",
                "slug": "roborock-s8-review",
                "category_name": "Robot Vacuums",
                "status": "published",
                "created_at": "2026-01-09T10:00:00Z",
            },
            {
                "id": 503,
                "title": "HEPA Filters Explained",
                "slug": "hepa-filters-explained",
                "category_name": None,
                "status": "published",
                "created_at": "2026-02-01T10:00:00Z",
            },
            {
                "id": 504,
                "title": "Quiet Air Purifiers",
                "slug": "quiet-air-purifiers",
                "category_name": "Air Purifiers",
                "status": "draft",
                "created_at": "2026-02-11T10:00:00Z",
            },
        ],
        "petpicks": [
            {
                "id": 601,
                "title": "Self-Cleaning Litter Boxes",
                "slug": "self-cleaning-litter-boxes",
                "category_name": "Cat Litter",
                "status": "published",
                "created_at": "2026-03-01T10:00:00Z",
            },
        ],
    }


@pytest.fixture
def cms_factory():
    """Return the FakeCMS class for tests that need a custom setup."""
    return FakeCMS


@pytest.fixture
def fake_cms(sample_sites, sample_categories, sample_articles) -> FakeCMS:
    return FakeCMS(sites=sample_sites, categories=sample_categories, articles=sample_articles)


@pytest.fixture
def mock_cms() -> MagicMock:
    """A CMSClient mock for asserting exact calls."""
    return MagicMock(spec=CMSClient)
