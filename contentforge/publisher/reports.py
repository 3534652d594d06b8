"""Read-side reports over the CMS: site listing, content briefs, portfolio stats.

Every collection the CMS returns is shape-checked; a malformed listing
degrades to an empty value (or an ``{"error", "raw"}`` payload where the
caller has nothing sensible to fall back on) instead of raising.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationError

from contentforge.clients.cms import CMSClient
from contentforge.clients.exceptions import ContentClientError
from contentforge.common.config import PublishingDefaults
from contentforge.common.logging import setup_logging
from contentforge.common.models import ArticleSummary, Category, Site

logger = setup_logging(module_name="contentforge.publisher.reports")

UNCATEGORIZED = "uncategorized"


def _as_list(value: Any) -> list[dict]:
    """Keep the dict records of a listing; anything else counts as empty."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _parse_records(model: type[BaseModel], value: Any) -> list:
    """Validate the dict records of a listing, skipping malformed ones."""
    records = []
    for item in _as_list(value):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping malformed %s record: %s", model.__name__, e.error_count())
    return records


class PortfolioReports:
    """Aggregates CMS data across one or all sites."""

    def __init__(self, cms: CMSClient, defaults: PublishingDefaults | None = None):
        self.cms = cms
        self.defaults = defaults or PublishingDefaults()

    # --- Sites ---

    def list_sites_with_categories(self) -> Union[list[dict], dict]:
        """List every site with its categories nested inside."""
        sites = self.cms.list_sites()
        if not isinstance(sites, list):
            logger.warning("Site listing was not a list: %r", sites)
            return {"error": "Failed to fetch sites", "raw": sites}

        result = []
        for site in _parse_records(Site, sites):
            categories = _parse_records(Category, self.cms.list_categories(site.slug))
            result.append({
                "id": site.id,
                "name": site.name,
                "slug": site.slug,
                "domain": site.domain,
                "categories": [c.summary() for c in categories],
            })
        return result

    # --- Articles ---

    def existing_articles(self, site: str, limit: Optional[int] = None) -> Union[list[dict], dict]:
        """List a site's articles, trimmed to the fields agents need.

        Returns:
            List of {id, title, slug, category, status, created}, or
            ``{"error": "Failed to fetch articles", "raw": ...}`` when the
            CMS does not answer with a list.
        """
        limit = limit or self.defaults.existing_articles_limit
        articles = self.cms.list_articles(site, limit=limit)
        if not isinstance(articles, list):
            return {"error": "Failed to fetch articles", "raw": articles}
        return [ArticleSummary.from_cms(a).model_dump() for a in _as_list(articles)]

    def related_articles(
        self, site: str, exclude_slug: str, limit: Optional[int] = None
    ) -> list[dict]:
        """Suggest published articles on ``site`` for internal linking.

        CMS failures are logged and yield no suggestions.
        """
        try:
            articles = self.cms.list_articles(
                site, status="published", limit=self.defaults.related_fetch_limit
            )
        except ContentClientError as e:
            logger.warning("Could not load related articles for %s: %s", site, e)
            return []

        related = [
            {"title": a.get("title"), "slug": a.get("slug")}
            for a in _as_list(articles)
            if a.get("slug") != exclude_slug
        ]
        return related[: limit or self.defaults.related_links]

    # --- Planning ---

    def content_brief(self, site: str, count: Optional[int] = None) -> dict:
        """Summarise a site's existing coverage to plan new articles.

        Args:
            site: Site slug.
            count: Number of new article ideas the caller intends to plan.

        Returns:
            Dictionary with article totals, per-category counts, existing
            titles (lower-cased, capped) and a planning suggestion.
        """
        count = count or self.defaults.brief_count
        articles = _as_list(self.cms.list_articles(
            site, status="published", limit=self.defaults.brief_article_limit
        ))
        categories = _as_list(self.cms.list_categories(site))

        distribution = Counter(a.get("category_name") or UNCATEGORIZED for a in articles)
        titles = [str(a.get("title") or "").lower() for a in articles]

        return {
            "site": site,
            "total_articles": len(articles),
            "categories": [
                {
                    "name": c.get("name"),
                    "slug": c.get("slug"),
                    "article_count": distribution.get(c.get("name"), 0),
                }
                for c in categories
            ],
            "existing_titles": titles[: self.defaults.brief_title_cap],
            "content_distribution": dict(distribution),
            "suggestion": (
                f"Site has {len(articles)} articles. Least-covered categories "
                f"should be prioritized. Generate {count} new article ideas "
                f"that don't overlap with existing content."
            ),
        }

    # --- Statistics ---

    def portfolio_stats(self) -> dict:
        """Published/draft counts per site and totals across all sites."""
        stats = []
        for site in _parse_records(Site, self.cms.list_sites()):
            articles = _as_list(self.cms.list_articles(
                site.slug, limit=self.defaults.stats_article_limit
            ))
            published = sum(1 for a in articles if a.get("status") == "published")
            draft = sum(1 for a in articles if a.get("status") == "draft")
            categories = _as_list(self.cms.list_categories(site.slug))
            stats.append({
                "site": site.name,
                "slug": site.slug,
                "domain": site.domain,
                "published": published,
                "draft": draft,
                "total": published + draft,
                "categories": len(categories),
            })

        return {
            "total_sites": len(stats),
            "total_articles": sum(s["total"] for s in stats),
            "total_published": sum(s["published"] for s in stats),
            "sites": stats,
        }
