"""Publish workflow: resolve site, find-or-create category, submit article.

Orchestrates the complete flow for one article:
ArticleSpec → slug/meta → affiliate tagging → site lookup → category
lookup/creation → CMS article creation

Usage:
    workflow = PublishWorkflow(CMSClient(settings), settings.publishing)
    result = workflow.publish_article("pickwise", spec)
    summary = workflow.batch_publish("pickwise", [spec_a, spec_b])
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError

from contentforge.clients.cms import CMSClient
from contentforge.clients.exceptions import ContentClientError, UnexpectedResponseError
from contentforge.common.config import PublishingDefaults
from contentforge.common.logging import setup_logging
from contentforge.common.models import ArticlePayload, ArticleSpec, Category
from contentforge.seo import (
    enrich_affiliate_links,
    generate_meta_description,
    generate_slug,
)

logger = setup_logging(module_name="contentforge.publisher.workflow")


def site_not_found(slug: str) -> dict:
    return {"error": f'Site "{slug}" not found'}


def expect_list(value: Any, what: str) -> list:
    """Return ``value`` if it is a list, else raise UnexpectedResponseError."""
    if not isinstance(value, list):
        raise UnexpectedResponseError(f"Unexpected response while fetching {what}", raw=value)
    return value


class PublishWorkflow:
    """Creates articles in the CMS, one at a time or in batches.

    Steps per article:
    1. Generate slug and (if missing) meta description
    2. Tag Amazon product links with the affiliate tag
    3. Resolve the target site by slug
    4. Resolve the category by case-insensitive name, creating it if absent
    5. Submit the article
    """

    def __init__(self, cms: CMSClient, defaults: PublishingDefaults | None = None):
        self.cms = cms
        self.defaults = defaults or PublishingDefaults()

    # --- Public operations ---

    def publish_article(
        self,
        site: str,
        spec: ArticleSpec,
        tag: Optional[str] = None,
    ) -> dict:
        """Publish a single article.

        Args:
            site: Target site slug.
            spec: Article fields supplied by the caller.
            tag: Affiliate tag override; the configured tag otherwise.

        Returns:
            ``{"success": True, "article": ...}`` or ``{"error": ...}`` when
            the site does not exist.

        Raises:
            ContentClientError: If any CMS call fails.
        """
        site_record = self.resolve_site(site)
        if site_record is None:
            logger.warning("Publish rejected: site %s not found", site)
            return site_not_found(site)

        article = self._publish_one(site_record, spec, tag=tag)
        logger.info("Published '%s' to %s", spec.title, site)
        return {"success": True, "article": article}

    def batch_publish(self, site: str, specs: list[ArticleSpec]) -> dict:
        """Publish several articles to one site, isolating per-item failures.

        The site is resolved once; if it is missing nothing is published.
        Items run sequentially in input order and a failing item is
        recorded without stopping the rest.

        Returns:
            ``{"published": n, "failed": m, "results": [...]}`` in input
            order, or ``{"error": ...}`` when the site does not exist.
        """
        site_record = self.resolve_site(site)
        if site_record is None:
            logger.warning("Batch rejected: site %s not found", site)
            return site_not_found(site)

        category_cache: dict[str, Any] = {}
        results: list[dict] = []

        for index, spec in enumerate(specs, start=1):
            try:
                article = self._publish_one(site_record, spec, category_cache=category_cache)
                results.append({
                    "title": spec.title,
                    "slug": generate_slug(spec.title),
                    "success": True,
                    "id": article.get("id"),
                })
            except (ContentClientError, ValidationError) as e:
                logger.error("Batch item %d/%d (%s) failed: %s", index, len(specs), spec.title, e)
                results.append({"title": spec.title, "success": False, "error": str(e)})

        published = sum(1 for r in results if r["success"])
        failed = len(results) - published
        logger.info("Batch complete for %s: %d published, %d failed", site, published, failed)
        return {"published": published, "failed": failed, "results": results}

    # --- Resolution ---

    def resolve_site(self, slug: str) -> dict | None:
        """Find a site record by its slug."""
        sites = expect_list(self.cms.list_sites(), "sites")
        return next(
            (s for s in sites if isinstance(s, dict) and s.get("slug") == slug),
            None,
        )

    def resolve_category(
        self,
        site: dict,
        name: str,
        cache: dict[str, Any] | None = None,
    ) -> Any:
        """Return the id of the site's category called ``name``.

        Matching is case-insensitive. When no category matches, one is
        created with a slug derived from the name.

        Args:
            site: Site record (needs ``slug`` and ``id``).
            name: Category name as supplied by the caller.
            cache: Optional per-call map of lower-cased names to ids, used
                so a batch never creates the same category twice.
        """
        key = name.lower()
        if cache is not None and key in cache:
            return cache[key]

        categories = expect_list(self.cms.list_categories(site["slug"]), "categories")
        match = next(
            (
                c for c in categories
                if isinstance(c, dict) and str(c.get("name", "")).lower() == key
            ),
            None,
        )

        if match is not None:
            category_id = match.get("id")
        else:
            created = self.cms.create_category(site.get("id"), name, generate_slug(name))
            if not isinstance(created, dict) or created.get("id") is None:
                raise UnexpectedResponseError(
                    f'Category "{name}" was not created', raw=created
                )
            try:
                category_id = Category.model_validate(created).id
            except ValidationError as e:
                raise UnexpectedResponseError(
                    f'Category "{name}" returned a malformed record', raw=created
                ) from e
            logger.info("Created category '%s' on %s (id=%s)", name, site["slug"], category_id)

        if cache is not None:
            cache[key] = category_id
        return category_id

    # --- Internal ---

    def _publish_one(
        self,
        site: dict,
        spec: ArticleSpec,
        tag: Optional[str] = None,
        category_cache: dict[str, Any] | None = None,
    ) -> dict:
        slug = generate_slug(spec.title)
        meta = spec.meta_description or generate_meta_description(
            spec.title, spec.content, self.defaults.meta_length
        )
        content, _ = enrich_affiliate_links(spec.content, tag or self.defaults.affiliate_tag)

        category_id = None
        if spec.category:
            category_id = self.resolve_category(site, spec.category, cache=category_cache)

        payload = ArticlePayload(
            site_id=site.get("id"),
            title=spec.title,
            slug=slug,
            content=content,
            category_id=category_id,
            tags=spec.tags or [],
            meta_description=meta,
            featured_image=spec.featured_image or "",
            author=spec.author or self.defaults.author,
            status=spec.status or self.defaults.status,
        )

        article = self.cms.create_article(payload.to_request_body())
        if not isinstance(article, dict):
            raise UnexpectedResponseError(
                f'Article "{spec.title}" was not created', raw=article
            )
        return article
