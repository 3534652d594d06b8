"""Tool dispatcher: maps a tool name and JSON arguments to an operation.

Usage:
    dispatcher = ToolDispatcher.from_settings(Settings.load())
    result = dispatcher.dispatch("enrich_links", {"content": "..."})
    outcome = dispatcher.call("list_sites", {})  # never raises on upstream errors
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from contentforge.clients.cms import CMSClient
from contentforge.clients.exceptions import ContentClientError
from contentforge.clients.pexels import PexelsClient
from contentforge.common.config import Settings
from contentforge.common.logging import setup_logging
from contentforge.publisher.reports import PortfolioReports
from contentforge.publisher.workflow import PublishWorkflow
from contentforge.seo import (
    enrich_affiliate_links,
    generate_meta_description,
    generate_schema_markup,
    generate_slug,
)

from .catalog import TOOLS_BY_NAME, ToolName
from .schemas import (
    BatchPublishRequest,
    ContentBriefRequest,
    EnrichLinksRequest,
    ExistingArticlesRequest,
    PublishArticleRequest,
    SeoMetadataRequest,
    SourceImagesRequest,
)

logger = setup_logging(module_name="contentforge.tools.dispatcher")


@dataclass
class ToolResult:
    """Serialized outcome of one tool call."""
    text: str
    is_error: bool = False


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err["loc"]) or "arguments"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


class ToolDispatcher:
    """Runs the nine ContentForge tools against the CMS and Pexels.

    ``dispatch`` returns a JSON-serializable result or an ``{"error": ...}``
    payload for unknown tools, invalid arguments and missing entities;
    upstream failures raise ContentClientError. ``call`` is the boundary
    that turns those failures into error-flagged results.
    """

    def __init__(
        self,
        settings: Settings,
        cms: CMSClient,
        pexels: PexelsClient,
    ) -> None:
        self.settings = settings
        self.defaults = settings.publishing
        self.pexels = pexels
        self.workflow = PublishWorkflow(cms, self.defaults)
        self.reports = PortfolioReports(cms, self.defaults)
        self._handlers: dict[ToolName, Callable[[Any], Any]] = {
            ToolName.LIST_SITES: lambda _: self.reports.list_sites_with_categories(),
            ToolName.SOURCE_IMAGES: self._source_images,
            ToolName.ENRICH_LINKS: self._enrich_links,
            ToolName.SEO_METADATA: self._seo_metadata,
            ToolName.PUBLISH_ARTICLE: self._publish_article,
            ToolName.CONTENT_BRIEF: self._content_brief,
            ToolName.PORTFOLIO_STATS: lambda _: self.reports.portfolio_stats(),
            ToolName.BATCH_PUBLISH: self._batch_publish,
            ToolName.GET_EXISTING_ARTICLES: self._existing_articles,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> ToolDispatcher:
        return cls(settings, CMSClient(settings), PexelsClient(settings))

    # --- Entry points ---

    def dispatch(self, name: str, arguments: dict | None = None) -> Any:
        """Validate arguments and run the named tool.

        Raises:
            ContentClientError: If a CMS or Pexels call fails.
        """
        tool = TOOLS_BY_NAME.get(name)
        if tool is None:
            return {"error": f"Unknown tool: {name}"}

        try:
            request: BaseModel = tool.arguments.model_validate(arguments or {})
        except ValidationError as e:
            logger.warning("Invalid arguments for %s: %s", name, e.error_count())
            return {"error": f"Invalid arguments for {name}: {_format_validation_error(e)}"}

        return self._handlers[tool.name](request)

    def call(self, name: str, arguments: dict | None = None) -> ToolResult:
        """Run a tool and serialize the outcome for the transport."""
        try:
            result = self.dispatch(name, arguments)
        except ContentClientError as e:
            logger.error("Tool %s failed: %s", name, e)
            return ToolResult(text=f"Error: {e}", is_error=True)
        return ToolResult(text=json.dumps(result, indent=2, ensure_ascii=False))

    # --- Handlers ---

    def _source_images(self, request: SourceImagesRequest) -> Any:
        return self.pexels.search(request.query, request.count or self.defaults.image_count)

    def _enrich_links(self, request: EnrichLinksRequest) -> dict:
        content, changed = enrich_affiliate_links(
            request.content, request.tag or self.defaults.affiliate_tag
        )
        return {"content": content, "linksEnriched": changed}

    def _seo_metadata(self, request: SeoMetadataRequest) -> dict:
        slug = generate_slug(request.title)
        meta = request.meta_description or generate_meta_description(
            request.title, request.content, self.defaults.meta_length
        )
        schema = generate_schema_markup(
            title=request.title,
            meta_description=meta,
            featured_image=request.featured_image or "",
            author=request.author or self.defaults.author,
            site_name=request.site or self.defaults.site_name,
        )
        related = self.reports.related_articles(request.site, slug) if request.site else []
        return {
            "slug": slug,
            "meta_description": meta,
            "schema_markup": schema,
            "suggested_internal_links": related,
        }

    def _publish_article(self, request: PublishArticleRequest) -> dict:
        return self.workflow.publish_article(request.site, request, tag=request.tag)

    def _content_brief(self, request: ContentBriefRequest) -> dict:
        return self.reports.content_brief(request.site, request.count)

    def _batch_publish(self, request: BatchPublishRequest) -> dict:
        return self.workflow.batch_publish(request.site, request.articles)

    def _existing_articles(self, request: ExistingArticlesRequest) -> Any:
        return self.reports.existing_articles(request.site, request.limit)
