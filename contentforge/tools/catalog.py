"""Tool catalogue: names, descriptions and argument models of every tool."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Type

from pydantic import BaseModel

from .schemas import (
    BatchPublishRequest,
    ContentBriefRequest,
    EnrichLinksRequest,
    ExistingArticlesRequest,
    NoArguments,
    PublishArticleRequest,
    SeoMetadataRequest,
    SourceImagesRequest,
)


class ToolName(str, Enum):
    """The fixed set of tools exposed to agents."""
    LIST_SITES = "list_sites"
    SOURCE_IMAGES = "source_images"
    ENRICH_LINKS = "enrich_links"
    SEO_METADATA = "seo_metadata"
    PUBLISH_ARTICLE = "publish_article"
    CONTENT_BRIEF = "content_brief"
    PORTFOLIO_STATS = "portfolio_stats"
    BATCH_PUBLISH = "batch_publish"
    GET_EXISTING_ARTICLES = "get_existing_articles"


@dataclass(frozen=True)
class ToolDefinition:
    """A tool as advertised to MCP clients."""
    name: ToolName
    description: str
    arguments: Type[BaseModel]

    @property
    def input_schema(self) -> dict:
        schema = self.arguments.model_json_schema()
        schema.pop("title", None)
        schema.pop("description", None)
        schema.setdefault("properties", {})
        return schema


TOOL_DEFINITIONS: list[ToolDefinition] = [
    ToolDefinition(
        ToolName.LIST_SITES,
        "List all available sites and their categories from the CMS",
        NoArguments,
    ),
    ToolDefinition(
        ToolName.SOURCE_IMAGES,
        "Search for stock images on Pexels. Returns URLs, alt text, and photographer credit.",
        SourceImagesRequest,
    ),
    ToolDefinition(
        ToolName.ENRICH_LINKS,
        "Scan article content for Amazon product URLs and add affiliate tags.",
        EnrichLinksRequest,
    ),
    ToolDefinition(
        ToolName.SEO_METADATA,
        "Generate SEO metadata for an article: slug, meta description, "
        "schema.org markup, and suggested internal links.",
        SeoMetadataRequest,
    ),
    ToolDefinition(
        ToolName.PUBLISH_ARTICLE,
        "Publish an article to the CMS.",
        PublishArticleRequest,
    ),
    ToolDefinition(
        ToolName.CONTENT_BRIEF,
        "Generate a content brief for a site: analyzes existing content, identifies "
        "gaps, and provides data for planning new articles. Use this before writing "
        "to avoid duplicate topics.",
        ContentBriefRequest,
    ),
    ToolDefinition(
        ToolName.PORTFOLIO_STATS,
        "Get aggregate statistics across all sites in the CMS: article counts, "
        "category distribution, published vs draft.",
        NoArguments,
    ),
    ToolDefinition(
        ToolName.BATCH_PUBLISH,
        "Publish multiple articles to a site in one call. Each article needs title, "
        "content, and optionally category, tags, meta_description, featured_image.",
        BatchPublishRequest,
    ),
    ToolDefinition(
        ToolName.GET_EXISTING_ARTICLES,
        "Get existing articles for a site.",
        ExistingArticlesRequest,
    ),
]

TOOLS_BY_NAME: dict[str, ToolDefinition] = {t.name.value: t for t in TOOL_DEFINITIONS}
