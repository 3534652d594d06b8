"""Per-tool argument models, validated before any handler runs."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contentforge.common.models import ArticleSpec


class NoArguments(BaseModel):
    """Tools that take no arguments."""


class SourceImagesRequest(BaseModel):
    query: str = Field(description="Search query for images")
    count: Optional[int] = Field(
        default=None, ge=1, le=80, description="Number of images (1-80, default 3)"
    )


class EnrichLinksRequest(BaseModel):
    content: str = Field(description="Article content (markdown)")
    tag: Optional[str] = Field(
        default=None, description="Amazon Associates tag (default: configured tag)"
    )


class SeoMetadataRequest(BaseModel):
    title: str = Field(description="Article title")
    content: str = Field(description="Article content (markdown)")
    site: Optional[str] = Field(default=None, description="Site slug for internal linking")
    author: Optional[str] = Field(default=None, description="Author name")
    featured_image: Optional[str] = Field(default=None, description="Featured image URL")
    meta_description: Optional[str] = Field(
        default=None, description="Explicit meta description (generated when omitted)"
    )


class PublishArticleRequest(ArticleSpec):
    site: str = Field(description="Site slug")
    tag: Optional[str] = Field(
        default=None, description="Amazon Associates tag (default: configured tag)"
    )


class ContentBriefRequest(BaseModel):
    site: str = Field(description="Site slug")
    count: Optional[int] = Field(
        default=None, ge=1, description="Number of article ideas to plan for (default 5)"
    )


class BatchPublishRequest(BaseModel):
    site: str = Field(description="Site slug")
    articles: list[ArticleSpec] = Field(description="Array of articles to publish")


class ExistingArticlesRequest(BaseModel):
    site: str = Field(description="Site slug")
    limit: Optional[int] = Field(default=None, ge=1, description="Max articles (default 50)")
