"""Shared Pydantic data models for ContentForge.

These models describe the records exchanged with the CMS and the photo
search backend. Remote responses are mostly passed through as plain dicts;
the models are used where this package builds or reshapes a record.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleStatus(str, Enum):
    """Publication state of an article."""
    DRAFT = "draft"
    PUBLISHED = "published"


class Site(BaseModel):
    """A published property inside the CMS."""
    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Optional[str] = None
    slug: Optional[str] = None
    domain: Optional[str] = None


class Category(BaseModel):
    """A category belonging to exactly one site."""
    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Optional[str] = None
    slug: Optional[str] = None
    site_id: Any = None

    def summary(self) -> dict:
        return {"id": self.id, "name": self.name, "slug": self.slug}


class ArticleSpec(BaseModel):
    """An article as supplied by a caller, before defaults and enrichment."""
    title: str = Field(description="Article title")
    content: str = Field(description="Full article content (markdown)")
    category: Optional[str] = Field(default=None, description="Category name")
    tags: Optional[list[str]] = Field(default=None, description="Tags")
    meta_description: Optional[str] = Field(
        default=None, description="SEO meta description"
    )
    featured_image: Optional[str] = Field(default=None, description="Featured image URL")
    author: Optional[str] = Field(default=None, description="Author name")
    status: Optional[ArticleStatus] = Field(
        default=None, description="Status (default: published)"
    )


class ArticlePayload(BaseModel):
    """Body of the CMS article creation request."""
    site_id: Any
    title: str
    slug: str
    content: str
    category_id: Any = None
    tags: list[str] = Field(default_factory=list)
    meta_description: str = ""
    featured_image: str = ""
    author: str
    status: ArticleStatus = ArticleStatus.PUBLISHED

    def to_request_body(self) -> dict:
        return self.model_dump(mode="json")


class ImageResult(BaseModel):
    """A single stock photo returned by an image search."""
    id: Any
    url: str
    alt: str
    photographer: str = ""
    pexelsUrl: str = ""

    @classmethod
    def from_pexels(cls, photo: dict, query: str) -> ImageResult:
        """Map a raw Pexels photo object, preferring the larger rendition."""
        src = photo.get("src") or {}
        return cls(
            id=photo.get("id"),
            url=src.get("large2x") or src.get("large") or "",
            alt=photo.get("alt") or query,
            photographer=photo.get("photographer") or "",
            pexelsUrl=photo.get("url") or "",
        )


class ArticleSummary(BaseModel):
    """Trimmed view of an existing article; values pass through unchanged."""
    id: Any = None
    title: Any = None
    slug: Any = None
    category: Any = None
    status: Any = None
    created: Any = None

    @classmethod
    def from_cms(cls, article: dict) -> ArticleSummary:
        return cls(
            id=article.get("id"),
            title=article.get("title"),
            slug=article.get("slug"),
            category=article.get("category_name"),
            status=article.get("status"),
            created=article.get("created_at"),
        )
