"""schema.org structured data for articles."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def generate_schema_markup(
    title: str,
    meta_description: str,
    featured_image: str,
    author: str,
    site_name: str,
    published_at: Optional[datetime] = None,
) -> dict:
    """Build an ``Article`` JSON-LD object.

    ``datePublished`` is the generation time unless ``published_at`` is
    given; the markup is usually produced before the article exists.
    """
    published_at = published_at or datetime.now(timezone.utc)
    return {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": title,
        "description": meta_description,
        "image": featured_image,
        "author": {"@type": "Person", "name": author},
        "datePublished": published_at.isoformat(),
        "publisher": {"@type": "Organization", "name": site_name},
    }
