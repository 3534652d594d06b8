# SEO toolkit: slugs, meta descriptions, affiliate tagging, schema markup
"""
Pure text transformations applied to article fields before publishing.

None of these functions perform I/O or raise on their documented inputs.
"""

from .affiliate import AMAZON_PRODUCT_URL, enrich_affiliate_links
from .schema import generate_schema_markup
from .text import (
    ELLIPSIS,
    META_DESCRIPTION_LENGTH,
    generate_meta_description,
    generate_slug,
)

__all__ = [
    "AMAZON_PRODUCT_URL",
    "ELLIPSIS",
    "META_DESCRIPTION_LENGTH",
    "enrich_affiliate_links",
    "generate_meta_description",
    "generate_schema_markup",
    "generate_slug",
]
