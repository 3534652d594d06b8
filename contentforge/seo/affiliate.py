"""Amazon Associates link tagging.

Only bare product URLs are rewritten::

    https://amazon.com/dp/B08N5WRWNW          -> https://www.amazon.com/dp/B08N5WRWNW?tag=<tag>
    https://www.amazon.com/dp/B08N5WRWNW?th=1 -> https://www.amazon.com/dp/B08N5WRWNW?th=1&tag=<tag>

URLs that already carry a ``tag`` parameter, URLs with extra path segments
after the ASIN, and anything that is not an amazon.com ``/dp/`` URL are left
exactly as they are.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs

AMAZON_PRODUCT_URL = re.compile(
    r"https://(?:www\.)?amazon\.com/dp/"
    r"(?P<asin>[A-Z0-9]{10})(?![A-Za-z0-9/])"
    r"(?:\?(?P<query>[^\s\"'<>()\[\]]+))?"
)


def _has_tag(query: str | None) -> bool:
    if not query:
        return False
    return "tag" in parse_qs(query, keep_blank_values=True)


def enrich_affiliate_links(content: str, tag: str) -> tuple[str, bool]:
    """Append the affiliate tag to every untagged Amazon product URL.

    Applying the function twice gives the same result as applying it once.

    Args:
        content: Article content (markdown or HTML).
        tag: Amazon Associates tracking tag.

    Returns:
        Tuple of (rewritten content, whether anything changed).
    """

    def _rewrite(match: re.Match) -> str:
        query = match.group("query")
        if _has_tag(query):
            return match.group(0)
        base = f"https://www.amazon.com/dp/{match.group('asin')}"
        if query:
            return f"{base}?{query}&tag={tag}"
        return f"{base}?tag={tag}"

    enriched = AMAZON_PRODUCT_URL.sub(_rewrite, content)
    return enriched, enriched != content
