"""Slug and meta-description generation."""

from __future__ import annotations

import re

META_DESCRIPTION_LENGTH = 155
ELLIPSIS = "..."

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")
_MARKDOWN_CHARS = re.compile(r"[#*_\[\]()]")
_NEWLINES = re.compile(r"\n+")
_TRAILING_PARTIAL_WORD = re.compile(r"\s+\S*$")


def generate_slug(title: str) -> str:
    """Build a URL slug from a title.

    Every run of characters outside ``[a-z0-9]`` becomes a single hyphen.
    A title without any ASCII letters or digits yields an empty slug.

    Example:
        >>> generate_slug("Best Robot Vacuums of 2026!")
        'best-robot-vacuums-of-2026'
    """
    return _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")


def _clean_markdown(text: str) -> str:
    text = _MARKDOWN_CHARS.sub("", text)
    return _NEWLINES.sub(" ", text).strip()


def generate_meta_description(
    title: str,
    content: str,
    max_length: int = META_DESCRIPTION_LENGTH,
) -> str:
    """Derive an SEO meta description from article content.

    Markdown emphasis, heading and link punctuation is removed and newlines
    are collapsed. The text is cut to ``max_length`` characters without
    splitting a word, then an ellipsis is appended.

    Args:
        title: Article title, used when the content has no usable text.
        content: Article body (markdown).
        max_length: Maximum length before the ellipsis.

    Returns:
        Meta description ending in ``...``.
    """
    clean = _clean_markdown(content) or _clean_markdown(title)

    if len(clean) <= max_length:
        return clean + ELLIPSIS

    cut = clean[:max_length]
    if not clean[max_length].isspace():
        # The cut landed inside a word; drop that partial word
        cut = _TRAILING_PARTIAL_WORD.sub("", cut)
    return cut.rstrip() + ELLIPSIS
