"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
Environment variables win over the YAML file, which wins over defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")

SERVER_NAME = "contentforge"
SERVER_VERSION = "0.2.0"

DEFAULT_CMS_URL = "https://cms-api-production-ad22.up.railway.app"
DEFAULT_PEXELS_URL = "https://api.pexels.com"
DEFAULT_AFFILIATE_TAG = "pickwise05-20"


class CMSSettings(BaseModel):
    """Content-management backend connection."""
    base_url: str = DEFAULT_CMS_URL
    api_key: str = ""


class PexelsSettings(BaseModel):
    """Photo-search backend connection."""
    base_url: str = DEFAULT_PEXELS_URL
    api_key: str = ""


class PublishingDefaults(BaseModel):
    """Fallback values applied when a tool call omits an optional field."""
    author: str = "Editorial Team"
    status: str = "published"
    site_name: str = "ContentForge"
    affiliate_tag: str = DEFAULT_AFFILIATE_TAG
    meta_length: int = 155
    image_count: int = 3
    brief_count: int = 5
    brief_title_cap: int = 50
    brief_article_limit: int = 200
    existing_articles_limit: int = 50
    related_links: int = 5
    related_fetch_limit: int = 20
    stats_article_limit: int = 1000


class ServerSettings(BaseModel):
    """Networked (HTTP/SSE) deployment settings."""
    host: str = "0.0.0.0"
    port: int = 3000
    api_key: str = ""  # empty = open access
    rate_limit: int = 100
    rate_window_seconds: int = 60 * 60


class Settings(BaseModel):
    """Top-level application settings."""
    cms: CMSSettings = Field(default_factory=CMSSettings)
    pexels: PexelsSettings = Field(default_factory=PexelsSettings)
    publishing: PublishingDefaults = Field(default_factory=PublishingDefaults)
    server: ServerSettings = Field(default_factory=ServerSettings)
    request_timeout: float = 30.0

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from YAML (if present), then apply env overrides."""
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        settings = cls(**data)
        settings.apply_env()
        return settings

    def apply_env(self) -> None:
        """Override fields from CONTENTFORGE_* environment variables."""
        if url := os.getenv("CONTENTFORGE_CMS_URL"):
            self.cms.base_url = url
        if key := os.getenv("CONTENTFORGE_CMS_KEY"):
            self.cms.api_key = key
        if key := os.getenv("CONTENTFORGE_PEXELS_KEY"):
            self.pexels.api_key = key
        if tag := os.getenv("CONTENTFORGE_AMAZON_TAG"):
            self.publishing.affiliate_tag = tag
        if key := os.getenv("CONTENTFORGE_API_KEY"):
            self.server.api_key = key
        if limit := os.getenv("CONTENTFORGE_RATE_LIMIT"):
            self.server.rate_limit = int(limit)
        if port := os.getenv("PORT"):
            self.server.port = int(port)
        if host := os.getenv("HOST"):
            self.server.host = host
        if timeout := os.getenv("REQUEST_TIMEOUT"):
            self.request_timeout = float(timeout)
