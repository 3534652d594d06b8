"""Tests for shared common modules: models, config, logging."""

import io
import logging

import pytest

from contentforge.common.config import Settings
from contentforge.common.logging import set_level, setup_logging
from contentforge.common.models import (
    ArticlePayload,
    ArticleSpec,
    ArticleStatus,
    ArticleSummary,
    Category,
    ImageResult,
)

ENV_VARS = [
    "CONTENTFORGE_CMS_URL",
    "CONTENTFORGE_CMS_KEY",
    "CONTENTFORGE_PEXELS_KEY",
    "CONTENTFORGE_AMAZON_TAG",
    "CONTENTFORGE_API_KEY",
    "CONTENTFORGE_RATE_LIMIT",
    "PORT",
    "HOST",
    "REQUEST_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestArticleSpec:
    def test_minimal(self):
        spec = ArticleSpec(title="T", content="C")
        assert spec.category is None
        assert spec.status is None

    def test_status_enum(self):
        assert ArticleSpec(title="T", content="C", status="draft").status == ArticleStatus.DRAFT

    def test_title_required(self):
        with pytest.raises(Exception):
            ArticleSpec(content="C")


class TestArticlePayload:
    def test_request_body_is_json_ready(self):
        payload = ArticlePayload(
            site_id=1,
            title="T",
            slug="t",
            content="C",
            author="A",
            status="draft",
        )
        assert payload.to_request_body() == {
            "site_id": 1,
            "title": "T",
            "slug": "t",
            "content": "C",
            "category_id": None,
            "tags": [],
            "meta_description": "",
            "featured_image": "",
            "author": "A",
            "status": "draft",
        }


class TestImageResult:
    def test_falls_back_to_large_and_query(self):
        image = ImageResult.from_pexels({"id": 5, "src": {"large": "L"}, "alt": None}, "desk lamp")
        assert image.url == "L"
        assert image.alt == "desk lamp"
        assert image.photographer == ""

    def test_no_src(self):
        assert ImageResult.from_pexels({"id": 5}, "q").url == ""


class TestCmsRecords:
    def test_article_summary_renames_fields(self):
        summary = ArticleSummary.from_cms({
            "id": 1,
            "title": "T",
            "slug": "t",
            "category_name": "Cat",
            "status": "published",
            "created_at": "2026-01-01",
            "content": "dropped",
        })
        assert summary.model_dump() == {
            "id": 1,
            "title": "T",
            "slug": "t",
            "category": "Cat",
            "status": "published",
            "created": "2026-01-01",
        }

    def test_category_tolerates_extra_and_missing(self):
        category = Category.model_validate({"id": 3, "name": "N", "color": "red"})
        assert category.summary() == {"id": 3, "name": "N", "slug": None}


class TestSettings:
    def test_defaults(self, clean_env, tmp_path):
        settings = Settings.load(tmp_path / "missing.yaml")

        assert settings.cms.api_key == ""
        assert settings.pexels.base_url == "https://api.pexels.com"
        assert settings.publishing.affiliate_tag == "pickwise05-20"
        assert settings.server.port == 3000
        assert settings.server.rate_limit == 100

    def test_yaml_file(self, clean_env, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "cms:\n  base_url: https://cms.local\n"
            "publishing:\n  author: Staff Writer\n"
            "server:\n  rate_limit: 10\n",
            encoding="utf-8",
        )
        settings = Settings.load(path)

        assert settings.cms.base_url == "https://cms.local"
        assert settings.publishing.author == "Staff Writer"
        assert settings.publishing.status == "published"
        assert settings.server.rate_limit == 10

    def test_empty_yaml(self, clean_env, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert Settings.load(path).server.port == 3000

    def test_env_wins_over_yaml(self, clean_env, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("cms:\n  api_key: from-yaml\n", encoding="utf-8")
        clean_env.setenv("CONTENTFORGE_CMS_KEY", "from-env")
        clean_env.setenv("CONTENTFORGE_PEXELS_KEY", "px")
        clean_env.setenv("CONTENTFORGE_AMAZON_TAG", "env-20")
        clean_env.setenv("CONTENTFORGE_API_KEY", "server")
        clean_env.setenv("CONTENTFORGE_RATE_LIMIT", "7")
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("REQUEST_TIMEOUT", "5")

        settings = Settings.load(path)

        assert settings.cms.api_key == "from-env"
        assert settings.pexels.api_key == "px"
        assert settings.publishing.affiliate_tag == "env-20"
        assert settings.server.api_key == "server"
        assert settings.server.rate_limit == 7
        assert settings.server.port == 8080
        assert settings.request_timeout == 5.0


class TestLogging:
    def test_handler_writes_to_stream(self):
        stream = io.StringIO()
        logger = setup_logging(module_name="contentforge.test.stream", stream=stream)
        logger.info("hello")

        assert "[INFO] contentforge.test.stream: hello" in stream.getvalue()

    def test_not_configured_twice(self):
        first = setup_logging(module_name="contentforge.test.once")
        second = setup_logging(module_name="contentforge.test.once")
        assert first is second
        assert len(first.handlers) == 1

    def test_set_level(self):
        logger = setup_logging(module_name="contentforge.test.level")
        set_level(logging.WARNING)
        try:
            assert logger.level == logging.WARNING
            assert logger.handlers[0].level == logging.WARNING
        finally:
            set_level(logging.INFO)
