"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Any, Dict

import pytest

from notion_blog.config import site_config
from notion_blog.models import CommentEmbedProps, SiteConfig


@pytest.fixture
def sample_site_literal() -> Dict[str, Any]:
    """Site literal mirroring the shipped blog configuration."""
    return {
        "rootNotionPageId": "036948842f494993a50d4166bff5346d",
        "rootNotionSpaceId": None,
        "name": "髒桶子",
        "domain": "note.messfar.com",
        "author": "York Lin",
        "description": "York Lin's blog",
        "twitter": "superj80820",
        "github": "superj80820",
        "linkedin": "yorklin",
        "defaultPageIcon": "https://note.messfar.com/page-icon.png",
        "defaultPageCover": "https://note.messfar.com/page-cover.jpg",
        "defaultPageCoverPosition": 0.5,
        "isPreviewImageSupportEnabled": True,
        "isRedisEnabled": False,
        "pageUrlOverrides": None,
        "navigationStyle": "custom",
        "navigationLinks": [
            {"title": "文章分類", "pageId": "ff9d8e74fc00469eae1c74af59227d41"},
            {"title": "Golang 教學", "pageId": "9fabdb9d476348f59038e4c2dc8adbf5"},
            {"title": "系統設計", "pageId": "b7a34562dc184ffdb333a7c012346899"},
            {"title": "關於我", "pageId": "3ddc5a575630411f9bd333def07f1bd7"},
        ],
    }


@pytest.fixture
def minimal_site_literal() -> Dict[str, Any]:
    """Site literal with only the required fields."""
    return {
        "rootNotionPageId": "067dd719a912471ea9a3ac10710e7fdf",
        "name": "Test Blog",
        "domain": "blog.example.com",
        "author": "Test Author",
    }


@pytest.fixture
def sample_site(sample_site_literal: Dict[str, Any]) -> SiteConfig:
    return site_config(sample_site_literal)


@pytest.fixture
def sample_comment_props() -> CommentEmbedProps:
    """Comment props from a typical page render."""
    return CommentEmbedProps(
        dark_mode=False,
        repo="a/b",
        repo_id="R1",
        category="General",
        category_id="C1",
    )


@pytest.fixture
def sites_dir() -> Path:
    """Directory holding the shipped site configurations."""
    return Path(__file__).parent.parent / "notion_blog" / "config" / "sites"
