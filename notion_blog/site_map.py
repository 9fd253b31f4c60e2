"""URL and link derivation from a SiteConfig."""

import logging
from typing import List, Optional, Tuple

from .models import SiteConfig
from .utils.notion_ids import parse_page_id

logger = logging.getLogger(__name__)

SOCIAL_URL_TEMPLATES = {
    "twitter": "https://twitter.com/{}",
    "github": "https://github.com/{}",
    "linkedin": "https://www.linkedin.com/in/{}",
    "youtube": "https://www.youtube.com/{}",
}


def page_url(config: SiteConfig, page_id: str) -> str:
    """
    Path a page is served under.

    The root page maps to "/", pages listed in pageUrlOverrides to their
    override path, everything else to "/<page id>".
    """
    normalized = parse_page_id(page_id)
    if normalized is None:
        raise ValueError(f"Not a valid Notion page id: {page_id!r}")

    if normalized == config.root_notion_page_id:
        return "/"

    for path, override_id in config.page_url_overrides.items():
        if override_id == normalized:
            return path

    return f"/{normalized}"


def resolve_page_path(config: SiteConfig, path: str) -> Optional[str]:
    """Page id served under a URL path, or None if the path names no page."""
    path = "/" + path.strip("/") if path.strip("/") else "/"

    if path == "/":
        return config.root_notion_page_id

    if path in config.page_url_overrides:
        return config.page_url_overrides[path]

    page_id = parse_page_id(path.lstrip("/"))
    if page_id is None:
        logger.debug(f"No page found for path {path}")
    return page_id


def canonical_url(config: SiteConfig, path: str = "/") -> str:
    return f"https://{config.domain}/{path.lstrip('/')}"


def navigation_items(config: SiteConfig) -> List[Tuple[str, str]]:
    """Ordered (title, href) pairs for the custom header navigation."""
    if not config.has_custom_navigation:
        return []
    return [(link.title, page_url(config, link.page_id)) for link in config.navigation_links]


def social_links(config: SiteConfig) -> List[Tuple[str, str]]:
    """Ordered (platform, url) pairs for the configured social accounts."""
    links = []
    for platform, handle in config.socials.items():
        template = SOCIAL_URL_TEMPLATES.get(platform)
        # mastodon and newsletter are configured as full URLs
        url = template.format(handle) if template else handle
        links.append((platform, url))
    return links
