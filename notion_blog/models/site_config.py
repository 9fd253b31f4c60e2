from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


class SiteConfigError(ValueError):
    """Raised when a site configuration literal is malformed."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        self.message = message
        super().__init__(f"Invalid site configuration field '{field_name}': {message}")


class NavigationStyle(str, Enum):
    DEFAULT = "default"
    CUSTOM = "custom"


@dataclass(frozen=True)
class NavigationLink:
    title: str
    page_id: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "pageId": self.page_id}


# Social platforms in display order.
SOCIAL_PLATFORMS = ("twitter", "mastodon", "github", "youtube", "linkedin", "newsletter")


@dataclass(frozen=True)
class SiteConfig:
    """
    Site-wide configuration for the blog.

    Built once at startup by ``site_config()`` and passed to whatever renders
    pages. Instances are immutable: sequences are tuples and mappings are
    read-only proxies.
    """
    root_notion_page_id: str
    name: str
    domain: str
    author: str
    root_notion_space_id: Optional[str] = None
    description: Optional[str] = None

    twitter: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    mastodon: Optional[str] = None  # profile URL
    newsletter: Optional[str] = None  # URL
    youtube: Optional[str] = None  # channel name or "channel/<id>"

    default_page_icon: Optional[str] = None
    default_page_cover: Optional[str] = None
    default_page_cover_position: Optional[float] = None

    is_preview_image_support_enabled: bool = True
    is_redis_enabled: bool = False

    page_url_overrides: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    navigation_style: NavigationStyle = NavigationStyle.DEFAULT
    navigation_links: Tuple[NavigationLink, ...] = ()

    @property
    def socials(self) -> Dict[str, str]:
        """Configured social handles keyed by platform name."""
        return {
            platform: getattr(self, platform)
            for platform in SOCIAL_PLATFORMS
            if getattr(self, platform)
        }

    @property
    def has_custom_navigation(self) -> bool:
        return self.navigation_style is NavigationStyle.CUSTOM and bool(
            self.navigation_links
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render back to the camelCase literal shape."""
        return {
            "rootNotionPageId": self.root_notion_page_id,
            "rootNotionSpaceId": self.root_notion_space_id,
            "name": self.name,
            "domain": self.domain,
            "author": self.author,
            "description": self.description,
            "twitter": self.twitter,
            "github": self.github,
            "linkedin": self.linkedin,
            "mastodon": self.mastodon,
            "newsletter": self.newsletter,
            "youtube": self.youtube,
            "defaultPageIcon": self.default_page_icon,
            "defaultPageCover": self.default_page_cover,
            "defaultPageCoverPosition": self.default_page_cover_position,
            "isPreviewImageSupportEnabled": self.is_preview_image_support_enabled,
            "isRedisEnabled": self.is_redis_enabled,
            "pageUrlOverrides": dict(self.page_url_overrides),
            "navigationStyle": self.navigation_style.value,
            "navigationLinks": [link.to_dict() for link in self.navigation_links],
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.domain})"
