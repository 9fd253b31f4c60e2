from .comments import CommentEmbedProps, GiscusWidgetProps
from .site_config import NavigationLink, NavigationStyle, SiteConfig, SiteConfigError

__all__ = [
    "CommentEmbedProps",
    "GiscusWidgetProps",
    "NavigationLink",
    "NavigationStyle",
    "SiteConfig",
    "SiteConfigError",
]
