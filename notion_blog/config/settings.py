import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..models import SiteConfig, SiteConfigError


# Site configuration shipped with the package
DEFAULT_SITE_CONFIG = Path(__file__).parent / "sites" / "messfar.yaml"


def get_site_config_path(override_path: Optional[str] = None) -> Path:
    """Get site config path with fallback chain: override -> env -> default."""
    return Path(
        override_path or os.getenv("NOTION_BLOG_SITE_CONFIG") or DEFAULT_SITE_CONFIG
    )


@dataclass
class RedisConfig:
    """Connection settings for the preview image cache, read from the environment."""
    host: Optional[str] = None
    password: Optional[str] = None
    user: str = "default"
    namespace: str = "preview-images"

    @classmethod
    def from_env(cls) -> "RedisConfig":
        """Create configuration from environment variables."""
        return cls(
            host=os.getenv("REDIS_HOST"),
            password=os.getenv("REDIS_PASSWORD"),
            user=os.getenv("REDIS_USER", "default"),
            namespace=os.getenv("REDIS_NAMESPACE", "preview-images"),
        )

    @property
    def is_complete(self) -> bool:
        return bool(self.host and self.password)


def check_redis_settings(
    config: SiteConfig, redis_config: Optional[RedisConfig] = None
) -> Optional[RedisConfig]:
    """
    Fail fast when the site enables Redis without credentials in the environment.

    Returns the Redis settings when Redis is enabled, otherwise None.
    """
    if not config.is_redis_enabled:
        return None

    redis_config = redis_config or RedisConfig.from_env()
    if not redis_config.is_complete:
        raise SiteConfigError(
            "isRedisEnabled",
            "Redis is enabled but REDIS_HOST and REDIS_PASSWORD are not both set",
        )
    return redis_config
