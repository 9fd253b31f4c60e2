from .settings import RedisConfig, check_redis_settings, get_site_config_path
from .site_loader import SiteConfigLoader, site_config

__all__ = [
    "RedisConfig",
    "SiteConfigLoader",
    "check_redis_settings",
    "get_site_config_path",
    "site_config",
]
