"""
Site configuration factory and loader.

A site is described by a camelCase literal (the same shape the page renderer
consumes). ``site_config()`` validates such a literal and returns an immutable
``SiteConfig``; ``SiteConfigLoader`` reads literals from YAML files.
"""

import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import yaml

from ..models import NavigationLink, NavigationStyle, SiteConfig, SiteConfigError
from ..utils.notion_ids import parse_page_id

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["rootNotionPageId", "name", "domain", "author"]
OPTIONAL_STRING_FIELDS = {
    "description": "description",
    "twitter": "twitter",
    "github": "github",
    "linkedin": "linkedin",
    "mastodon": "mastodon",
    "newsletter": "newsletter",
    "youtube": "youtube",
    "defaultPageIcon": "default_page_icon",
    "defaultPageCover": "default_page_cover",
}
BOOLEAN_FIELDS = {
    "isPreviewImageSupportEnabled": "is_preview_image_support_enabled",
    "isRedisEnabled": "is_redis_enabled",
}
KNOWN_FIELDS = set(REQUIRED_FIELDS) | set(OPTIONAL_STRING_FIELDS) | set(BOOLEAN_FIELDS) | {
    "rootNotionSpaceId",
    "defaultPageCoverPosition",
    "pageUrlOverrides",
    "navigationStyle",
    "navigationLinks",
}

_HOSTNAME_PATTERN = re.compile(
    r"(?=.{1,253}\Z)[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"
    r"(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*",
    re.IGNORECASE,
)


def site_config(data: Mapping[str, Any]) -> SiteConfig:
    """
    Validate a site configuration literal and build a SiteConfig.

    Optional fields left out (or set to null) get their documented defaults.
    Raises SiteConfigError naming the first offending field.
    """
    if not isinstance(data, Mapping):
        raise SiteConfigError("<root>", "site configuration must be a mapping")

    # YAML may produce bool or int keys ("on:", "1:"), so keep insertion order
    unknown = [key for key in data if key not in KNOWN_FIELDS]
    if unknown:
        raise SiteConfigError(str(unknown[0]), "unknown configuration field")

    for field_name in REQUIRED_FIELDS:
        if data.get(field_name) in (None, ""):
            raise SiteConfigError(field_name, "required field is missing")

    kwargs: Dict[str, Any] = {
        "root_notion_page_id": _require_page_id(data, "rootNotionPageId"),
        "root_notion_space_id": _optional_page_id(data, "rootNotionSpaceId"),
        "name": _require_string(data, "name"),
        "domain": _parse_domain(data),
        "author": _require_string(data, "author"),
        "default_page_cover_position": _parse_cover_position(data),
        "page_url_overrides": _parse_url_overrides(data),
    }

    for key, attr in OPTIONAL_STRING_FIELDS.items():
        kwargs[attr] = _optional_string(data, key)

    for key, attr in BOOLEAN_FIELDS.items():
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, bool):
            raise SiteConfigError(key, f"expected a boolean, got {value!r}")
        kwargs[attr] = value

    navigation_style, navigation_links = _parse_navigation(data)
    kwargs["navigation_style"] = navigation_style
    kwargs["navigation_links"] = navigation_links

    config = SiteConfig(**kwargs)
    logger.debug(f"Loaded site configuration for {config}")
    return config


def _require_string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise SiteConfigError(key, f"expected a non-empty string, got {value!r}")
    return value


def _optional_string(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SiteConfigError(key, f"expected a string, got {value!r}")
    return value


def _require_page_id(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    page_id = parse_page_id(value)
    if page_id is None:
        raise SiteConfigError(key, f"not a valid Notion id: {value!r}")
    return page_id


def _optional_page_id(data: Mapping[str, Any], key: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return _require_page_id(data, key)


def _parse_domain(data: Mapping[str, Any]) -> str:
    domain = _require_string(data, "domain")
    if not _HOSTNAME_PATTERN.fullmatch(domain):
        raise SiteConfigError("domain", f"not a valid hostname: {domain!r}")
    return domain


def _parse_cover_position(data: Mapping[str, Any]) -> Optional[float]:
    value = data.get("defaultPageCoverPosition")
    if value is None:
        return None
    # bool is an int subclass, rule it out explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SiteConfigError(
            "defaultPageCoverPosition", f"expected a number, got {value!r}"
        )
    if not 0 <= value <= 1:
        raise SiteConfigError(
            "defaultPageCoverPosition", f"must be between 0 and 1, got {value!r}"
        )
    return float(value)


def _parse_url_overrides(data: Mapping[str, Any]) -> Mapping[str, str]:
    overrides = data.get("pageUrlOverrides")
    if overrides is None:
        return MappingProxyType({})
    if not isinstance(overrides, Mapping):
        raise SiteConfigError("pageUrlOverrides", "expected a mapping of path to page id")

    parsed: Dict[str, str] = {}
    for path, page_id in overrides.items():
        if not isinstance(path, str) or not path.startswith("/"):
            raise SiteConfigError("pageUrlOverrides", f"path must start with '/': {path!r}")
        normalized_path = _normalize_override_path(path)
        if normalized_path in parsed:
            raise SiteConfigError("pageUrlOverrides", f"duplicate path: {path!r}")
        normalized = parse_page_id(page_id)
        if normalized is None:
            raise SiteConfigError(
                "pageUrlOverrides", f"not a valid Notion id for '{path}': {page_id!r}"
            )
        parsed[normalized_path] = normalized

    return MappingProxyType(parsed)


def _normalize_override_path(path: str) -> str:
    """Normalize an override path to the "/a/b" form request paths resolve to."""
    stripped = path.strip("/")
    if not stripped:
        raise SiteConfigError("pageUrlOverrides", "'/' is reserved for the root page")
    if any(not segment.strip() for segment in stripped.split("/")):
        raise SiteConfigError("pageUrlOverrides", f"path has an empty segment: {path!r}")
    return f"/{stripped}"


def _parse_navigation(
    data: Mapping[str, Any],
) -> Tuple[NavigationStyle, Tuple[NavigationLink, ...]]:
    raw_style = data.get("navigationStyle")
    if raw_style is None:
        style = NavigationStyle.DEFAULT
    else:
        try:
            style = NavigationStyle(raw_style)
        except ValueError:
            allowed = ", ".join(s.value for s in NavigationStyle)
            raise SiteConfigError(
                "navigationStyle", f"expected one of {allowed}, got {raw_style!r}"
            )

    raw_links = data.get("navigationLinks")
    if raw_links is None:
        raw_links = []
    if not isinstance(raw_links, (list, tuple)):
        raise SiteConfigError("navigationLinks", "expected a list of {title, pageId}")

    links = []
    for index, raw_link in enumerate(raw_links):
        if not isinstance(raw_link, Mapping):
            raise SiteConfigError(
                "navigationLinks", f"entry {index} must be a mapping, got {raw_link!r}"
            )
        title = raw_link.get("title")
        if not isinstance(title, str) or not title.strip():
            raise SiteConfigError("navigationLinks", f"entry {index} is missing a title")
        page_id = parse_page_id(raw_link.get("pageId"))
        if page_id is None:
            raise SiteConfigError(
                "navigationLinks",
                f"entry {index} ({title}) has an invalid pageId: {raw_link.get('pageId')!r}",
            )
        links.append(NavigationLink(title=title, page_id=page_id))

    if style is NavigationStyle.CUSTOM and not links:
        logger.warning(
            "navigationStyle is 'custom' but no navigationLinks are configured; "
            "the default navigation will be shown"
        )
    elif style is NavigationStyle.DEFAULT and links:
        logger.debug("navigationLinks are ignored unless navigationStyle is 'custom'")

    return style, tuple(links)


class SiteConfigLoader:
    """Loads and validates site configurations from YAML files."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        if config_dir is None:
            self.config_dir = Path(__file__).parent / "sites"
        else:
            self.config_dir = Path(config_dir)

    def load_site_config(self, site_name: str) -> SiteConfig:
        """Load a specific site configuration by name."""
        return self.load_file(self.config_dir / f"{site_name}.yaml")

    def load_file(self, config_path: Union[str, Path]) -> SiteConfig:
        """Load a site configuration from an explicit YAML path."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Site configuration not found: {config_path}")
        if not config_path.is_file():
            raise SiteConfigError("<root>", f"{config_path} is not a file")

        with open(config_path, "r", encoding="utf-8") as f:
            try:
                config_data = yaml.safe_load(f)
            except UnicodeDecodeError as e:
                raise SiteConfigError("<root>", f"{config_path} is not valid UTF-8: {e}")
            except yaml.YAMLError as e:
                raise SiteConfigError("<root>", f"invalid YAML in {config_path}: {e}")

        if not isinstance(config_data, dict):
            raise SiteConfigError("<root>", f"{config_path} does not contain a mapping")

        logger.info(f"Loading site configuration from {config_path}")
        return site_config(config_data)

    def list_available_sites(self) -> List[str]:
        """List all available site configurations."""
        if not self.config_dir.exists():
            return []

        return sorted(yaml_file.stem for yaml_file in self.config_dir.glob("*.yaml"))
