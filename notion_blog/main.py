"""Main entry point for the notion-blog CLI."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from . import __version__
from .components import giscus_loader_script, render_giscus_comments
from .config import (
    SiteConfigLoader,
    check_redis_settings,
    get_site_config_path,
)
from .models import CommentEmbedProps, SiteConfig, SiteConfigError
from .site_map import canonical_url, navigation_items, social_links

logger = logging.getLogger(__name__)


def load_site(config_path: Optional[str] = None, site_name: Optional[str] = None) -> SiteConfig:
    """Load a site by shipped name, or from a path (override -> env -> default)."""
    loader = SiteConfigLoader()
    if site_name:
        return loader.load_site_config(site_name)
    return loader.load_file(get_site_config_path(config_path))


def format_site_summary(config: SiteConfig) -> str:
    """Format a validated site configuration for display."""
    output = [
        f"Site: {config.name}",
        f"URL: {canonical_url(config)}",
        f"Author: {config.author}",
    ]
    if config.description:
        output.append(f"Description: {config.description}")
    output.append(f"Root page: {config.root_notion_page_id}")
    if config.root_notion_space_id:
        output.append(f"Workspace: {config.root_notion_space_id}")

    output.append(f"Navigation: {config.navigation_style.value}")
    output.append(
        f"Preview images: {'on' if config.is_preview_image_support_enabled else 'off'}"
    )
    output.append(f"Redis: {'on' if config.is_redis_enabled else 'off'}")
    if config.page_url_overrides:
        output.append(f"URL overrides: {len(config.page_url_overrides)}")

    return "\n".join(output)


def format_links_output(config: SiteConfig) -> str:
    """Format navigation and social links for display."""
    output = []

    nav = navigation_items(config)
    if nav:
        output.append("Navigation:")
        for title, href in nav:
            output.append(f"  {title} -> {href}")
    else:
        output.append("Navigation: default Notion breadcrumbs")

    socials = social_links(config)
    if socials:
        output.append("")
        output.append("Social:")
        for platform, url in socials:
            output.append(f"  {platform}: {url}")

    return "\n".join(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate blog configuration and render comment embeds"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--config", "-c", help="Path to a site configuration YAML file")
    source.add_argument("--site", "-s", help="Name of a shipped site configuration")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a site configuration")
    validate.add_argument(
        "--json", action="store_true", help="Print the normalized configuration as JSON"
    )

    subparsers.add_parser("nav", help="Show navigation and social links")
    subparsers.add_parser("sites", help="List shipped site configurations")

    comments = subparsers.add_parser("comments", help="Render the giscus comment embed")
    comments.add_argument("--repo", required=True, help="GitHub repository (owner/name)")
    comments.add_argument("--repo-id", required=True, help="giscus repository id")
    comments.add_argument("--category", required=True, help="Discussion category")
    comments.add_argument("--category-id", required=True, help="giscus category id")
    comments.add_argument("--dark", action="store_true", help="Use the dark theme")
    comments.add_argument(
        "--with-loader", action="store_true", help="Also emit the widget module script"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if args.command == "sites":
        for name in SiteConfigLoader().list_available_sites():
            print(name)
        return 0

    if args.command == "comments":
        props = CommentEmbedProps(
            dark_mode=args.dark,
            repo=args.repo,
            repo_id=args.repo_id,
            category=args.category,
            category_id=args.category_id,
        )
        if args.with_loader:
            print(giscus_loader_script())
        print(render_giscus_comments(props))
        return 0

    try:
        config = load_site(args.config, args.site)
        check_redis_settings(config)
    except (FileNotFoundError, SiteConfigError) as e:
        print(f"Configuration Error: {e}")
        return 1

    if args.command == "validate":
        if args.json:
            print(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(format_site_summary(config))
            print("Configuration OK")
    elif args.command == "nav":
        print(format_links_output(config))

    return 0


if __name__ == "__main__":
    sys.exit(main())
