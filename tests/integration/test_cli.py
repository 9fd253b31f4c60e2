"""Integration tests for CLI functionality."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml
from bs4 import BeautifulSoup

from notion_blog.config import site_config
from notion_blog.main import format_links_output, format_site_summary, load_site, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NOTION_BLOG_SITE_CONFIG", "REDIS_HOST", "REDIS_PASSWORD"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_config_file(tmp_path: Path, sample_site_literal: Dict[str, Any]) -> Path:
    """Write the sample site to a temporary YAML file."""
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        yaml.safe_dump(sample_site_literal, allow_unicode=True), encoding="utf-8"
    )
    return config_path


class TestCLI:
    """Test CLI functionality."""

    def test_load_site_by_name(self) -> None:
        assert load_site(site_name="messfar").domain == "note.messfar.com"

    def test_load_site_from_path(self, temp_config_file: Path) -> None:
        assert load_site(str(temp_config_file)).name == "髒桶子"

    def test_load_site_from_env(
        self, temp_config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("NOTION_BLOG_SITE_CONFIG", str(temp_config_file))
        assert load_site().author == "York Lin"

    def test_validate_default_site(self, capsys: pytest.CaptureFixture) -> None:
        """Test validating the shipped site configuration."""
        assert main(["validate"]) == 0

        output = capsys.readouterr().out
        assert "Site: 髒桶子" in output
        assert "URL: https://note.messfar.com/" in output
        assert "Navigation: custom" in output
        assert "Configuration OK" in output

    def test_validate_json(
        self, temp_config_file: Path, sample_site_literal: Dict[str, Any], capsys: pytest.CaptureFixture
    ) -> None:
        assert main(["--config", str(temp_config_file), "validate", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data == site_config(sample_site_literal).to_dict()
        assert len(data["navigationLinks"]) == 4

    def test_validate_invalid_config(
        self, tmp_path: Path, sample_site_literal: Dict[str, Any], capsys: pytest.CaptureFixture
    ) -> None:
        """Test that an out-of-range field yields a non-zero exit."""
        sample_site_literal["defaultPageCoverPosition"] = 1.5
        config_path = tmp_path / "bad.yaml"
        config_path.write_text(yaml.safe_dump(sample_site_literal), encoding="utf-8")

        assert main(["-c", str(config_path), "validate"]) == 1
        assert "defaultPageCoverPosition" in capsys.readouterr().out

    def test_validate_missing_file(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["-c", "/nonexistent/site.yaml", "validate"]) == 1
        assert "Configuration Error" in capsys.readouterr().out

    def test_validate_redis_without_env(
        self, tmp_path: Path, sample_site_literal: Dict[str, Any], capsys: pytest.CaptureFixture
    ) -> None:
        sample_site_literal["isRedisEnabled"] = True
        config_path = tmp_path / "redis.yaml"
        config_path.write_text(yaml.safe_dump(sample_site_literal), encoding="utf-8")

        assert main(["-c", str(config_path), "validate"]) == 1
        assert "REDIS_HOST" in capsys.readouterr().out

    def test_nav(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--site", "messfar", "nav"]) == 0

        output = capsys.readouterr().out
        assert "文章分類 -> /ff9d8e74fc00469eae1c74af59227d41" in output
        assert "github: https://github.com/superj80820" in output

    def test_sites(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["sites"]) == 0
        assert "messfar" in capsys.readouterr().out.split()

    def test_comments(self, capsys: pytest.CaptureFixture) -> None:
        """Test rendering the comment embed from the command line."""
        exit_code = main(
            [
                "comments",
                "--repo", "a/b",
                "--repo-id", "R1",
                "--category", "General",
                "--category-id", "C1",
                "--dark",
                "--with-loader",
            ]
        )

        assert exit_code == 0
        soup = BeautifulSoup(capsys.readouterr().out, "html.parser")
        widget = soup.find("giscus-widget")
        assert widget["theme"] == "dark"
        assert widget["repo"] == "a/b"
        assert soup.find("script", type="module") is not None

    def test_validate_directory_path(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["-c", str(tmp_path), "validate"]) == 1
        assert "Configuration Error" in capsys.readouterr().out

    def test_validate_non_utf8_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        config_path = tmp_path / "site.yaml"
        config_path.write_bytes(b"name: \xff\xfe\n")

        assert main(["-c", str(config_path), "validate"]) == 1
        assert "Configuration Error" in capsys.readouterr().out

    def test_validate_yaml_boolean_key(
        self, tmp_path: Path, sample_site_literal: Dict[str, Any], capsys: pytest.CaptureFixture
    ) -> None:
        """Test that keys YAML reads as booleans are reported, not crashed on."""
        config_path = tmp_path / "site.yaml"
        body = yaml.safe_dump(sample_site_literal, allow_unicode=True)
        config_path.write_text(body + "on: 1\ntypo: 2\n", encoding="utf-8")

        assert main(["-c", str(config_path), "validate"]) == 1
        assert "unknown configuration field" in capsys.readouterr().out

    def test_config_and_site_are_exclusive(self, temp_config_file: Path) -> None:
        with pytest.raises(SystemExit):
            main(["-c", str(temp_config_file), "-s", "messfar", "validate"])

    def test_missing_command(self) -> None:
        with pytest.raises(SystemExit):
            main([])


class TestFormatting:
    """Test output formatting helpers."""

    def test_site_summary(self, minimal_site_literal: Dict[str, Any]) -> None:
        output = format_site_summary(site_config(minimal_site_literal))

        assert "Site: Test Blog" in output
        assert "Navigation: default" in output
        assert "Redis: off" in output
        assert "Description" not in output

    def test_links_default_navigation(self, minimal_site_literal: Dict[str, Any]) -> None:
        output = format_links_output(site_config(minimal_site_literal))

        assert "Navigation: default Notion breadcrumbs" in output
        assert "Social" not in output
