"""Tests for site configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from postshelf.config import SiteConfig


class TestSiteConfig:
    def test_defaults(self):
        """Should provide defaults without a config file."""
        config = SiteConfig()
        assert config.content_dir == Path("content")
        assert config.languages == ["en", "es"]
        assert config.default_language == "en"
        assert config.max_related == 3

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        """Should fall back to defaults when the file does not exist."""
        assert SiteConfig.load(tmp_path / "missing.yaml") == SiteConfig()

    def test_load_resolves_relative_content_dir(self, tmp_path: Path):
        """Should resolve content_dir relative to the config file."""
        path = tmp_path / "postshelf.yaml"
        path.write_text(
            "content_dir: site/content\nlanguages: [es, en]\ndefault_language: es\n",
            encoding="utf-8",
        )
        config = SiteConfig.load(path)
        assert config.content_dir == tmp_path / "site/content"
        assert config.languages == ["es", "en"]
        assert config.default_language == "es"

    def test_empty_file(self, tmp_path: Path):
        """Should treat an empty file as defaults."""
        path = tmp_path / "postshelf.yaml"
        path.write_text("", encoding="utf-8")
        assert SiteConfig.load(path).max_related == 3

    def test_default_language_must_be_listed(self):
        """Should reject a default language missing from languages."""
        with pytest.raises(ValidationError):
            SiteConfig(languages=["en"], default_language="es")

    def test_negative_max_related_rejected(self):
        """Should reject a negative max_related."""
        with pytest.raises(ValidationError):
            SiteConfig(max_related=-1)

    def test_non_mapping_file_rejected(self, tmp_path: Path):
        """Should reject a file whose top level is not a mapping."""
        path = tmp_path / "postshelf.yaml"
        path.write_text("- en\n- es\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            SiteConfig.load(path)

    def test_invalid_value_is_value_error(self, tmp_path: Path):
        """Should raise ValueError for invalid settings."""
        path = tmp_path / "postshelf.yaml"
        path.write_text("max_related: -1\n", encoding="utf-8")
        with pytest.raises(ValueError):
            SiteConfig.load(path)

    def test_invalid_yaml_is_value_error(self, tmp_path: Path):
        """Should raise ValueError for a file that is not YAML."""
        path = tmp_path / "postshelf.yaml"
        path.write_text("languages: [en\n", encoding="utf-8")
        with pytest.raises(ValueError, match="cannot read"):
            SiteConfig.load(path)
