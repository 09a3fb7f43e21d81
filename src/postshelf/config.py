"""Site configuration.

Loads settings from a YAML file, falling back to defaults.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

DEFAULT_CONFIG_FILE = Path("postshelf.yaml")


class SiteConfig(BaseModel):
    """Where content lives and which languages the site is published in."""

    content_dir: Path = Path("content")
    languages: list[str] = Field(default_factory=lambda: ["en", "es"], min_length=1)
    default_language: str = "en"
    max_related: int = Field(default=3, ge=0)

    @model_validator(mode="after")
    def _check_default_language(self) -> SiteConfig:
        if self.default_language not in self.languages:
            raise ValueError(
                f"default_language '{self.default_language}' not in languages {self.languages}"
            )
        return self

    @classmethod
    def load(cls, path: Path | None = None) -> SiteConfig:
        """Load settings from `path` (default ``postshelf.yaml``) if it exists.

        A relative ``content_dir`` is resolved against the config file's directory.

        Raises:
            ValueError: The file is unreadable or holds invalid settings
                (pydantic's ValidationError is a ValueError).
        """
        path = path or DEFAULT_CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ValueError(f"cannot read {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{path}: top level must be a mapping")

        config = cls.model_validate(data)
        if not config.content_dir.is_absolute():
            config.content_dir = path.parent / config.content_dir
        return config
