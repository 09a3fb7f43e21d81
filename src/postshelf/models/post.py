"""Pydantic models for snippets, tutorials and their front matter."""

import math
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

DEFAULT_TAGS = ["others"]
WORDS_PER_MINUTE = 200


class CollectionKind(str, Enum):
    """Content type a post belongs to."""

    SNIPPET = "snippet"
    TUTORIAL = "tutorial"

    @property
    def directory(self) -> str:
        """Name of the collection directory on disk (``snippets``, ``tutorials``)."""
        return f"{self.value}s"


class PostReference(BaseModel):
    """Author-curated pointer to another post."""

    model_config = ConfigDict(frozen=True)

    collection: CollectionKind
    id: str


class PostData(BaseModel):
    """Front matter of a snippet or tutorial."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    title: str
    description: str = ""
    authors: list[str] = Field(default_factory=list)
    draft: Optional[bool] = None
    featured: Optional[bool] = None
    og_image: Optional[str] = None
    og_video: Optional[str] = None
    post_slug: Optional[str] = None
    published: datetime
    updated: Optional[datetime] = None
    tags: list[str] = Field(default_factory=lambda: list(DEFAULT_TAGS))
    related_snippets: Optional[list[PostReference]] = None
    related_tutorials: Optional[list[PostReference]] = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_references(cls, data: Any) -> Any:
        """Allow bare ids in relatedSnippets/relatedTutorials."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for kind in CollectionKind:
            for key in (f"related_{kind.directory}", to_camel(f"related_{kind.directory}")):
                refs = data.get(key)
                if not isinstance(refs, list):
                    # None means no references; anything else fails list validation
                    continue
                data[key] = [
                    {"collection": kind, "id": ref} if isinstance(ref, str) else ref
                    for ref in refs
                ]
        return data

    @field_validator("published", "updated", mode="before")
    @classmethod
    def _promote_dates(cls, value: Any) -> Any:
        # YAML loads `2023-05-01` as a date, not a datetime
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time())
        return value

    @field_validator("published", "updated")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> Any:
        if value is None:
            return list(DEFAULT_TAGS)
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return value
        tags = [str(t).strip().lower() for t in value if t is not None and str(t).strip()]
        return tags or list(DEFAULT_TAGS)

    @property
    def related(self) -> list[PostReference]:
        """Explicit references, snippets first then tutorials."""
        return [*(self.related_snippets or []), *(self.related_tutorials or [])]


class Post(BaseModel):
    """A single entry of the snippets or tutorials collection."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Language-prefixed id, e.g. 'en/my-post'")
    collection: CollectionKind
    data: PostData
    body: str = Field(default="", description="Raw markdown body")

    @property
    def language(self) -> str:
        return self.id.split("/", 1)[0]

    @property
    def slug(self) -> str:
        if self.data.post_slug:
            return self.data.post_slug
        return self.id.split("/", 1)[-1]

    @property
    def identity(self) -> tuple[CollectionKind, str]:
        return self.collection, self.id

    @property
    def reading_time_minutes(self) -> int:
        word_count = len(self.body.split())
        return max(1, math.ceil(word_count / WORDS_PER_MINUTE))


class RankedCandidate(BaseModel):
    """Tag-similarity score of one candidate during a single resolution."""

    id: str
    collection: CollectionKind
    rank: int = Field(ge=0)

    @property
    def identity(self) -> tuple[CollectionKind, str]:
        return self.collection, self.id
