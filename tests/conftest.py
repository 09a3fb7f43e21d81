"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from postshelf.models import CollectionKind, Post, PostData

BASE_DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_post():
    """Factory for posts; `days` shifts the publish date forward from 2024-01-01."""

    def _make(
        post_id: str,
        collection: CollectionKind = CollectionKind.SNIPPET,
        tags: list[str] | None = None,
        days: int = 0,
        body: str = "",
        **data,
    ) -> Post:
        fields = {"title": post_id, "published": BASE_DATE + timedelta(days=days), **data}
        if tags is not None:
            fields["tags"] = tags
        return Post(
            id=post_id,
            collection=collection,
            data=PostData(**fields),
            body=body,
        )

    return _make
