"""In-memory content store."""

from collections.abc import Iterable

from postshelf.models import CollectionKind, Post

from .base import ContentStore


class InMemoryContentStore(ContentStore):
    """Store backed by a fixed list of posts, kept in insertion order."""

    def __init__(self, posts: Iterable[Post] = ()):
        self._posts = tuple(posts)

    @property
    def name(self) -> str:
        return "memory"

    async def get_all_posts(self, collection: CollectionKind) -> list[Post]:
        return [p for p in self._posts if p.collection == collection]
