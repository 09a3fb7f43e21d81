"""Base content store interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from postshelf.models import CollectionKind, Post


class ContentLoadError(ValueError):
    """A content file could not be parsed into a post."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ContentStore(ABC):
    """Read-only source of every post of a collection, all languages mixed.

    Stores must return the same posts in the same order for the lifetime
    of the instance.
    """

    @abstractmethod
    async def get_all_posts(self, collection: CollectionKind) -> list[Post]:
        """Return every post of the collection in store order."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this store."""
        pass
