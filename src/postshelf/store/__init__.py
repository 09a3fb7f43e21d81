"""Content stores holding the raw snippets and tutorials collections."""

from .base import ContentLoadError, ContentStore
from .markdown import MarkdownContentStore
from .memory import InMemoryContentStore

__all__ = [
    "ContentLoadError",
    "ContentStore",
    "InMemoryContentStore",
    "MarkdownContentStore",
]
