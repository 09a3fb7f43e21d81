"""Collection queries and tag helpers."""

from .collection import query_collection
from .tags import get_posts_by_tag, get_unique_tags, slugify, slugify_all

__all__ = [
    "get_posts_by_tag",
    "get_unique_tags",
    "query_collection",
    "slugify",
    "slugify_all",
]
