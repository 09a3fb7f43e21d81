"""postshelf - multilingual snippet/tutorial collections with related-post resolution."""

from postshelf.models import CollectionKind, Post, PostData, PostReference
from postshelf.recommender import RelatedContentResolver, rank_tags, resolve_related

__all__ = [
    "CollectionKind",
    "Post",
    "PostData",
    "PostReference",
    "RelatedContentResolver",
    "rank_tags",
    "resolve_related",
]
