"""Data models for postshelf."""

from .post import (
    CollectionKind,
    Post,
    PostData,
    PostReference,
    RankedCandidate,
)

__all__ = [
    "CollectionKind",
    "Post",
    "PostData",
    "PostReference",
    "RankedCandidate",
]
