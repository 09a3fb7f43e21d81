"""Related content recommendation module."""

from .ranking import rank_tags
from .resolver import DEFAULT_MAX_RESULTS, RelatedContentResolver, resolve_related

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "RelatedContentResolver",
    "rank_tags",
    "resolve_related",
]
