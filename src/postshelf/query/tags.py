"""Tag slug helpers."""

import re
import unicodedata
from collections.abc import Iterable

from postshelf.models import Post

_STRIP_RE = re.compile(r"[^\w\s-]", re.UNICODE)
_MULTI_DASH_RE = re.compile(r"[-\s_]+")


def slugify(text: str) -> str:
    """Convert a tag or title to a URL-friendly slug.

    Examples:
        "State Management" -> "state-management"
        "Flutter & Dart" -> "flutter-dart"
    """
    text = unicodedata.normalize("NFC", text.strip().lower())
    text = _STRIP_RE.sub("", text)
    text = _MULTI_DASH_RE.sub("-", text)
    return text.strip("-")


def slugify_all(tags: Iterable[str]) -> list[str]:
    return [slugify(t) for t in tags]


def get_posts_by_tag(posts: Iterable[Post], tag: str) -> list[Post]:
    """Posts carrying `tag` (compared by slug), in input order."""
    tag = slugify(tag)
    return [p for p in posts if tag in slugify_all(p.data.tags)]


def get_unique_tags(posts: Iterable[Post]) -> list[str]:
    """Sorted, de-duplicated tag slugs across `posts`."""
    return sorted({slug for p in posts for slug in slugify_all(p.data.tags) if slug})
