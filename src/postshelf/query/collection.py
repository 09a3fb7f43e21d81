"""Language-scoped access to a single collection."""

from postshelf.models import CollectionKind, Post
from postshelf.store import ContentStore

DEFAULT_LANGUAGE = "en"


async def query_collection(
    store: ContentStore,
    collection: CollectionKind,
    language: str = DEFAULT_LANGUAGE,
    draft: bool | None = None,
    featured: bool | None = None,
) -> list[Post]:
    """Get every post of one collection written in `language`, newest first.

    Args:
        store: Content store to read from.
        collection: Which collection to query.
        language: Language code; keeps posts whose id starts with ``"<language>/"``.
        draft: When given, keep only posts whose ``draft`` flag is exactly this
            value. Posts without a ``draft`` flag never match.
        featured: Same as ``draft`` for the ``featured`` flag.

    Returns:
        Matching posts sorted by publish date descending. Posts published at
        the same time keep the store's order.
    """
    posts = await store.get_all_posts(collection)

    prefix = f"{language}/"
    posts = [p for p in posts if p.id.startswith(prefix)]

    if draft is not None:
        posts = [p for p in posts if p.data.draft is draft]

    if featured is not None:
        posts = [p for p in posts if p.data.featured is featured]

    # list.sort is stable, so ties keep store order
    posts.sort(key=lambda p: p.data.published, reverse=True)
    return posts
