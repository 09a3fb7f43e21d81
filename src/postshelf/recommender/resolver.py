"""Related posts across the snippets and tutorials collections."""

import asyncio

from rich.console import Console

from postshelf.models import CollectionKind, Post, RankedCandidate
from postshelf.query import query_collection
from postshelf.store import ContentStore

from .ranking import rank_tags

console = Console()

DEFAULT_MAX_RESULTS = 3

# Pool order: every snippet, then every tutorial
POOL_ORDER = (CollectionKind.SNIPPET, CollectionKind.TUTORIAL)


class RelatedContentResolver:
    """Pick the posts to show as "related" for a given post.

    Author-curated references come first, in the order they were declared
    (snippet references before tutorial references). The remaining slots are
    filled with the other posts of the same language ranked by tag overlap;
    equal ranks keep pool order (snippets then tutorials, each newest first).
    Drafts and non-featured posts are eligible.
    """

    def __init__(
        self,
        store: ContentStore,
        max_results: int = DEFAULT_MAX_RESULTS,
        verbose: bool = False,
    ):
        if max_results < 0:
            raise ValueError(f"max_results must be >= 0, got {max_results}")
        self.store = store
        self.max_results = max_results
        self.verbose = verbose

    async def resolve(self, post: Post, language: str) -> list[Post]:
        """Return up to `max_results` posts related to `post`."""
        pool = await self._load_pool(post, language)

        explicit = self._resolve_references(post, pool)
        explicit_ids = {p.identity for p in explicit}
        remainder = [p for p in pool if p.identity not in explicit_ids]

        ranked = self._rank(post, remainder)
        by_identity = {p.identity: p for p in remainder}
        ranked_posts = [by_identity[c.identity] for c in ranked]

        related = [*explicit, *ranked_posts][: self.max_results]

        if self.verbose:
            console.print(
                f"[dim]{post.id}: {len(explicit)} explicit, "
                f"{len(remainder)} ranked candidates -> {[p.id for p in related]}[/dim]"
            )
        return related

    async def _load_pool(self, post: Post, language: str) -> list[Post]:
        """Both collections for `language`, minus the source post."""
        collections = await asyncio.gather(
            *[query_collection(self.store, kind, language=language) for kind in POOL_ORDER]
        )
        return [p for posts in collections for p in posts if p.identity != post.identity]

    def _resolve_references(self, post: Post, pool: list[Post]) -> list[Post]:
        """Pool entries matching the post's explicit references, in declared order.

        Dangling references and repeats of an already-resolved entry are skipped.
        """
        by_identity = {p.identity: p for p in pool}
        resolved: list[Post] = []
        seen: set[tuple[CollectionKind, str]] = set()

        for ref in post.data.related:
            key = (ref.collection, ref.id)
            target = by_identity.get(key)
            if target is None:
                if self.verbose:
                    console.print(
                        f"[yellow]{post.id}: skipping unknown {ref.collection.value} "
                        f"reference '{ref.id}'[/yellow]"
                    )
                continue
            if key in seen:
                continue
            seen.add(key)
            resolved.append(target)
        return resolved

    def _rank(self, post: Post, candidates: list[Post]) -> list[RankedCandidate]:
        ranked = [
            RankedCandidate(
                id=c.id,
                collection=c.collection,
                rank=rank_tags(post.data.tags, c.data.tags),
            )
            for c in candidates
        ]
        # Stable: equal ranks keep pool order
        ranked.sort(key=lambda c: c.rank, reverse=True)
        return ranked


async def resolve_related(
    store: ContentStore,
    post: Post,
    language: str,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[Post]:
    """Related posts for `post` in `language` (at most `max_results`)."""
    return await RelatedContentResolver(store, max_results=max_results).resolve(post, language)
