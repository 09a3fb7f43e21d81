"""CLI interface for postshelf."""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from postshelf.config import SiteConfig
from postshelf.models import CollectionKind, Post
from postshelf.query import get_posts_by_tag, get_unique_tags, query_collection
from postshelf.recommender import RelatedContentResolver
from postshelf.store import ContentLoadError, MarkdownContentStore

console = Console()

COLLECTION_CHOICE = click.Choice([k.value for k in CollectionKind])
TRISTATE_CHOICE = click.Choice(["true", "false"])


def _tristate(value: str | None) -> bool | None:
    return None if value is None else value == "true"


def _load_config(
    config_path: str | None,
    content_dir: str | None,
    language: str | None,
) -> tuple[SiteConfig, str]:
    try:
        config = SiteConfig.load(Path(config_path) if config_path else None)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config") from e
    if content_dir:
        config.content_dir = Path(content_dir)
    language = language or config.default_language
    if language not in config.languages:
        raise click.BadParameter(
            f"'{language}' is not one of {config.languages}", param_hint="--language"
        )
    return config, language


def _post_summary(post: Post) -> dict:
    return {
        "id": post.id,
        "collection": post.collection.value,
        "slug": post.slug,
        "title": post.data.title,
        "published": post.data.published.isoformat(),
        "tags": post.data.tags,
        "readingTime": post.reading_time_minutes,
    }


def _print_posts(posts: list[Post], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps([_post_summary(p) for p in posts], indent=2))
        return
    if not posts:
        console.print("[dim]No posts.[/dim]")
        return
    for post in posts:
        console.print(
            f"  [green]•[/green] [bold]{escape(post.data.title)}[/bold] "
            f"[dim]({post.collection.value} {post.id}, "
            f"{post.data.published:%Y-%m-%d}, {post.reading_time_minutes} min)[/dim]"
        )


def _run(coro):
    """Run a command coroutine, turning content errors into a clean exit."""
    try:
        return asyncio.run(coro)
    except ContentLoadError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1) from e


common_options = [
    click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Path to postshelf.yaml (default: ./postshelf.yaml if present)",
    ),
    click.option(
        "--content-dir",
        "-c",
        type=click.Path(file_okay=False),
        default=None,
        help="Directory holding the snippets/ and tutorials/ collections",
    ),
    click.option(
        "--language",
        "-l",
        default=None,
        help="Language code (default: the configured default language)",
    ),
    click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text"),
    click.option("--verbose", "-v", is_flag=True, help="Enable verbose output"),
]


def with_common_options(func):
    for option in reversed(common_options):
        func = option(func)
    return func


@click.group()
def main() -> None:
    """
    postshelf - Snippet and tutorial collections for a multilingual blog.

    Example:

        postshelf related en/riverpod-basics -k tutorial -c ./content
    """


@main.command()
@click.argument("post_id")
@click.option(
    "--collection",
    "-k",
    type=COLLECTION_CHOICE,
    default=CollectionKind.SNIPPET.value,
    help="Collection the post belongs to",
)
@click.option(
    "--max-related",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of related posts (default: from config, 3)",
)
@with_common_options
def related(
    post_id: str,
    collection: str,
    max_related: int | None,
    config_path: str | None,
    content_dir: str | None,
    language: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Show the posts related to POST_ID (e.g. en/my-post)."""
    config, language = _load_config(config_path, content_dir, language)
    if max_related is not None:
        config.max_related = max_related

    posts = _run(
        _related_async(
            config=config,
            post_id=post_id,
            collection=CollectionKind(collection),
            language=language,
            verbose=verbose,
        )
    )
    if posts is None:
        raise click.BadParameter(
            f"no {collection} with id '{post_id}' in {config.content_dir}",
            param_hint="POST_ID",
        )
    _print_posts(posts, as_json)


async def _related_async(
    config: SiteConfig,
    post_id: str,
    collection: CollectionKind,
    language: str,
    verbose: bool,
) -> list[Post] | None:
    """Async body of `related`; returns None when the post does not exist."""
    store = MarkdownContentStore(config.content_dir, verbose=verbose)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
        disable=not verbose,
    ) as progress:
        task = progress.add_task(f"Loading {collection.directory}...", total=None)
        source = next(
            (p for p in await store.get_all_posts(collection) if p.id == post_id),
            None,
        )
        progress.remove_task(task)
        if source is None:
            return None

        task = progress.add_task("Resolving related posts...", total=None)
        resolver = RelatedContentResolver(
            store, max_results=config.max_related, verbose=verbose
        )
        posts = await resolver.resolve(source, language)
        progress.remove_task(task)

    if verbose:
        console.print(f"  [green]✓[/green] {len(posts)} related posts for {post_id}")
    return posts


@main.command(name="list")
@click.argument("collection", type=COLLECTION_CHOICE)
@click.option("--draft", type=TRISTATE_CHOICE, default=None, help="Filter on the draft flag")
@click.option(
    "--featured", type=TRISTATE_CHOICE, default=None, help="Filter on the featured flag"
)
@click.option("--tag", "-t", default=None, help="Only posts carrying this tag")
@with_common_options
def list_posts(
    collection: str,
    draft: str | None,
    featured: str | None,
    tag: str | None,
    config_path: str | None,
    content_dir: str | None,
    language: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """List a COLLECTION (snippet or tutorial), newest first."""
    config, language = _load_config(config_path, content_dir, language)
    store = MarkdownContentStore(config.content_dir, verbose=verbose)

    posts = _run(
        query_collection(
            store,
            CollectionKind(collection),
            language=language,
            draft=_tristate(draft),
            featured=_tristate(featured),
        )
    )
    if tag:
        posts = get_posts_by_tag(posts, tag)
    _print_posts(posts, as_json)


@main.command()
@with_common_options
def tags(
    config_path: str | None,
    content_dir: str | None,
    language: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """List every tag used by snippets and tutorials."""
    config, language = _load_config(config_path, content_dir, language)
    posts = _run(_all_posts_async(config, language, verbose))
    unique = get_unique_tags(posts)

    if as_json:
        click.echo(json.dumps(unique))
        return
    for tag in unique:
        count = len(get_posts_by_tag(posts, tag))
        console.print(f"  [green]•[/green] {tag} [dim]({count})[/dim]")


async def _all_posts_async(config: SiteConfig, language: str, verbose: bool) -> list[Post]:
    store = MarkdownContentStore(config.content_dir, verbose=verbose)
    collections = await asyncio.gather(
        *[query_collection(store, kind, language=language) for kind in CollectionKind]
    )
    return [p for posts in collections for p in posts]


if __name__ == "__main__":
    main()
