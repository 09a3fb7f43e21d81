"""Markdown content store reading posts with YAML front matter."""

import asyncio
from pathlib import Path

import yaml
from pydantic import ValidationError
from rich.console import Console

from postshelf.models import CollectionKind, Post, PostData

from .base import ContentLoadError, ContentStore

console = Console()

FRONT_MATTER_DELIMITER = "---"
MARKDOWN_SUFFIXES = (".md", ".mdx")


def parse_front_matter(text: str) -> tuple[dict | None, str]:
    """Split a markdown document into (front matter, body).

    Returns ``(None, text)`` when the document has no ``---`` block.
    """
    stripped = text.lstrip()
    lines = stripped.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return None, text

    for i in range(1, len(lines)):
        if lines[i].strip() == FRONT_MATTER_DELIMITER:
            front_matter = yaml.safe_load("".join(lines[1:i])) or {}
            body = "".join(lines[i + 1 :])
            return front_matter, body
    return None, text


class MarkdownContentStore(ContentStore):
    """Content store over a directory tree of markdown files.

    Layout::

        <content_dir>/snippets/en/my-snippet.md
        <content_dir>/tutorials/es/mi-tutorial.md

    A post's id is its path relative to the collection directory, without
    the file extension (``en/my-snippet``). Each collection is read once and
    cached for the lifetime of the store.
    """

    def __init__(self, content_dir: Path | str, verbose: bool = False):
        self.content_dir = Path(content_dir)
        self.verbose = verbose
        self._cache: dict[CollectionKind, list[Post]] = {}
        self._locks: dict[CollectionKind, asyncio.Lock] = {}
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def name(self) -> str:
        return f"markdown:{self.content_dir}"

    async def get_all_posts(self, collection: CollectionKind) -> list[Post]:
        # asyncio locks belong to one event loop; start fresh when reused from another
        loop = asyncio.get_running_loop()
        if self._loop is not loop:
            self._loop = loop
            self._locks = {kind: asyncio.Lock() for kind in CollectionKind}

        async with self._locks[collection]:
            if collection not in self._cache:
                self._cache[collection] = await asyncio.to_thread(
                    self._load_collection, collection
                )
        return list(self._cache[collection])

    def _load_collection(self, collection: CollectionKind) -> list[Post]:
        root = self.content_dir / collection.directory
        if not root.is_dir():
            if self.verbose:
                console.print(f"[yellow]No {collection.directory} directory at {root}[/yellow]")
            return []

        paths = sorted(
            p for p in root.rglob("*") if p.is_file() and p.suffix in MARKDOWN_SUFFIXES
        )
        posts = [self._load_post(collection, root, path) for path in paths]

        if self.verbose:
            console.print(f"[dim]Loaded {len(posts)} {collection.directory} from {root}[/dim]")
        return posts

    def _load_post(self, collection: CollectionKind, root: Path, path: Path) -> Post:
        """Parse a single markdown file into a post."""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentLoadError(path, f"unreadable file: {e}") from e

        try:
            front_matter, body = parse_front_matter(text)
        except yaml.YAMLError as e:
            raise ContentLoadError(path, f"invalid YAML front matter: {e}") from e

        if front_matter is None:
            raise ContentLoadError(path, "missing front matter block")
        if not isinstance(front_matter, dict):
            raise ContentLoadError(path, "front matter must be a mapping")

        try:
            data = PostData.model_validate(front_matter)
        except ValidationError as e:
            raise ContentLoadError(path, f"invalid front matter: {e}") from e

        post_id = path.relative_to(root).with_suffix("").as_posix()
        return Post(id=post_id, collection=collection, data=data, body=body)
