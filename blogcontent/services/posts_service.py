import logging
import threading
from collections import Counter
from pathlib import Path
from typing import List, Optional, Union

import frontmatter

from blogcontent.errors import NotFoundError
from blogcontent.repos.posts_repo import FileReader, LocalFileReader
from blogcontent.schemas.blog import Post, PostMeta, TagSummary
from blogcontent.services.content_validation import validate_frontmatter
from blogcontent.settings import settings
from blogcontent.utils import (
    DEFAULT_WORDS_PER_MINUTE,
    calculate_reading_time,
    ts_from_str,
)

logger = logging.getLogger(__name__)


class PostsService:
    """
    Loads every post from the content directory once and serves lookups
    from the cached collection for the lifetime of the instance.
    """

    def __init__(
        self,
        reader: Optional[FileReader] = None,
        directory: Union[str, Path, None] = None,
        extension: Optional[str] = None,
        words_per_minute: Optional[int] = None,
    ):
        self.reader = reader or LocalFileReader()
        self.directory = Path(directory) if directory else settings.posts_path
        self.extension = extension or settings.POSTS_EXTENSION
        self.words_per_minute = words_per_minute or settings.WORDS_PER_MINUTE
        self._posts: Optional[List[Post]] = None
        self._lock = threading.Lock()

    def load_all(
        self,
        directory: Union[str, Path, None] = None,
        reader: Optional[FileReader] = None,
    ) -> List[Post]:
        """
        Return the cached collection, building it on first use.

        Passing a directory or reader bypasses the cache: the cached
        collection is dropped and a fresh, uncached one is built from the
        given source.
        """
        if directory is not None or reader is not None:
            self.invalidate()
            return self._load(
                Path(directory) if directory is not None else self.directory,
                reader or self.reader,
            )

        if self._posts is not None:
            return self._posts

        with self._lock:
            if self._posts is None:
                self._posts = self._load(self.directory, self.reader)
                logger.info(f"Loaded {len(self._posts)} posts from {self.directory}")
        return self._posts

    def invalidate(self) -> None:
        with self._lock:
            self._posts = None

    def get_all(self) -> List[Post]:
        return self.load_all()

    def get_all_meta(self) -> List[PostMeta]:
        return [PostMeta(slug=p.slug, meta=p.meta) for p in self.load_all()]

    def get_all_meta_sorted(self) -> List[PostMeta]:
        """Metadata for every post, newest first."""
        return sorted(
            self.get_all_meta(), key=lambda p: ts_from_str(p.meta.date), reverse=True
        )

    def get_by_slug(self, slug: str) -> Post:
        post = next((p for p in self.load_all() if p.slug == slug), None)
        if post is None:
            raise NotFoundError(slug)
        return post

    def get_all_tags(self) -> List[TagSummary]:
        counts = Counter(tag for p in self.load_all() for tag in set(p.meta.tags))
        return [TagSummary(tag=tag, count=counts[tag]) for tag in sorted(counts)]

    def get_by_tag(self, tag: str) -> List[PostMeta]:
        return [p for p in self.get_all_meta_sorted() if tag in p.meta.tags]

    def _load(self, directory: Path, reader: FileReader) -> List[Post]:
        # A failed listing propagates; per-file failures only drop that file.
        entries = reader.list_entries(directory)
        slugs = [
            name.removesuffix(self.extension)
            for name in entries
            if name.endswith(self.extension)
        ]

        posts = []
        for slug in slugs:
            filename = f"{slug}{self.extension}"
            try:
                raw = reader.read_text(directory / filename)
                posts.append(
                    parse_post(
                        slug,
                        raw,
                        filename=filename,
                        words_per_minute=self.words_per_minute,
                    )
                )
            except Exception as e:
                logger.error(f"Failed to process post {slug}: {e}")
        return posts


def parse_post(
    slug: str,
    raw: str,
    filename: Optional[str] = None,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> Post:
    """Split, validate and enrich a single content file."""
    parsed = frontmatter.loads(raw)
    meta = validate_frontmatter(parsed.metadata, filename=filename)

    # An explicit readingTime always wins over the estimate.
    if not meta.readingTime:
        meta = meta.model_copy(
            update={
                "readingTime": calculate_reading_time(parsed.content, words_per_minute)
            }
        )

    return Post(slug=slug, meta=meta, content=parsed.content)


_default_service: Optional[PostsService] = None
_default_lock = threading.Lock()


def get_default_service() -> PostsService:
    """Process-wide service reading from the configured posts directory."""
    global _default_service
    if _default_service is None:
        with _default_lock:
            if _default_service is None:
                _default_service = PostsService()
    return _default_service
