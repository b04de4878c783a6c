import textwrap
from pathlib import Path

from blogcontent.errors import NotFoundError
from blogcontent.repos.posts_repo import FileReader


class FakeFileReader(FileReader):
    """
    In-memory stand-in for the content directory, keyed by file name.
    Pass fail_listing / fail_reads to simulate I/O errors.
    """

    def __init__(self, files: dict, fail_listing: bool = False, fail_reads=()):
        self.files = files
        self.fail_listing = fail_listing
        self.fail_reads = set(fail_reads)
        self.calls = []

    def list_entries(self, path):
        self.calls.append(f"list({path})")
        if self.fail_listing:
            raise FileNotFoundError(str(path))
        return list(self.files)

    def read_text(self, path):
        name = Path(path).name
        self.calls.append(f"read({name})")
        if name in self.fail_reads:
            raise PermissionError(f"cannot read {name}")
        if name not in self.files:
            raise FileNotFoundError(name)
        return textwrap.dedent(self.files[name]).lstrip()


def make_post_file(
    title="A Post Title",
    date="2024-01-15",
    tags="[python, testing]",
    body="Some body text for the post.",
    extra="",
):
    return f"""
    ---
    title: {title}
    date: "{date}"
    author: Filip Wojciechowski
    excerpt: A short summary of the post.
    tags: {tags}
    {extra}
    ---
    {body}
    """


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, posts=None, tags=None, error=None):
        self.posts = posts or []
        self.tags = tags or []
        self.error = error
        self.load_calls = 0

    def _raise(self):
        if self.error:
            raise self.error

    def load_all(self):
        self.load_calls += 1
        return self.posts

    def get_all_meta_sorted(self):
        self._raise()
        return self.posts

    def get_by_slug(self, slug: str):
        self._raise()
        for post in self.posts:
            if post.slug == slug:
                return post
        raise NotFoundError(slug)

    def get_all_tags(self):
        self._raise()
        return self.tags

    def get_by_tag(self, tag: str):
        self._raise()
        return [p for p in self.posts if tag in p.meta.tags]
