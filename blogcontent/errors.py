from typing import List, Optional


class ValidationError(ValueError):
    """Front matter failed validation. One issue per violated field."""

    def __init__(self, issues: List[str], filename: Optional[str] = None):
        self.issues = list(issues)
        self.filename = filename
        location = f" in {filename}" if filename else ""
        super().__init__(f"Invalid frontmatter{location}:\n" + "\n".join(self.issues))


class NotFoundError(LookupError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Post not found: {slug}")
