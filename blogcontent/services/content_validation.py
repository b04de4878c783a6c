from typing import Any, List, Optional

import pydantic

from blogcontent.errors import ValidationError
from blogcontent.schemas.blog import FrontMatter

# Optional keys may be omitted but not set to null (`coverImage:`).
OPTIONAL_FIELDS = [
    name for name, field in FrontMatter.model_fields.items() if not field.is_required()
]


def validate_frontmatter(data: Any, filename: Optional[str] = None) -> FrontMatter:
    """
    Validate raw front matter against the post schema.

    Raises ValidationError listing every violated field, one
    "field: message" line each.
    """
    issues = _null_optional_issues(data)
    try:
        meta = FrontMatter.model_validate(data)
    except pydantic.ValidationError as e:
        issues.extend(_format_issues(e))

    if issues:
        raise ValidationError(issues, filename=filename)
    return meta


def is_valid_frontmatter(data: Any) -> bool:
    try:
        validate_frontmatter(data)
    except ValidationError:
        return False
    return True


def _null_optional_issues(data: Any) -> List[str]:
    if not isinstance(data, dict):
        return []
    return [
        f"{name}: Expected a value, received null"
        for name in OPTIONAL_FIELDS
        if name in data and data[name] is None
    ]


def _format_issues(error: pydantic.ValidationError) -> List[str]:
    issues = []
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"]) or "frontmatter"
        issues.append(f"{path}: {issue['msg']}")
    return issues
