import datetime
import re
from typing import List, Literal, Optional, Union

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    field_validator,
)
from pydantic_core import PydanticCustomError

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_url_adapter = TypeAdapter(AnyUrl)


class FrontMatter(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    date: str
    author: str
    excerpt: str
    tags: List[str]

    twitterProfile: Optional[str] = None
    coverImage: Optional[str] = None
    coverImageCreditText: Optional[str] = None
    coverImageCreditUrl: Optional[str] = None

    hasInteractiveComponents: Optional[StrictBool] = None
    customComponents: Optional[List[str]] = None
    difficulty: Optional[Literal["beginner", "intermediate", "advanced"]] = None
    readingTime: Optional[Union[StrictInt, StrictFloat]] = None  # minutes

    @field_validator("title", "author", "excerpt")
    @classmethod
    def _not_empty(cls, value: str, info):
        if not value:
            raise PydanticCustomError(
                "required", "{field} is required", {"field": info.field_name.title()}
            )
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_string(cls, value):
        # YAML loads unquoted 2024-01-15 as a date object
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    @field_validator("date")
    @classmethod
    def _valid_date(cls, value: str) -> str:
        if DATE_RE.match(value):
            try:
                datetime.date.fromisoformat(value)
                return value
            except ValueError:
                pass
        raise PydanticCustomError(
            "date_format", "Date must be in YYYY-MM-DD format and be a valid date"
        )

    @field_validator("tags")
    @classmethod
    def _at_least_one_tag(cls, value: List[str]) -> List[str]:
        if not value:
            raise PydanticCustomError("too_short", "At least one tag is required")
        return value

    @field_validator("twitterProfile", "coverImageCreditUrl")
    @classmethod
    def _valid_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            _url_adapter.validate_python(value)
        except ValueError:
            raise PydanticCustomError("url", "Must be a valid URL")
        return value

    @field_validator("readingTime")
    @classmethod
    def _positive_reading_time(cls, value):
        if value is not None and value <= 0:
            raise PydanticCustomError("too_small", "Number must be greater than 0")
        return value


class PostMeta(BaseModel):
    slug: str
    meta: FrontMatter


class Post(PostMeta):
    content: str  # Markdown body without frontmatter


class RenderedPost(Post):
    html: str


class TagSummary(BaseModel):
    tag: str
    count: int = Field(ge=1)
