from __future__ import annotations

from typing import List, Optional

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

_HTTP_URL = TypeAdapter(AnyHttpUrl)


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1)
    url: str
    avatar: str = ""
    description: Optional[str] = None
    hidden: bool = False

    @field_validator("url")
    @classmethod
    def url_is_absolute_http(cls, value: str) -> str:
        # Validate only; the URL is probed exactly as written.
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"{value!r} is not an absolute http(s) URL") from exc
        return value


class FriendsList(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    blogs: List[Endpoint] = Field(default_factory=list)
    non_blogs: List[Endpoint] = Field(default_factory=list, alias="nonBlogs")

    def endpoints(self) -> list[Endpoint]:
        """All endpoints in file order, blogs first, hidden ones included."""
        return [*self.blogs, *self.non_blogs]
