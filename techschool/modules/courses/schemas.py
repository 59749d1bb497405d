from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from techschool.core.config import settings
from techschool.modules.channels.schemas import ChannelRead
from techschool.modules.courses.models import CourseType
from techschool.modules.tags.schemas import TagRead


class CourseBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    youtube_course_id: str = Field(min_length=1, max_length=64)
    locale: str
    published_at: datetime


class CourseCreate(CourseBase):
    # type is derived from youtube_course_id, never accepted from input
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @field_validator("locale")
    @classmethod
    def locale_is_available(cls, value: str) -> str:
        if value not in settings.LOCALES_AVAILABLE:
            raise ValueError(f"must be one of {', '.join(settings.LOCALES_AVAILABLE)}")
        return value


class CourseCreateRequest(BaseModel):
    """Request body for POST /courses; attribute validation happens in the service."""

    youtube_channel_id: str
    name: Optional[str] = None
    youtube_course_id: Optional[str] = None
    locale: Optional[str] = None
    published_at: Optional[datetime] = None

    language_names: List[str] = []
    framework_names: List[str] = []
    tool_names: List[str] = []
    fundamentals_names: List[str] = []

    def course_attrs(self) -> dict:
        return self.model_dump(
            include={"name", "youtube_course_id", "locale", "published_at"},
            exclude_none=True,
        )

    def tag_names(self) -> dict:
        return self.model_dump(
            include={"language_names", "framework_names", "tool_names", "fundamentals_names"},
        )


class CourseRead(CourseBase):
    id: int
    type: CourseType
    view_count: int
    inserted_at: datetime
    url: Optional[str] = None

    channel: ChannelRead
    languages: List[TagRead] = []
    frameworks: List[TagRead] = []
    tools: List[TagRead] = []
    fundamentals: List[TagRead] = []

    model_config = ConfigDict(from_attributes=True)


class CoursePage(BaseModel):
    courses: List[CourseRead]
    total: int
    page: int
    page_size: int
    total_pages: int


class LastUpdatedRead(BaseModel):
    last_updated: Optional[str] = None
