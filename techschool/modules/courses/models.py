from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from techschool.db.base import Base
from techschool.db.mixins import TimestampMixin

if TYPE_CHECKING:
    from techschool.modules.channels.models import Channel
    from techschool.modules.tags.models import Language, Framework, Tool, Fundamentals


def _association_table(name: str, tag_table: str, tag_column: str) -> Table:
    return Table(
        name,
        Base.metadata,
        Column("course_id", Integer, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
        Column(tag_column, Integer, ForeignKey(f"{tag_table}.id", ondelete="CASCADE"), primary_key=True),
    )


courses_languages = _association_table("courses_languages", "languages", "language_id")
courses_frameworks = _association_table("courses_frameworks", "frameworks", "framework_id")
courses_tools = _association_table("courses_tools", "tools", "tool_id")
courses_fundamentals = _association_table("courses_fundamentals", "fundamentals", "fundamentals_id")


class CourseType(str, enum.Enum):
    video = "video"
    playlist = "playlist"


class Course(TimestampMixin, Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    youtube_course_id: Mapped[str] = mapped_column(
        String(64), unique=True, index=True, nullable=False
    )

    # CourseType value derived from youtube_course_id on insert, never updated;
    # checked against CourseType when read by generate_url
    type: Mapped[str] = mapped_column(String(16), nullable=False)

    locale: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    published_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    view_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )

    channel_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("channels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    channel: Mapped["Channel"] = relationship(
        "Channel",
        back_populates="courses",
    )

    languages: Mapped[list["Language"]] = relationship("Language", secondary=courses_languages)
    frameworks: Mapped[list["Framework"]] = relationship("Framework", secondary=courses_frameworks)
    tools: Mapped[list["Tool"]] = relationship("Tool", secondary=courses_tools)
    fundamentals: Mapped[list["Fundamentals"]] = relationship(
        "Fundamentals", secondary=courses_fundamentals
    )

    # derived, set by add_course_and_channel_urls; never persisted
    url = None

    def __repr__(self) -> str:
        return f"<Course {self.id}: {self.name}>"
