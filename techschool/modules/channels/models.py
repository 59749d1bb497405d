from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from techschool.db.base import Base
from techschool.db.mixins import TimestampMixin

if TYPE_CHECKING:
    from techschool.modules.courses.models import Course


class Channel(TimestampMixin, Base):
    __tablename__ = "channels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    youtube_channel_id: Mapped[str] = mapped_column(
        String(64), unique=True, index=True, nullable=False
    )
    avatar_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    courses: Mapped[list["Course"]] = relationship(
        "Course",
        back_populates="channel",
        cascade="all, delete-orphan",
    )

    # derived, set by add_channel_url; never persisted
    url = None

    def __repr__(self) -> str:
        return f"<Channel {self.youtube_channel_id}: {self.name}>"
