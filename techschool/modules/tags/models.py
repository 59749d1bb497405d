from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from techschool.db.base import Base
from techschool.db.mixins import TimestampMixin


class TagMixin(TimestampMixin):
    """Named topic a course can be tagged with."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class Language(TagMixin, Base):
    __tablename__ = "languages"


class Framework(TagMixin, Base):
    __tablename__ = "frameworks"


class Tool(TagMixin, Base):
    __tablename__ = "tools"


class Fundamentals(TagMixin, Base):
    __tablename__ = "fundamentals"


TAG_MODELS: dict[str, type[TagMixin]] = {
    "languages": Language,
    "frameworks": Framework,
    "tools": Tool,
    "fundamentals": Fundamentals,
}
