from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from techschool.modules.tags.models import TagMixin

TagT = TypeVar("TagT", bound=TagMixin)


class TagRepository(Generic[TagT]):
    """Repository for one tag table (languages, frameworks, tools, fundamentals)."""

    def __init__(self, db: Session, model: type[TagT]):
        self.db = db
        self.model = model

    def get_by_names(self, names: Iterable[str]) -> list[TagT]:
        """Resolve names to tags. Names with no matching row are skipped."""
        names = [name for name in names if name]
        if not names:
            return []
        return list(self.db.scalars(select(self.model).where(self.model.name.in_(names))))

    def list_all(self) -> list[TagT]:
        """List all tags ordered by name."""
        return list(self.db.scalars(select(self.model).order_by(self.model.name.asc())))
