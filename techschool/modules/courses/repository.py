from __future__ import annotations

from typing import Optional

from sqlalchemy import Select, select, update
from sqlalchemy.orm import Session, joinedload

from techschool.modules.courses.models import Course


class CourseRepository:
    """Repository for Course entity."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, course_id: int, refresh: bool = False) -> Optional[Course]:
        """Get course by ID with its channel loaded."""
        return self.db.get(
            Course,
            course_id,
            options=[joinedload(Course.channel)],
            populate_existing=refresh,
        )

    def get_by_youtube_course_id(self, youtube_course_id: str) -> Optional[Course]:
        """Get course by its YouTube video or playlist ID."""
        return self.db.scalars(
            select(Course)
            .options(joinedload(Course.channel))
            .where(Course.youtube_course_id == youtube_course_id)
        ).first()

    def all(self, stmt: Select) -> list[Course]:
        """Run a composed course query."""
        return list(self.db.scalars(stmt).unique())

    def scalar(self, stmt: Select) -> int:
        return self.db.scalar(stmt) or 0

    def last_inserted(self, limit: int = 1) -> list[Course]:
        """Most recently inserted courses, newest first."""
        stmt = (
            select(Course)
            .order_by(Course.inserted_at.desc(), Course.id.desc())
            .limit(limit)
        )
        return list(self.db.scalars(stmt))

    def create(self, **kwargs) -> Course:
        """Create a new course."""
        course = Course(**kwargs)
        self.db.add(course)
        self.db.flush()
        return course

    def delete(self, course: Course) -> None:
        """Delete course."""
        self.db.delete(course)
        self.db.flush()

    def increment_view_count(self, course_id: int) -> int:
        """Atomically bump view_count; returns the number of rows updated."""
        result = self.db.execute(
            update(Course)
            .where(Course.id == course_id)
            .values(view_count=Course.view_count + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
