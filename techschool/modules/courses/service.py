from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from techschool.core.errors import CourseValidationError, InvalidOptionsError, NotFoundError
from techschool.core.i18n import gettext
from techschool.core.logging import get_logger
from techschool.core.result import NOT_FOUND, Err, Missing, Ok, Result
from techschool.helpers.time import format_time_ago
from techschool.modules.channels.service import ChannelService, add_channel_url
from techschool.modules.courses.enrichment import EnrichChannel, add_course_and_channel_urls
from techschool.modules.courses.models import Course, CourseType
from techschool.modules.courses.query import (
    SearchOptions,
    SearchParams,
    build_count_query,
    build_list_query,
    build_search_query,
)
from techschool.modules.courses.repository import CourseRepository
from techschool.modules.courses.schemas import CourseCreate
from techschool.modules.tags.models import Language, Framework, Tool, Fundamentals
from techschool.modules.tags.repository import TagRepository

logger = get_logger(__name__)

# create_course keyword -> (Course relationship, tag model)
TAG_NAME_OPTIONS = {
    "language_names": ("languages", Language),
    "framework_names": ("frameworks", Framework),
    "tool_names": ("tools", Tool),
    "fundamentals_names": ("fundamentals", Fundamentals),
}

ValidationErrors = dict[str, list[str]]


def course_type(youtube_course_id: str) -> CourseType:
    """Playlist IDs start with "PL"; everything else is a single video."""
    if youtube_course_id.startswith("PL"):
        return CourseType.playlist
    return CourseType.video


def validation_errors(exc: ValidationError) -> ValidationErrors:
    errors: ValidationErrors = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        errors.setdefault(field, []).append(error["msg"])
    return errors


class CourseService:
    """Service layer for course catalog operations."""

    def __init__(self, db: Session, enrich_channel: EnrichChannel = add_channel_url):
        self.db = db
        self.course_repo = CourseRepository(db)
        self.channel_service = ChannelService(db)
        self.enrich_channel = enrich_channel

    def _enrich(self, course: Course) -> Course:
        return add_course_and_channel_urls(course, self.enrich_channel)

    # ---------- listing / search ----------

    def list_courses(self) -> list[Course]:
        """Every course with its channel, enriched."""
        courses = self.course_repo.all(build_list_query())
        return [self._enrich(course) for course in courses]

    def search_courses(
        self,
        params: Optional[Mapping[str, Any]],
        locales_available: Iterable[str],
        opts: Optional[Mapping[str, Any]] = None,
    ) -> list[Course]:
        """Filter, order and paginate the catalog.

        ``params`` may hold ``search``, ``language``, ``framework``, ``tool``,
        ``fundamentals`` and ``locale``; empty values add no constraint.
        ``opts`` accepts only ``limit`` (default 20, ``None`` for no limit) and
        ``offset`` (default 0).
        """
        options = SearchOptions.from_mapping(opts)
        stmt = build_search_query(
            SearchParams.from_mapping(params), locales_available, options
        )
        return [self._enrich(course) for course in self.course_repo.all(stmt)]

    def count_courses(
        self,
        params: Optional[Mapping[str, Any]],
        locales_available: Iterable[str],
        opts: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """Number of courses search_courses would match without pagination."""
        SearchOptions.from_mapping(opts)
        stmt = build_count_query(SearchParams.from_mapping(params), locales_available)
        return self.course_repo.scalar(stmt)

    # ---------- lookups ----------

    def get_course(self, course_id: int) -> Course:
        """Get an enriched course by ID, raising NotFoundError when absent."""
        course = self.course_repo.get_by_id(course_id, refresh=True)
        if course is None:
            raise NotFoundError("Course", course_id)
        return self._enrich(course)

    def get_course_by_youtube_course_id(self, youtube_course_id: str) -> Optional[Course]:
        course = self.course_repo.get_by_youtube_course_id(youtube_course_id)
        if course is None:
            return None
        return self._enrich(course)

    def last_course(self) -> Optional[Course]:
        courses = self.course_repo.last_inserted(limit=1)
        return courses[0] if courses else None

    def last_courses_ids(self, limit: int = 25) -> list[int]:
        return [course.id for course in self.course_repo.last_inserted(limit=limit)]

    def last_updated(self, locale: Optional[str] = None) -> Optional[str]:
        """Relative time since the newest course was added, or None for an empty catalog."""
        course = self.last_course()
        if course is None:
            return None
        return format_time_ago(
            course.inserted_at,
            prefix=gettext("Last updated: ", locale),
            locale=locale,
        )

    # ---------- lifecycle ----------

    def create_course(
        self,
        youtube_channel_id: str,
        attrs: Optional[Mapping[str, Any]] = None,
        **tag_names: Iterable[str],
    ) -> Result[Course, ValidationErrors]:
        """Create a course under a channel and tag it by name.

        Raises NotFoundError when the channel does not exist. Tag names
        without a matching row are dropped. Invalid attributes come back as
        ``Err({field: [messages]})``.
        """
        unknown = set(tag_names) - set(TAG_NAME_OPTIONS)
        if unknown:
            raise InvalidOptionsError(unknown, set(TAG_NAME_OPTIONS))

        channel = self.channel_service.get_channel_by_youtube_channel_id(youtube_channel_id)
        tags = self._resolve_tags(tag_names)

        try:
            data = CourseCreate.model_validate(dict(attrs or {}))
        except ValidationError as exc:
            errors = validation_errors(exc)
            logger.info("rejected course", youtube_channel_id=youtube_channel_id, errors=errors)
            return Err(errors)

        if self.course_repo.get_by_youtube_course_id(data.youtube_course_id) is not None:
            return Err({"youtube_course_id": ["has already been taken"]})

        try:
            course = self.course_repo.create(
                **data.model_dump(),
                type=course_type(data.youtube_course_id).value,
                channel=channel,
                **tags,
            )
            self.db.commit()
        except IntegrityError:
            # lost a race against a concurrent insert of the same video
            self.db.rollback()
            return Err({"youtube_course_id": ["has already been taken"]})

        self.db.refresh(course)
        logger.info(
            "created course",
            course_id=course.id,
            youtube_course_id=course.youtube_course_id,
            type=course.type,
        )
        return Ok(self._enrich(course))

    def create_course_or_raise(
        self,
        youtube_channel_id: str,
        attrs: Optional[Mapping[str, Any]] = None,
        **tag_names: Iterable[str],
    ) -> Course:
        """Like create_course, but raises CourseValidationError on invalid input."""
        result = self.create_course(youtube_channel_id, attrs, **tag_names)
        if isinstance(result, Err):
            raise CourseValidationError(result.error)
        return result.value

    def _resolve_tags(self, tag_names: Mapping[str, Iterable[str]]) -> dict[str, list]:
        tags = {}
        for option, (relationship, model) in TAG_NAME_OPTIONS.items():
            names = list(tag_names.get(option) or [])
            found = TagRepository(self.db, model).get_by_names(names)
            missing = set(names) - {tag.name for tag in found}
            if missing:
                logger.debug("dropping unknown tag names", kind=relationship, names=sorted(missing))
            tags[relationship] = found
        return tags

    def delete_course(self, course: Course) -> Result[Course, SQLAlchemyError]:
        course_id = course.id
        try:
            self.course_repo.delete(course)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("failed to delete course", course_id=course_id, exc_info=True)
            return Err(exc)

        logger.info("deleted course", course_id=course_id)
        return Ok(course)

    def increment_view_count(self, course_id: int) -> Result[Course, Missing]:
        """Add one view in a single UPDATE; Err(NOT_FOUND) when no row matched."""
        updated = self.course_repo.increment_view_count(course_id)
        if updated == 0:
            self.db.rollback()
            return Err(NOT_FOUND)

        self.db.commit()
        return Ok(self.get_course(course_id))
