"""
Search query composition for the course catalog.

Every helper takes a ``Select`` and returns a new one; SQLAlchemy statements
are generative, so a partially built query can be reused and each step can be
tested on its own. A helper whose input is empty returns the statement
unchanged.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Select, case, func, select
from sqlalchemy.orm import joinedload, selectinload

from techschool.core.errors import InvalidOptionsError
from techschool.core.locale import get_default_locale
from techschool.modules.courses.models import Course
from techschool.modules.tags.models import Language, Framework, Tool, Fundamentals

# filter key -> (relationship on Course, tag model)
TAG_FILTERS = (
    ("language", Course.languages, Language),
    ("framework", Course.frameworks, Framework),
    ("tool", Course.tools, Tool),
    ("fundamentals", Course.fundamentals, Fundamentals),
)


class SearchOptions(BaseModel):
    """Pagination for search_courses. ``limit=None`` means no limit."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    limit: Optional[int] = Field(default=20, ge=0)
    offset: int = Field(default=0, ge=0)

    @classmethod
    def from_mapping(cls, opts: Optional[Mapping[str, Any]] = None) -> "SearchOptions":
        opts = dict(opts or {})
        allowed = set(cls.model_fields)
        unknown = set(opts) - allowed
        if unknown:
            raise InvalidOptionsError(unknown, allowed)
        return cls(**opts)


@dataclass(frozen=True)
class SearchParams:
    search: str = ""
    language: str = ""
    framework: str = ""
    tool: str = ""
    fundamentals: str = ""
    locale: Optional[str] = None

    @classmethod
    def from_mapping(cls, params: Optional[Mapping[str, Any]] = None) -> "SearchParams":
        """Read the known string keys; anything else in the mapping is ignored."""
        params = params or {}
        return cls(
            search=params.get("search") or "",
            language=params.get("language") or "",
            framework=params.get("framework") or "",
            tool=params.get("tool") or "",
            fundamentals=params.get("fundamentals") or "",
            locale=params.get("locale") or None,
        )


def filter_locales(stmt: Select, locales_available: Iterable[str]) -> Select:
    return stmt.where(Course.locale.in_(list(locales_available)))


def filter_search(stmt: Select, search: str) -> Select:
    if not search:
        return stmt
    return stmt.where(Course.name.icontains(search, autoescape=True))


def filter_tag(stmt: Select, relationship, model, name: str) -> Select:
    """Keep courses tagged with at least one entity whose name contains ``name``.

    Uses EXISTS rather than a join so a course matching several tags still
    comes back once.
    """
    if not name:
        return stmt
    return stmt.where(relationship.any(model.name.icontains(name, autoescape=True)))


def order_by_locale(stmt: Select, locale: str) -> Select:
    """Preferred locale first, then newest first."""
    return stmt.order_by(
        case((Course.locale == locale, 0), else_=1),
        Course.published_at.desc(),
        Course.id.desc(),
    )


def paginate(stmt: Select, limit: Optional[int], offset: int) -> Select:
    return stmt.limit(limit).offset(offset)


def with_associations(stmt: Select) -> Select:
    return stmt.options(
        joinedload(Course.channel),
        selectinload(Course.languages),
        selectinload(Course.frameworks),
        selectinload(Course.tools),
        selectinload(Course.fundamentals),
    )


def build_filtered_query(params: SearchParams, locales_available: Iterable[str]) -> Select:
    stmt = filter_locales(select(Course), locales_available)
    stmt = filter_search(stmt, params.search)
    for key, relationship, model in TAG_FILTERS:
        stmt = filter_tag(stmt, relationship, model, getattr(params, key))
    return stmt


def build_search_query(
    params: SearchParams,
    locales_available: Iterable[str],
    options: SearchOptions,
) -> Select:
    stmt = with_associations(build_filtered_query(params, locales_available))
    stmt = order_by_locale(stmt, params.locale or get_default_locale())
    return paginate(stmt, options.limit, options.offset)


def build_count_query(params: SearchParams, locales_available: Iterable[str]) -> Select:
    filtered = build_filtered_query(params, locales_available)
    return select(func.count()).select_from(filtered.subquery())


def build_list_query() -> Select:
    return with_associations(select(Course)).order_by(Course.id.asc())
