# techschool/modules/courses/routes.py
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from techschool.core.config import settings
from techschool.core.locale import get_locales_available
from techschool.core.result import Err
from techschool.db.deps import get_db
from techschool.modules.courses.schemas import (
    CourseCreateRequest,
    CoursePage,
    CourseRead,
    LastUpdatedRead,
)
from techschool.modules.courses.service import CourseService

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=CoursePage)
def search_courses(
    db: Session = Depends(get_db),
    search: str = Query(default="", description="Case-insensitive match on the course name"),
    language: str = Query(default=""),
    framework: str = Query(default=""),
    tool: str = Query(default=""),
    fundamentals: str = Query(default=""),
    locale: Optional[str] = Query(default=None, description="Courses in this locale come first"),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    """Search the catalog and return one page of courses."""
    course_service = CourseService(db)
    params = {
        "search": search,
        "language": language,
        "framework": framework,
        "tool": tool,
        "fundamentals": fundamentals,
        "locale": locale,
    }
    locales = get_locales_available()
    courses = course_service.search_courses(
        params, locales, {"limit": page_size, "offset": (page - 1) * page_size}
    )
    total = course_service.count_courses(params, locales)
    return CoursePage(
        courses=[CourseRead.model_validate(course) for course in courses],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )


@router.get("/last-updated", response_model=LastUpdatedRead)
def last_updated(
    db: Session = Depends(get_db),
    locale: Optional[str] = Query(default=None),
):
    """Relative time since the newest course was added."""
    course_service = CourseService(db)
    return LastUpdatedRead(last_updated=course_service.last_updated(locale))


@router.get("/youtube/{youtube_course_id}", response_model=CourseRead)
def get_course_by_youtube_course_id(youtube_course_id: str, db: Session = Depends(get_db)):
    course_service = CourseService(db)
    course = course_service.get_course_by_youtube_course_id(youtube_course_id)
    if course is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found",
        )
    return course


@router.get("/{course_id}", response_model=CourseRead)
def get_course(course_id: int, db: Session = Depends(get_db)):
    """Get a course by ID."""
    course_service = CourseService(db)
    return course_service.get_course(course_id)


@router.post(
    "",
    response_model=CourseRead,
    status_code=status.HTTP_201_CREATED,
)
def create_course(payload: CourseCreateRequest, db: Session = Depends(get_db)):
    """Create a course under an existing channel."""
    course_service = CourseService(db)
    result = course_service.create_course(
        payload.youtube_channel_id,
        payload.course_attrs(),
        **payload.tag_names(),
    )
    if isinstance(result, Err):
        raise HTTPException(
            status_code=422,
            detail={"errors": result.error},
        )
    return result.value


@router.post("/{course_id}/views", response_model=CourseRead)
def increment_view_count(course_id: int, db: Session = Depends(get_db)):
    """Record one view of a course."""
    course_service = CourseService(db)
    result = course_service.increment_view_count(course_id)
    if isinstance(result, Err):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found",
        )
    return result.value


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(course_id: int, db: Session = Depends(get_db)):
    """Delete a course."""
    course_service = CourseService(db)
    course = course_service.get_course(course_id)
    result = course_service.delete_course(course)
    if isinstance(result, Err):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete course",
        )
    return None
