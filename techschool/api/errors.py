"""
FastAPI exception handlers mapping domain exceptions to JSON responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from techschool.core.errors import CourseValidationError, NotFoundError
from techschool.core.logging import get_logger

logger = get_logger(__name__)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(
        "entity not found",
        path=request.url.path,
        entity=exc.entity,
        identifier=str(exc.identifier),
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": f"{exc.entity} not found"},
    )


async def course_validation_handler(request: Request, exc: CourseValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": {"errors": exc.errors}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(CourseValidationError, course_validation_handler)
