from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from sqlalchemy.orm.attributes import set_committed_value

from techschool.core.errors import DataIntegrityError
from techschool.core.logging import get_logger
from techschool.modules.channels.models import Channel
from techschool.modules.channels.service import add_channel_url
from techschool.modules.courses.models import Course, CourseType

logger = get_logger(__name__)

EnrichChannel = Callable[[Optional[Channel]], Optional[Channel]]

COURSE_URLS = {
    CourseType.video: "https://www.youtube.com/video/{youtube_course_id}",
    CourseType.playlist: "https://www.youtube.com/playlist?list={youtube_course_id}",
}


def generate_url(course: Course) -> str:
    try:
        template = COURSE_URLS[CourseType(course.type)]
    except ValueError:
        logger.error(
            "course has unknown type",
            course_id=course.id,
            course_type=str(course.type),
        )
        raise DataIntegrityError(
            f"course {course.id} has unknown type {course.type!r}",
            context={"course_id": course.id, "type": course.type},
        )
    return template.format(youtube_course_id=course.youtube_course_id)


def add_course_and_channel_urls(
    course: Course,
    enrich_channel: EnrichChannel = add_channel_url,
) -> Course:
    """Attach the derived course URL and enrich the already loaded channel.

    The channel is swapped in as a committed value so the session never sees
    the enrichment as a change to persist.
    """
    course.url = generate_url(course)
    set_committed_value(course, "channel", enrich_channel(course.channel))
    return course
