"""Tests for derived course and channel URLs."""

import pytest

from techschool.core.errors import DataIntegrityError
from techschool.modules.channels.models import Channel
from techschool.modules.courses.enrichment import add_course_and_channel_urls, generate_url
from techschool.modules.courses.models import Course, CourseType


def build_course(youtube_course_id, course_type):
    channel = Channel(id=1, name="Channel", youtube_channel_id="UCabc")
    return Course(
        id=1,
        name="Course",
        youtube_course_id=youtube_course_id,
        type=course_type,
        locale="en",
        channel=channel,
    )


class TestGenerateUrl:

    def test_video_url(self):
        course = build_course("abc123", CourseType.video)
        assert generate_url(course) == "https://www.youtube.com/video/abc123"

    def test_playlist_url(self):
        course = build_course("PLxyz", CourseType.playlist)
        assert generate_url(course) == "https://www.youtube.com/playlist?list=PLxyz"

    def test_unknown_type_is_a_data_integrity_error(self):
        course = build_course("abc123", "livestream")

        with pytest.raises(DataIntegrityError) as exc:
            generate_url(course)

        assert exc.value.context["type"] == "livestream"


class TestAddCourseAndChannelUrls:

    def test_sets_course_and_channel_urls(self):
        course = build_course("abc123", CourseType.video)

        enriched = add_course_and_channel_urls(course)

        assert enriched.url == "https://www.youtube.com/video/abc123"
        assert enriched.channel.url == "https://www.youtube.com/channel/UCabc"

    def test_uses_injected_channel_enrichment(self):
        course = build_course("abc123", CourseType.video)
        replacement = Channel(id=2, name="Other", youtube_channel_id="UCother")

        enriched = add_course_and_channel_urls(course, lambda channel: replacement)

        assert enriched.channel is replacement
