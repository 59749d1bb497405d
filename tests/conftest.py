"""
Pytest configuration and fixtures for testing.
"""
import itertools
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from techschool.main import app
from techschool.db.base import Base
from techschool.db.deps import get_db
from techschool.modules.channels.models import Channel
from techschool.modules.courses.models import Course
from techschool.modules.courses.service import course_type
from techschool.modules.tags.models import Language, Framework, Tool, Fundamentals


# Test database URL
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

BASE_PUBLISHED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """FastAPI test client with test database."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def channel(db):
    """Create a channel courses can belong to."""
    channel = Channel(name="Tech Channel", youtube_channel_id="UCtech123")
    db.add(channel)
    db.commit()
    db.refresh(channel)
    return channel


@pytest.fixture
def tags(db):
    """Create a small set of tags of every kind."""
    created = {
        "python": Language(name="Python"),
        "javascript": Language(name="JavaScript"),
        "django": Framework(name="Django"),
        "react": Framework(name="React"),
        "docker": Tool(name="Docker"),
        "algorithms": Fundamentals(name="Algorithms"),
    }
    db.add_all(created.values())
    db.commit()
    return created


@pytest.fixture
def make_course(db, channel):
    """Factory creating persisted courses; each call is published one day later."""
    counter = itertools.count(1)

    def _make_course(
        name="Course",
        locale="en",
        published_at=None,
        youtube_course_id=None,
        view_count=0,
        languages=(),
        frameworks=(),
        tools=(),
        fundamentals=(),
    ):
        n = next(counter)
        youtube_course_id = youtube_course_id or f"vid{n:04d}"
        course = Course(
            name=name,
            youtube_course_id=youtube_course_id,
            type=course_type(youtube_course_id).value,
            locale=locale,
            published_at=published_at or BASE_PUBLISHED_AT + timedelta(days=n),
            view_count=view_count,
            channel=channel,
            languages=list(languages),
            frameworks=list(frameworks),
            tools=list(tools),
            fundamentals=list(fundamentals),
        )
        db.add(course)
        db.commit()
        db.refresh(course)
        return course

    return _make_course
