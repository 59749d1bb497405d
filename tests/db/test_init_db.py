"""Tests for table creation helpers."""

from sqlalchemy import create_engine, inspect

from techschool.db import init_db


def test_create_and_drop_database(monkeypatch):
    engine = create_engine("sqlite://")
    monkeypatch.setattr(init_db, "engine", engine)

    init_db.create_database()
    tables = set(inspect(engine).get_table_names())
    assert {
        "channels",
        "courses",
        "languages",
        "frameworks",
        "tools",
        "fundamentals",
        "courses_languages",
        "courses_frameworks",
        "courses_tools",
        "courses_fundamentals",
    } <= tables

    init_db.drop_database()
    assert inspect(engine).get_table_names() == []
