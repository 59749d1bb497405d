"""Database initialization utilities for the catalog service."""

from techschool.db.base import Base
from techschool.db.session import engine
from techschool.core.config import settings
from techschool.core.logging import configure_logging, get_logger

# Register every model on Base.metadata
import techschool.models  # noqa: F401

logger = get_logger(__name__)


def create_database():
    """Create all database tables."""
    logger.info("Creating catalog database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Catalog database tables created successfully")


def drop_database():
    """Drop all database tables."""
    logger.info("Dropping catalog database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Catalog database tables dropped successfully")


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    create_database()
