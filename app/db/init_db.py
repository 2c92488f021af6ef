"""
Database initialization.

Creates all tables.
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

# Import all models so SQLModel.metadata has them
import app.db.base  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Initialize database schema.

    Creates every SQLModel table that does not exist yet; existing tables
    are left untouched (use Alembic for schema changes).
    """
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))
