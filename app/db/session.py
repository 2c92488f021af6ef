"""
Database session management.

The engine (and its connection pool) is created once at process start by
the application lifespan, stored on ``app.state.engine`` and disposed at
shutdown.  Request handlers receive sessions through :func:`get_db`.
"""

from typing import Generator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.core.config import Settings


def create_db_engine(settings: Settings) -> Engine:
    """
    Build the SQLAlchemy engine for ``settings.DATABASE_URL``.

    ``sqlite://`` URLs get a single shared connection so an in-memory
    database survives across sessions (local runs and tests).
    """
    url = settings.DATABASE_URL

    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=settings.DEBUG,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args: dict = {"connect_timeout": settings.DATABASE_CONNECT_TIMEOUT_SECONDS}
    if settings.DATABASE_SSL:
        connect_args["sslmode"] = "require"

    return create_engine(
        url,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        pool_pre_ping=True,   # Verify connections before using
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=0,
        pool_recycle=settings.DATABASE_POOL_RECYCLE_SECONDS,
        connect_args=connect_args,
    )


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session bound to the application engine

    Example:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.exec(select(Item)).all()
    """
    with Session(request.app.state.engine) as session:
        yield session
