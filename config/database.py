"""Database configuration and session management."""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from config.settings import settings
from models.base import Base

logger = logging.getLogger(__name__)


def engine_options(database_url: str) -> dict[str, Any]:
    """Build keyword arguments for ``create_engine``.

    SQLite connections are shared across the request threadpool, so they
    need ``check_same_thread`` disabled and take no pool sizing.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        Keyword arguments for the engine.
    """
    if database_url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "echo": settings.db_echo,
        }
    return {
        "pool_pre_ping": True,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "echo": settings.db_echo,
    }


# Create database engine
engine = create_engine(settings.database_url, **engine_options(settings.database_url))

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, Any, None]:
    """Dependency that provides a database session.

    Yields a SQLAlchemy session and ensures proper cleanup after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Run a block as a single unit of work.

    Commits when the block exits normally. Any exception rolls the session
    back and is re-raised unchanged.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def init_db(bind: Engine | None = None) -> None:
    """Create all mapped tables that do not exist yet."""
    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database tables ensured on %s", target.url.render_as_string(hide_password=True))
