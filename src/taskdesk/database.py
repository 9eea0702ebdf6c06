"""Database initialization and session management.

Provides engine construction from settings, session helpers, table
creation and a small seeding helper used by the CLI.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine, select

from .config import DatabaseSettings, get_settings
from .exceptions import translate_storage_errors
from .schemas.database import Task, User
from .schemas.models import TaskStatus


logger = logging.getLogger(__name__)


def build_engine(database: DatabaseSettings) -> Engine:
    """Create an engine for the configured database.

    Pool sizing only applies to server databases; SQLite connections are
    opened with ``check_same_thread=False`` so request threads can share them.
    """
    if database.is_sqlite:
        return create_engine(
            database.url,
            echo=database.echo_sql,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database.url,
        echo=database.echo_sql,
        pool_size=database.pool_size,
        pool_timeout=database.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Get the process-wide engine built from settings."""
    return build_engine(get_settings().database)


def create_db_and_tables(engine: Engine | None = None) -> None:
    """Create all tables.

    Safe to call multiple times - only creates tables that don't exist.
    """
    engine = engine or get_engine()

    url = engine.url
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    with translate_storage_errors("create tables"):
        SQLModel.metadata.create_all(engine)
    logger.info(f"Database tables ensured at: {engine.url!r}")


def get_sync_session(engine: Engine | None = None) -> Session:
    """Get a synchronous database session.

    Returns:
        SQLModel Session for database operations

    """
    return Session(engine or get_engine())


@contextmanager
def get_session_context(engine: Engine | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Usage:
        with get_session_context() as session:
            # Use session here
            pass

    Commits on success and rolls back on any exception, which is re-raised.
    """
    session = Session(engine or get_engine())
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def seed_database(
    session: Session, user_count: int = 3, task_count: int = 25
) -> tuple[int, int]:
    """Insert sample users and tasks, assigning tasks round-robin.

    Returns:
        Number of users and tasks inserted

    """
    with translate_storage_errors("seed database"):
        offset = session.exec(select(func.count()).select_from(User)).one()

        users = [
            User(name=f"User {offset + i}", email=f"user{offset + i}@example.com")
            for i in range(1, user_count + 1)
        ]
        session.add_all(users)
        session.flush()

        statuses = list(TaskStatus)
        for i in range(task_count):
            owner = users[i % len(users)] if users else None
            session.add(
                Task(
                    title=f"Task {i + 1}",
                    description=f"Sample task number {i + 1}",
                    status=statuses[i % len(statuses)],
                    user_id=owner.id if owner else None,
                )
            )
        session.commit()

    logger.info(f"Seeded {len(users)} users and {task_count} tasks")
    return len(users), task_count


def verify_database(engine: Engine | None = None) -> bool:
    """Check that the database answers a trivial query.

    Returns:
        True if database is reachable, False otherwise

    """
    try:
        with Session(engine or get_engine()) as session:
            session.exec(select(func.count()).select_from(Task)).one()
        return True
    except Exception as e:
        logger.error(f"Database verification failed: {e}")
        return False


__all__ = [
    "build_engine",
    "create_db_and_tables",
    "get_engine",
    "get_session_context",
    "get_sync_session",
    "seed_database",
    "verify_database",
]
