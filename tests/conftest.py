"""Pytest configuration and fixtures for taskdesk tests."""

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from taskdesk.schemas.database import Task, User
from taskdesk.schemas.models import TaskStatus


@pytest.fixture
def temp_engine():
    """Create temporary SQLite engine with all tables."""
    with tempfile.NamedTemporaryFile(delete=False, suffix=".db") as temp_file:
        db_path = temp_file.name

    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    Path(db_path).unlink(missing_ok=True)


@pytest.fixture
def unreachable_engine(tmp_path):
    """Engine whose database file lives in a directory that does not exist."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'nowhere.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(temp_engine: Engine):
    """Create test database session."""
    with Session(temp_engine) as session:
        yield session


@pytest.fixture
def make_users(db_session: Session) -> Callable[[int], list[User]]:
    """Insert ``count`` users named ``User 1..N`` and return them."""

    def _make(count: int) -> list[User]:
        users = [
            User(name=f"User {i}", email=f"user{i}@example.com")
            for i in range(1, count + 1)
        ]
        db_session.add_all(users)
        db_session.commit()
        for user in users:
            db_session.refresh(user)
        return users

    return _make


@pytest.fixture
def make_tasks(db_session: Session) -> Callable[..., list[Task]]:
    """Insert ``count`` tasks, assigning owners round-robin from ``owners``."""

    def _make(count: int, owners: list[User] | None = None) -> list[Task]:
        tasks = []
        for i in range(count):
            owner = owners[i % len(owners)] if owners else None
            tasks.append(
                Task(
                    title=f"Task {i + 1}",
                    description=f"Description {i + 1}",
                    status=TaskStatus.PENDING,
                    user_id=owner.id if owner else None,
                )
            )
        db_session.add_all(tasks)
        db_session.commit()
        for task in tasks:
            db_session.refresh(task)
        return tasks

    return _make
