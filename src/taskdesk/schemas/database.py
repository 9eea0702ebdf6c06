"""SQLModel database entity models.

Table definitions for users and tasks, plus conversion of a task row into
the ``TaskRead`` business model.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlalchemy import DateTime, Index
from sqlmodel import Field, Relationship, SQLModel

from .models import TaskRead, TaskStatus, UserSummary


def utc_now() -> datetime:
    return datetime.now(UTC)


class BaseEntityModel(SQLModel):
    """Base for database entity models with automatic timestamps."""

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class User(BaseEntityModel, table=True):
    """Account that may own tasks."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)

    tasks: list["Task"] = Relationship(back_populates="user")

    def to_summary(self) -> UserSummary:
        """Project to the fields safe to show next to a task."""
        return UserSummary(id=self.id, name=self.name)


class Task(BaseEntityModel, table=True):
    """Work item, optionally owned by a user."""

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_user_id", "user_id"),
        Index("ix_tasks_status", "status"),
    )

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    status: TaskStatus = TaskStatus.PENDING
    user_id: int | None = Field(default=None, foreign_key="users.id")

    user: Optional["User"] = Relationship(back_populates="tasks")

    def to_read_model(self, include_owner: bool = False) -> TaskRead:
        """Convert to the TaskRead business model.

        Args:
            include_owner: Embed the owner summary. Only pass True when the
                ``user`` relationship was eager-loaded, otherwise reading it
                triggers a lazy per-row query.

        """
        owner = None
        if include_owner and self.user is not None:
            owner = self.user.to_summary()

        return TaskRead(
            id=self.id,
            title=self.title,
            description=self.description,
            status=self.status,
            user_id=self.user_id,
            owner=owner,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


__all__ = ["BaseEntityModel", "Task", "User"]
