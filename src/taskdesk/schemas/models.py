"""Business models shared by services, the HTTP layer and the CLI.

These pydantic models are what leaves the core: database entities are
converted into them inside the service layer so callers never hold a live
ORM object bound to a session.
"""

from datetime import datetime
from enum import StrEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


# ============================================================================
# ENUMS
# ============================================================================


class TaskStatus(StrEnum):
    """Lifecycle status of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# ============================================================================
# BASE MODELS
# ============================================================================


class UnifiedConfig:
    """Shared pydantic configuration for business models."""

    PYDANTIC_CONFIG = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        use_enum_values=False,
        from_attributes=True,
    )


class BaseBusinessModel(BaseModel):
    """Base for business models returned from services."""

    model_config = UnifiedConfig.PYDANTIC_CONFIG


# ============================================================================
# USERS
# ============================================================================


class UserSummary(BaseBusinessModel):
    """The only user fields exposed alongside tasks."""

    id: int
    name: str


# ============================================================================
# TASKS
# ============================================================================


class TaskCreate(BaseBusinessModel):
    """Payload for storing a new task."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    status: TaskStatus = TaskStatus.PENDING
    user_id: int | None = None


class TaskUpdate(BaseBusinessModel):
    """Partial update payload; only fields that were set are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    status: TaskStatus | None = None
    user_id: int | None = None

    @field_validator("title", "description", "status")
    @classmethod
    def reject_explicit_null(cls, v: Any) -> Any:
        """Only ``user_id`` may be cleared; the other columns are NOT NULL."""
        if v is None:
            raise ValueError("field cannot be null")
        return v


class TaskRead(BaseBusinessModel):
    """Task as returned to callers, with the owner embedded when joined."""

    id: int
    title: str
    description: str = ""
    status: TaskStatus
    user_id: int | None = None
    owner: UserSummary | None = None
    created_at: datetime
    updated_at: datetime


# ============================================================================
# PAGINATION
# ============================================================================

ItemT = TypeVar("ItemT")


class Page(BaseModel, Generic[ItemT]):
    """One bounded, ordered slice of a larger record set."""

    items: list[ItemT] = Field(default_factory=list)
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=0)

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 1


__all__ = [
    "BaseBusinessModel",
    "Page",
    "TaskCreate",
    "TaskRead",
    "TaskStatus",
    "TaskUpdate",
    "UnifiedConfig",
    "UserSummary",
]
