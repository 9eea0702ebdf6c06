"""Schema package: business models and database entities.

Quick usage:
    from taskdesk.schemas import TaskRead, TaskStatus, Page
    from taskdesk.repositories import TaskRepository
    from taskdesk.services import TaskService
"""

from .database import BaseEntityModel, Task, User
from .models import (
    BaseBusinessModel,
    Page,
    TaskCreate,
    TaskRead,
    TaskStatus,
    TaskUpdate,
    UnifiedConfig,
    UserSummary,
)


__all__ = [
    "BaseBusinessModel",
    "BaseEntityModel",
    "Page",
    "Task",
    "TaskCreate",
    "TaskRead",
    "TaskStatus",
    "TaskUpdate",
    "UnifiedConfig",
    "User",
    "UserSummary",
]
