"""taskdesk - Task resource backend.

Core Components:
- services: task listing (paginated, optional owner join), authoring support, CRUD
- repositories: SQLModel data access per entity
- schemas: business models and database tables
- api: FastAPI application with an explicit routing table
- cli: typer commands for setup and inspection
"""

from .exceptions import NotFound, StorageUnavailable, TaskdeskError
from .pagination import TASKS_PER_PAGE
from .schemas import (
    Page,
    TaskCreate,
    TaskRead,
    TaskStatus,
    TaskUpdate,
    UserSummary,
)
from .services import TaskAuthoringService, TaskService


__version__ = "0.1.0"

__all__ = [
    "TASKS_PER_PAGE",
    "NotFound",
    "Page",
    "StorageUnavailable",
    "TaskAuthoringService",
    "TaskCreate",
    "TaskRead",
    "TaskService",
    "TaskStatus",
    "TaskUpdate",
    "TaskdeskError",
    "UserSummary",
]
