"""Service layer for task listing, authoring support and CRUD.

This module provides the services that coordinate between business
models and repositories.
"""

from .authoring_service import TaskAuthoringService
from .task_service import TaskService

__all__ = ["TaskAuthoringService", "TaskService"]
