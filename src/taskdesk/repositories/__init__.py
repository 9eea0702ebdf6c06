"""Repository pattern implementations for data access.

This module provides the repository layer that bridges the services
with database persistence.
"""

from .base import BaseRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository


__all__ = ["BaseRepository", "TaskRepository", "UserRepository"]
