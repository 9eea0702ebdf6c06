"""Error taxonomy for the task core.

Two failure kinds surface to callers: ``StorageUnavailable`` when the
database cannot be reached or errors at the connection level, and
``NotFound`` when a referenced task or user does not exist. Neither is
retried or recovered inside the core.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError


logger = logging.getLogger(__name__)

STORAGE_ERRORS = (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)


class TaskdeskError(Exception):
    """Base class for all taskdesk errors."""


class StorageUnavailable(TaskdeskError):
    """The persistence layer could not be reached or failed mid-query."""


class NotFound(TaskdeskError):
    """A task or user referenced by identifier does not exist."""

    def __init__(self, entity: str, identifier: object):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} not found")


@contextmanager
def translate_storage_errors(operation: str) -> Generator[None, None, None]:
    """Re-raise connection-level SQLAlchemy errors as ``StorageUnavailable``.

    Args:
        operation: Short description used in the log line and error message.

    Raises:
        StorageUnavailable: If the wrapped block raises a storage error.

    """
    try:
        yield
    except STORAGE_ERRORS as e:
        logger.error(f"Storage failure during {operation}: {e}")
        raise StorageUnavailable(f"Storage unavailable during {operation}") from e


__all__ = [
    "NotFound",
    "StorageUnavailable",
    "TaskdeskError",
    "translate_storage_errors",
]
