"""Base repository pattern with common operations.

Provides the foundation for all repository implementations with
standardized CRUD operations and query patterns. Every database round
trip goes through ``translate_storage_errors`` so connection failures
reach callers as ``StorageUnavailable``.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from ..exceptions import translate_storage_errors


EntityT = TypeVar("EntityT", bound=SQLModel)


class BaseRepository(Generic[EntityT], ABC):
    """Base repository with common operations.

    Provides standardized data access patterns and ensures consistency
    across all repository implementations.
    """

    def __init__(self, session: Session):
        self.session = session

    @abstractmethod
    def get_entity_class(self) -> type[EntityT]:
        """Return the SQLModel entity class."""
        pass

    @property
    def entity_name(self) -> str:
        return self.get_entity_class().__name__

    def create(self, business_model: BaseModel, **kwargs) -> EntityT:
        """Create entity from business model."""
        entity_data = business_model.model_dump(exclude_unset=True)
        entity_data.update(kwargs)
        entity = self.get_entity_class()(**entity_data)
        with translate_storage_errors(f"create {self.entity_name}"):
            self.session.add(entity)
            self.session.flush()
        return entity

    def get_by_id(self, entity_id: int) -> EntityT | None:
        """Get entity by ID."""
        with translate_storage_errors(f"get {self.entity_name}"):
            return self.session.get(self.get_entity_class(), entity_id)

    def update(self, entity_id: int, updates: dict[str, Any]) -> EntityT | None:
        """Apply known fields from ``updates`` and bump ``updated_at``."""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return None

        for key, value in updates.items():
            if hasattr(entity, key):
                setattr(entity, key, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = datetime.now(UTC)

        with translate_storage_errors(f"update {self.entity_name}"):
            self.session.add(entity)
            self.session.flush()
        return entity

    def delete(self, entity_id: int) -> bool:
        """Delete entity by ID."""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        with translate_storage_errors(f"delete {self.entity_name}"):
            self.session.delete(entity)
            self.session.flush()
        return True

    def list_all(self, limit: int | None = None) -> list[EntityT]:
        """Get all entities ordered by primary key with optional limit."""
        entity_class = self.get_entity_class()
        statement = select(entity_class).order_by(entity_class.id)
        if limit:
            statement = statement.limit(limit)
        with translate_storage_errors(f"list {self.entity_name}"):
            return list(self.session.exec(statement).all())

    def count(self) -> int:
        """Count total entities."""
        statement = select(func.count()).select_from(self.get_entity_class())
        with translate_storage_errors(f"count {self.entity_name}"):
            return self.session.exec(statement).one()

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists."""
        return self.get_by_id(entity_id) is not None
