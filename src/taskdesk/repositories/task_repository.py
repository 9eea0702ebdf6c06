"""Task repository with paginated listing."""

from sqlalchemy.orm import joinedload
from sqlmodel import select

from ..exceptions import translate_storage_errors
from ..pagination import PaginationSpec
from ..schemas.database import Task
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Repository for task reads and writes."""

    def get_entity_class(self) -> type[Task]:
        """Return the database entity class for this repository."""
        return Task

    def get_page(
        self, pagination: PaginationSpec, include_owner: bool = False
    ) -> list[Task]:
        """Fetch one page of tasks ordered by id ascending.

        With ``include_owner`` the owning user is joined into the same
        SELECT, so a page costs one query regardless of its size.
        """
        statement = (
            select(Task)
            .order_by(Task.id)
            .offset(pagination.offset)
            .limit(pagination.page_size)
        )
        if include_owner:
            statement = statement.options(joinedload(Task.user))

        with translate_storage_errors("list tasks"):
            return list(self.session.exec(statement).all())

    def get_with_owner(self, task_id: int) -> Task | None:
        """Get a single task with its owner eager-loaded."""
        statement = (
            select(Task).where(Task.id == task_id).options(joinedload(Task.user))
        )
        with translate_storage_errors("get task"):
            return self.session.exec(statement).first()
