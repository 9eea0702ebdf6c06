"""Task service: paginated listing plus standard CRUD.

Coordinates the task and user repositories, converts entities into
business models and owns transaction boundaries.
"""

import logging

from sqlmodel import Session

from ..config import get_settings
from ..database import get_sync_session
from ..exceptions import NotFound, translate_storage_errors
from ..pagination import TASKS_PER_PAGE, compute_total_pages, normalize_pagination
from ..repositories import TaskRepository, UserRepository
from ..schemas.models import Page, TaskCreate, TaskRead, TaskUpdate


logger = logging.getLogger(__name__)


class TaskService:
    """Service layer for the task resource.

    Listing is read-only. Mutating operations commit on success; storage
    and lookup failures propagate to the caller untouched.
    """

    def __init__(
        self,
        session: Session | None = None,
        include_owner_by_default: bool | None = None,
    ):
        """Initialize task service with database session.

        Args:
            session: SQLModel session. If None, creates default sync session.
            include_owner_by_default: Owner join default for ``list_tasks``.
                If None, taken from settings.

        """
        if session is None:
            session = get_sync_session()
        if include_owner_by_default is None:
            include_owner_by_default = get_settings().tasks.include_owner_by_default

        self.session = session
        self.include_owner_by_default = include_owner_by_default
        self.task_repo = TaskRepository(session)
        self.user_repo = UserRepository(session)

    def list_tasks(
        self, page: int | None = 1, include_owner: bool | None = None
    ) -> Page[TaskRead]:
        """Get one page of tasks with count metadata.

        Pages hold at most ``TASKS_PER_PAGE`` tasks ordered by id. A page past
        the end comes back empty with accurate totals.

        Args:
            page: 1-based page number. None means the first page.
            include_owner: Embed each task's owner, loaded in the same query.
                None falls back to the service default.

        Raises:
            ValueError: If ``page`` is less than 1.
            StorageUnavailable: If the database cannot be reached.

        """
        pagination = normalize_pagination(page=page, page_size=TASKS_PER_PAGE)
        if include_owner is None:
            include_owner = self.include_owner_by_default

        total_count = self.task_repo.count()
        tasks = self.task_repo.get_page(pagination, include_owner=include_owner)
        logger.debug(
            f"Listed page {pagination.page} of tasks: {len(tasks)} of {total_count}"
        )

        return Page[TaskRead](
            items=[task.to_read_model(include_owner=include_owner) for task in tasks],
            page=pagination.page,
            page_size=pagination.page_size,
            total_count=total_count,
            total_pages=compute_total_pages(
                total_count=total_count, page_size=pagination.page_size
            ),
        )

    def get_task(self, task_id: int, include_owner: bool = True) -> TaskRead:
        """Get a single task.

        Raises:
            NotFound: If no task has ``task_id``.

        """
        if include_owner:
            task = self.task_repo.get_with_owner(task_id)
        else:
            task = self.task_repo.get_by_id(task_id)
        if task is None:
            raise NotFound("Task", task_id)
        return task.to_read_model(include_owner=include_owner)

    def create_task(self, task_create: TaskCreate) -> TaskRead:
        """Store a new task.

        Raises:
            NotFound: If ``user_id`` refers to a missing user.

        """
        self._ensure_user_exists(task_create.user_id)

        task = self.task_repo.create(task_create)
        self._commit("create task")
        logger.info(f"Created task {task.id}: {task.title}")
        return self.get_task(task.id)

    def update_task(self, task_id: int, task_update: TaskUpdate) -> TaskRead:
        """Apply the fields set on ``task_update`` to an existing task.

        Raises:
            NotFound: If the task or a newly referenced user is missing.

        """
        if not self.task_repo.exists(task_id):
            raise NotFound("Task", task_id)

        updates = task_update.model_dump(exclude_unset=True)
        if "user_id" in updates:
            self._ensure_user_exists(updates["user_id"])

        self.task_repo.update(task_id, updates)
        self._commit("update task")
        logger.info(f"Updated task {task_id}: {sorted(updates)}")
        return self.get_task(task_id)

    def delete_task(self, task_id: int) -> None:
        """Delete a task.

        Raises:
            NotFound: If no task has ``task_id``.

        """
        if not self.task_repo.delete(task_id):
            raise NotFound("Task", task_id)
        self._commit("delete task")
        logger.info(f"Deleted task {task_id}")

    def _ensure_user_exists(self, user_id: int | None) -> None:
        if user_id is not None and not self.user_repo.exists(user_id):
            raise NotFound("User", user_id)

    def _commit(self, operation: str) -> None:
        try:
            with translate_storage_errors(operation):
                self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def close(self):
        """Close the database session."""
        if self.session:
            self.session.close()
