"""Support data for the task authoring form."""

import logging

from sqlmodel import Session

from ..database import get_sync_session
from ..repositories import UserRepository


logger = logging.getLogger(__name__)


class TaskAuthoringService:
    """Provides the assignee choices shown when creating a task."""

    def __init__(self, session: Session | None = None):
        """Initialize with a database session.

        Args:
            session: SQLModel session. If None, creates default sync session.

        """
        if session is None:
            session = get_sync_session()

        self.session = session
        self.user_repo = UserRepository(session)

    def list_assignable_users(self) -> dict[int, str]:
        """Map every user id to its display name, ordered by id.

        Only ids and names are read; no other user column leaves the
        database. An empty dict means there is nobody to assign.

        Raises:
            StorageUnavailable: If the database cannot be reached.

        """
        users = dict(self.user_repo.list_id_name_pairs())
        logger.debug(f"Loaded {len(users)} assignable users")
        return users

    def close(self):
        """Close the database session."""
        if self.session:
            self.session.close()
