"""User repository (read-only from the task core's perspective)."""

from sqlmodel import select

from ..exceptions import translate_storage_errors
from ..schemas.database import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user lookups."""

    def get_entity_class(self) -> type[User]:
        """Return the database entity class for this repository."""
        return User

    def list_id_name_pairs(self) -> list[tuple[int, str]]:
        """Select only id and name for every user, ordered by id."""
        statement = select(User.id, User.name).order_by(User.id)
        with translate_storage_errors("list users"):
            return [(user_id, name) for user_id, name in self.session.exec(statement)]
