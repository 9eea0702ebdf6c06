"""Tests for TaskAuthoringService.list_assignable_users."""

from unittest.mock import Mock, patch

import pytest
from sqlalchemy import event
from sqlmodel import Session

from taskdesk.exceptions import StorageUnavailable
from taskdesk.schemas.database import User
from taskdesk.services.authoring_service import TaskAuthoringService


class TestListAssignableUsers:
    """Test suite for the assignee lookup."""

    def test_maps_every_user_id_to_name(self, db_session, make_users):
        """Test one entry per user, keyed by id."""
        users = make_users(4)

        result = TaskAuthoringService(session=db_session).list_assignable_users()

        assert result == {user.id: user.name for user in users}
        assert len(result) == 4

    def test_ordered_by_id(self, db_session):
        """Test insertion order follows id even when names do not."""
        db_session.add_all(
            [
                User(name="Zoe", email="zoe@example.com"),
                User(name="Adam", email="adam@example.com"),
                User(name="Mia", email="mia@example.com"),
            ]
        )
        db_session.commit()

        result = TaskAuthoringService(session=db_session).list_assignable_users()

        assert list(result) == sorted(result)
        assert list(result.values()) == ["Zoe", "Adam", "Mia"]

    def test_duplicate_names_keep_distinct_keys(self, db_session):
        """Test users sharing a display name still get separate entries."""
        db_session.add_all(
            [
                User(name="Sam", email="sam1@example.com"),
                User(name="Sam", email="sam2@example.com"),
            ]
        )
        db_session.commit()

        result = TaskAuthoringService(session=db_session).list_assignable_users()

        assert len(result) == 2
        assert set(result.values()) == {"Sam"}

    def test_no_users_returns_empty_mapping(self, db_session):
        """Test an empty user table yields an empty dict."""
        assert TaskAuthoringService(session=db_session).list_assignable_users() == {}

    def test_only_id_and_name_are_selected(self, temp_engine, make_users):
        """Test the query never reads other user columns."""
        make_users(2)
        statements: list[str] = []

        def _record(conn, cursor, statement, parameters, context, executemany):
            statements.append(statement)

        event.listen(temp_engine, "before_cursor_execute", _record)
        try:
            with Session(temp_engine) as session:
                TaskAuthoringService(session=session).list_assignable_users()
        finally:
            event.remove(temp_engine, "before_cursor_execute", _record)

        assert len(statements) == 1
        assert "users.id" in statements[0]
        assert "users.name" in statements[0]
        assert "email" not in statements[0]
        assert "created_at" not in statements[0]

    def test_storage_failure_propagates(self, unreachable_engine):
        """Test connectivity errors surface as StorageUnavailable."""
        with Session(unreachable_engine) as session:
            with pytest.raises(StorageUnavailable):
                TaskAuthoringService(session=session).list_assignable_users()

    def test_init_with_default_session(self):
        """Test a session is created when none is supplied."""
        with patch(
            "taskdesk.services.authoring_service.get_sync_session"
        ) as mock_get_session:
            mock_get_session.return_value = Mock(spec=Session)

            service = TaskAuthoringService()

            mock_get_session.assert_called_once()
            assert service.session is mock_get_session.return_value
