"""
Unit tests for repository SQL wiring, with the core.db helpers mocked.
"""
from unittest.mock import AsyncMock, patch

import asyncpg
import pytest

from accounts import repository as account_repository
from core import errors
from messages import repository as message_repository


class TestAccountRepository:
    """Test suite for accounts.repository."""

    def test_create_account_returns_row(self, run):
        row = {"id": 1, "username": "alice", "password": "pass1"}
        with patch("core.db.fetch_one", new=AsyncMock(return_value=row)) as fetch_one:
            result = run(account_repository.create_account(username="alice", password="pass1"))

        assert result == row
        sql, *args = fetch_one.await_args.args
        assert "INSERT INTO accounts" in sql
        assert args == ["alice", "pass1"]

    def test_unique_violation_becomes_duplicate_username(self, run):
        failing = AsyncMock(side_effect=asyncpg.UniqueViolationError("duplicate key"))
        with patch("core.db.fetch_one", new=failing):
            with pytest.raises(errors.DuplicateUsernameError):
                run(account_repository.create_account(username="alice", password="pass1"))

    def test_credentials_lookup_matches_both_fields(self, run):
        with patch("core.db.fetch_one", new=AsyncMock(return_value=None)) as fetch_one:
            assert run(account_repository.get_account_by_credentials("alice", "pass1")) is None

        sql, *args = fetch_one.await_args.args
        assert "username = $1" in sql
        assert "password = $2" in sql
        assert args == ["alice", "pass1"]


class TestMessageRepository:
    """Test suite for messages.repository."""

    def test_foreign_key_violation_becomes_not_found(self, run):
        failing = AsyncMock(side_effect=asyncpg.ForeignKeyViolationError("fk"))
        with patch("core.db.fetch_one", new=failing):
            with pytest.raises(errors.NotFoundError):
                run(message_repository.create_message(posted_by=9, message_text="hi"))

    def test_lists_are_ordered_by_id(self, run):
        with patch("core.db.fetch_all", new=AsyncMock(return_value=[])) as fetch_all:
            run(message_repository.list_messages())
            run(message_repository.list_messages_by_account(3))

        for call in fetch_all.await_args_list:
            assert "ORDER BY id" in call.args[0]
        assert fetch_all.await_args_list[1].args[1:] == (3,)

    def test_delete_returns_affected_count(self, run):
        with patch("core.db.execute", new=AsyncMock(return_value=1)) as execute:
            assert run(message_repository.delete_message(4)) == 1

        sql, *args = execute.await_args.args
        assert "DELETE FROM messages" in sql
        assert args == [4]

    def test_update_passes_id_then_text(self, run):
        with patch("core.db.execute", new=AsyncMock(return_value=0)) as execute:
            assert run(message_repository.update_message_text(4, "new")) == 0

        assert execute.await_args.args[1:] == (4, "new")
