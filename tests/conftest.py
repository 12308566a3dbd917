"""
Shared fixtures.

`store` swaps the asyncpg-backed repository functions for an in-memory fake,
one fresh instance per test.
"""
import asyncio

import pytest
from fastapi.testclient import TestClient

from accounts import repository as account_repository
from core import errors
from messages import repository as message_repository


class InMemoryStore:
    """Dict-backed stand-in for the accounts and messages tables."""

    def __init__(self):
        self.accounts = {}
        self.messages = {}
        self._next_account_id = 1
        self._next_message_id = 1

    # accounts

    async def create_account(self, *, username, password):
        if any(row["username"] == username for row in self.accounts.values()):
            raise errors.DuplicateUsernameError("Username already exists.")
        row = {"id": self._next_account_id, "username": username, "password": password}
        self.accounts[row["id"]] = row
        self._next_account_id += 1
        return dict(row)

    async def get_account_by_id(self, account_id):
        row = self.accounts.get(account_id)
        return dict(row) if row else None

    async def get_account_by_username(self, username):
        for row in self.accounts.values():
            if row["username"] == username:
                return dict(row)
        return None

    async def get_account_by_credentials(self, username, password):
        for row in self.accounts.values():
            if row["username"] == username and row["password"] == password:
                return dict(row)
        return None

    # messages

    async def create_message(self, *, posted_by, message_text, time_posted_epoch=None):
        if posted_by not in self.accounts:
            raise errors.NotFoundError(f"Account not found with ID: {posted_by}")
        row = {
            "id": self._next_message_id,
            "posted_by": posted_by,
            "message_text": message_text,
            "time_posted_epoch": time_posted_epoch,
        }
        self.messages[row["id"]] = row
        self._next_message_id += 1
        return dict(row)

    async def list_messages(self):
        return [dict(row) for _, row in sorted(self.messages.items())]

    async def get_message_by_id(self, message_id):
        row = self.messages.get(message_id)
        return dict(row) if row else None

    async def list_messages_by_account(self, account_id):
        return [
            dict(row)
            for _, row in sorted(self.messages.items())
            if row["posted_by"] == account_id
        ]

    async def update_message_text(self, message_id, message_text):
        if message_id not in self.messages:
            return 0
        self.messages[message_id]["message_text"] = message_text
        return 1

    async def delete_message(self, message_id):
        return 1 if self.messages.pop(message_id, None) is not None else 0


ACCOUNT_FUNCTIONS = (
    "create_account",
    "get_account_by_id",
    "get_account_by_username",
    "get_account_by_credentials",
)

MESSAGE_FUNCTIONS = (
    "create_message",
    "list_messages",
    "get_message_by_id",
    "list_messages_by_account",
    "update_message_text",
    "delete_message",
)


@pytest.fixture
def store(monkeypatch):
    """Fresh in-memory store patched over both repository modules."""
    fake = InMemoryStore()
    for name in ACCOUNT_FUNCTIONS:
        monkeypatch.setattr(account_repository, name, getattr(fake, name))
    for name in MESSAGE_FUNCTIONS:
        monkeypatch.setattr(message_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def run():
    """Drive a coroutine to completion from a sync test."""
    return asyncio.run


@pytest.fixture
def client(store):
    """HTTP client against the app; the DB pool lifespan is not started."""
    from main import app

    return TestClient(app)
