"""
Account persistence (raw SQL).

The `accounts.username` UNIQUE constraint is the final word on uniqueness;
a violation at insert time is reported as DuplicateUsernameError.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db, errors


async def create_account(*, username: str, password: str) -> dict[str, Any]:
    try:
        row = await db.fetch_one(
            """
            INSERT INTO accounts (username, password)
            VALUES ($1, $2)
            RETURNING id, username, password
            """,
            username,
            password,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.DuplicateUsernameError("Username already exists.") from exc
    if row is None:
        raise RuntimeError("Failed to create account.")
    return row


async def get_account_by_id(account_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, username, password
        FROM accounts
        WHERE id = $1
        """,
        account_id,
    )


async def get_account_by_username(username: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, username, password
        FROM accounts
        WHERE username = $1
        """,
        username,
    )


async def get_account_by_credentials(username: str, password: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, username, password
        FROM accounts
        WHERE username = $1
          AND password = $2
        LIMIT 1
        """,
        username,
        password,
    )
