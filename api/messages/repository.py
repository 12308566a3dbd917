"""
Message persistence (raw SQL).

Ordering is by id everywhere, which is insertion order for a bigserial key.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db, errors

_COLUMNS = "id, posted_by, message_text, time_posted_epoch"


async def create_message(
    *,
    posted_by: int,
    message_text: str,
    time_posted_epoch: int | None = None,
) -> dict[str, Any]:
    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO messages (posted_by, message_text, time_posted_epoch)
            VALUES ($1, $2, $3)
            RETURNING {_COLUMNS}
            """,
            posted_by,
            message_text,
            time_posted_epoch,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise errors.NotFoundError(f"Account not found with ID: {posted_by}") from exc
    if row is None:
        raise RuntimeError("Failed to create message.")
    return row


async def list_messages() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM messages
        ORDER BY id
        """
    )


async def get_message_by_id(message_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM messages
        WHERE id = $1
        """,
        message_id,
    )


async def list_messages_by_account(account_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM messages
        WHERE posted_by = $1
        ORDER BY id
        """,
        account_id,
    )


async def update_message_text(message_id: int, message_text: str) -> int:
    """
    Returns the number of rows updated (0 or 1).
    """
    return await db.execute(
        """
        UPDATE messages
        SET message_text = $2
        WHERE id = $1
        """,
        message_id,
        message_text,
    )


async def delete_message(message_id: int) -> int:
    """
    Returns the number of rows deleted (0 or 1).
    """
    return await db.execute(
        """
        DELETE FROM messages
        WHERE id = $1
        """,
        message_id,
    )
