"""
Message business logic.

Two result shapes on purpose:
- reads and deletes treat a missing id as a normal outcome (None / count 0)
- updates treat it as a failure (NotFoundError)

No ownership check is made on any mutation; any caller may edit or delete any
message by id.
"""

from __future__ import annotations

import logging

from core import errors

from . import repository, schemas

MESSAGE_TEXT_MIN_LENGTH = 1
MESSAGE_TEXT_MAX_LENGTH = 255

logger = logging.getLogger(__name__)


def _to_message_response(row: dict) -> schemas.MessageResponse:
    epoch = row.get("time_posted_epoch")
    return schemas.MessageResponse(
        id=int(row["id"]),
        posted_by=int(row["posted_by"]),
        message_text=str(row["message_text"]),
        time_posted_epoch=int(epoch) if epoch is not None else None,
    )


def validate_message_text(message_text: str | None) -> None:
    if message_text is None or not (
        MESSAGE_TEXT_MIN_LENGTH <= len(message_text) <= MESSAGE_TEXT_MAX_LENGTH
    ):
        raise errors.ValidationError(
            f"Message cannot be blank or more than {MESSAGE_TEXT_MAX_LENGTH} characters."
        )


async def add_message(payload: schemas.MessageRequest) -> schemas.MessageResponse:
    """
    Validate and persist a new message.

    The caller is expected to have confirmed that `posted_by` is a real
    account; this only checks the text.
    """
    validate_message_text(payload.message_text)
    if payload.posted_by is None:
        raise errors.ValidationError("postedBy is required.")

    row = await repository.create_message(
        posted_by=payload.posted_by,
        message_text=payload.message_text,
        time_posted_epoch=payload.time_posted_epoch,
    )
    logger.info("message_created message_id=%s posted_by=%s", row["id"], row["posted_by"])
    return _to_message_response(row)


async def get_all_messages() -> list[schemas.MessageResponse]:
    rows = await repository.list_messages()
    return [_to_message_response(row) for row in rows]


async def get_message_by_id(message_id: int) -> schemas.MessageResponse | None:
    row = await repository.get_message_by_id(message_id)
    if row is None:
        return None
    return _to_message_response(row)


async def delete_message_by_id(message_id: int) -> int:
    deleted = await repository.delete_message(message_id)
    if deleted:
        logger.info("message_deleted message_id=%s", message_id)
    return deleted


async def update_message_text_by_id(message_id: int, message_text: str | None) -> int:
    # Text is validated before the existence check, so bad text on a missing
    # id is a ValidationError.
    validate_message_text(message_text)

    if await repository.get_message_by_id(message_id) is None:
        raise errors.NotFoundError(f"Message not found with ID: {message_id}")

    updated = await repository.update_message_text(message_id, message_text)
    logger.info("message_updated message_id=%s", message_id)
    return updated


async def get_messages_by_account_id(account_id: int) -> list[schemas.MessageResponse]:
    rows = await repository.list_messages_by_account(account_id)
    return [_to_message_response(row) for row in rows]
