"""
Account business logic: registration, credential checks, lookups.
"""

from __future__ import annotations

import logging

from core import errors

from . import repository, schemas

PASSWORD_MIN_LENGTH = 4

logger = logging.getLogger(__name__)


def _to_account_response(row: dict) -> schemas.AccountResponse:
    return schemas.AccountResponse(
        id=int(row["id"]),
        username=str(row["username"]),
        password=str(row["password"]),
    )


def validate_account(payload: schemas.AccountRequest) -> None:
    if payload.username is None or not payload.username.strip():
        raise errors.ValidationError("Username cannot be blank.")
    if payload.password is None or len(payload.password) < PASSWORD_MIN_LENGTH:
        raise errors.ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long."
        )


async def register_account(payload: schemas.AccountRequest) -> schemas.AccountResponse:
    """
    Validate, check the username is free, then persist.

    The username is stored exactly as given; only the blank check trims.
    """
    validate_account(payload)

    existing = await repository.get_account_by_username(payload.username)
    if existing is not None:
        logger.warning("account_register_rejected reason=duplicate_username")
        raise errors.DuplicateUsernameError("Username already exists.")

    row = await repository.create_account(username=payload.username, password=payload.password)
    logger.info("account_registered account_id=%s", row["id"])
    return _to_account_response(row)


async def authenticate(username: str | None, password: str | None) -> schemas.AccountResponse:
    # Plaintext equality on both fields, checked on every call.
    row = None
    if username is not None and password is not None:
        row = await repository.get_account_by_credentials(username, password)
    if row is None:
        raise errors.NotFoundError("Invalid username or password.")
    return _to_account_response(row)


async def find_by_id(account_id: int) -> schemas.AccountResponse:
    row = await repository.get_account_by_id(account_id)
    if row is None:
        raise errors.NotFoundError(f"Account not found with ID: {account_id}")
    return _to_account_response(row)


async def find_by_username(username: str) -> schemas.AccountResponse:
    row = await repository.get_account_by_username(username)
    if row is None:
        raise errors.NotFoundError(f"Account not found: {username}")
    return _to_account_response(row)
