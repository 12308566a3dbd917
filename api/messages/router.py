"""
Message API endpoints.

Not-found handling differs per endpoint: reads and deletes answer an empty
200, updates answer 400.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Path, Response, status

from accounts import service as account_service
from core import errors

from . import schemas, service

router = APIRouter()

logger = logging.getLogger(__name__)


def _empty_ok() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.post("/messages")
async def create_message(payload: schemas.MessageRequest) -> schemas.MessageResponse:
    try:
        if payload.posted_by is not None:
            await account_service.find_by_id(payload.posted_by)
        return await service.add_message(payload)
    except errors.NotFoundError as exc:
        logger.warning(
            "message_create_rejected reason=unknown_account posted_by=%s", payload.posted_by
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except errors.ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/messages")
async def list_messages() -> list[schemas.MessageResponse]:
    return await service.get_all_messages()


@router.get("/messages/{message_id}", response_model=schemas.MessageResponse)
async def get_message(
    message_id: int = Path(..., ge=schemas.BIGINT_MIN, le=schemas.BIGINT_MAX),
):
    message = await service.get_message_by_id(message_id)
    if message is None:
        return _empty_ok()
    return message


@router.delete("/messages/{message_id}", response_model=int)
async def delete_message(
    message_id: int = Path(..., ge=schemas.BIGINT_MIN, le=schemas.BIGINT_MAX),
):
    deleted = await service.delete_message_by_id(message_id)
    if not deleted:
        return _empty_ok()
    return deleted


@router.patch("/messages/{message_id}")
async def update_message(
    payload: schemas.MessageTextUpdate,
    message_id: int = Path(..., ge=schemas.BIGINT_MIN, le=schemas.BIGINT_MAX),
) -> int:
    try:
        return await service.update_message_text_by_id(message_id, payload.message_text)
    except (errors.ValidationError, errors.NotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/accounts/{account_id}/messages")
async def list_account_messages(
    account_id: int = Path(..., ge=schemas.BIGINT_MIN, le=schemas.BIGINT_MAX),
) -> list[schemas.MessageResponse]:
    return await service.get_messages_by_account_id(account_id)
