"""
Account API endpoints: registration and login.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from core import errors

from . import schemas, service

router = APIRouter()


@router.post("/register")
async def register(payload: schemas.AccountRequest) -> schemas.AccountResponse:
    try:
        return await service.register_account(payload)
    except errors.DuplicateUsernameError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except errors.ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/login")
async def login(payload: schemas.AccountRequest) -> schemas.AccountResponse:
    try:
        return await service.authenticate(payload.username, payload.password)
    except errors.NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
