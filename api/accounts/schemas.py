"""
Account API schemas (request/response models).

Wire names are camelCase (`accountId`); snake_case is accepted on input too.
Request fields are optional on purpose: blank or missing values must reach
the service validation and come back as 400, not as a schema error.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AccountRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str | None = None
    password: str | None = None


class AccountResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="accountId")
    username: str
    # Echoed back as-is; credentials are stored and compared in plaintext.
    password: str
