"""
Message API schemas (request/response models).

Integer fields are bounded to the `bigint` columns they bind to, so
out-of-range values fail request validation instead of the database call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class MessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    posted_by: int | None = Field(default=None, alias="postedBy", ge=BIGINT_MIN, le=BIGINT_MAX)
    message_text: str | None = Field(default=None, alias="messageText")
    # Opaque to the service; stored as sent.
    time_posted_epoch: int | None = Field(
        default=None, alias="timePostedEpoch", ge=BIGINT_MIN, le=BIGINT_MAX
    )


class MessageTextUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message_text: str | None = Field(default=None, alias="messageText")


class MessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="messageId")
    posted_by: int = Field(..., alias="postedBy")
    message_text: str = Field(..., alias="messageText")
    time_posted_epoch: int | None = Field(default=None, alias="timePostedEpoch")
