# server/core/schemas.py

from datetime import datetime
from typing import Any
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from models.task import TaskStatus


class CamelModel(BaseModel):
    """
    Fields are snake_case in Python and camelCase on the wire.
    Input accepts either spelling.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# -------------------------------
# Auth Schemas
# -------------------------------

class AuthRequest(CamelModel):
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=128)


class AuthResponse(CamelModel):
    token: str
    username: str


class Token(BaseModel):
    access_token: str
    token_type: str


class CurrentUserOut(CamelModel):
    user_id: str
    username: str


# -------------------------------
# Task Schemas
# -------------------------------

class TaskRequest(CamelModel):
    title: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=500)
    status: TaskStatus | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        # stored as sent; only whitespace-only titles are refused
        if not v.strip():
            raise ValueError("Title is required")
        return v


class TaskStatusUpdate(CamelModel):
    status: TaskStatus


class TaskOut(CamelModel):
    id: str
    title: str
    description: str | None = None
    status: TaskStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskStats(CamelModel):
    todo: int
    in_progress: int
    completed: int
    total: int


# -------------------------------
# Response Envelope
# -------------------------------

def ok(data: Any = None, message: str | None = None, status_code: int = 200) -> JSONResponse:
    """
    Wraps a result in the success envelope {success, data?, message?}.
    Pydantic models are serialized with their camelCase aliases.
    """
    body = {"success": True}
    if data is not None:
        body["data"] = jsonable_encoder(data, by_alias=True)
    if message is not None:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)
