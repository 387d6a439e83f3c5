"""
Pydantic schemas for answer endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class AnswerCreateRequest(BaseModel):
    # Either field is accepted; `answer` wins when both are sent.
    answer: str | None = Field(default=None, examples=["FastAPI is an ASGI web framework."])
    content: str | None = Field(default=None, description="Alternative to 'answer'.")


class VoteRequest(BaseModel):
    # Kept loose so that wrong values produce a 400 from the service, not a 422.
    vote: Any = Field(default=None, examples=[1, -1])


class AnswerResponse(BaseModel):
    id: int
    question_id: int
    content: str
    created_at: datetime | None = None


class CreatedAnswer(BaseModel):
    id: int
    content: str


class AnswerCreatedResponse(BaseModel):
    data: list[CreatedAnswer]
