"""
Pydantic schemas for question endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class QuestionWriteRequest(BaseModel):
    # Kept loose: missing or wrong-typed values are passed through and the
    # store rejects them (NOT NULL / text columns).
    title: Any = Field(default=None, examples=["What is FastAPI?"])
    description: Any = Field(default=None, examples=["I want to learn about the FastAPI framework."])
    category: Any = Field(default=None, examples=["programming"])


class QuestionResponse(BaseModel):
    id: int
    title: str
    description: str
    category: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    published_at: datetime | None = None
