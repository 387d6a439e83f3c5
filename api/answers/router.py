"""
Answer API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core.errors import MessageResponse, error_responses

from . import schemas, service

router = APIRouter(prefix="/answers", tags=["Answers"])


@router.post(
    "/{answer_id}/vote",
    response_model=MessageResponse,
    responses=error_responses(400, 404, 500),
)
async def vote_answer(answer_id: str, payload: schemas.VoteRequest | None = None) -> dict:
    """
    Record one upvote (1) or downvote (-1) on an answer.
    """
    return await service.vote_answer(answer_id, payload)
