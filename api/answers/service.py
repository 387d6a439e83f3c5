"""
Answer business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import validation
from core.errors import store_errors

from . import repository, schemas

logger = logging.getLogger(__name__)


async def vote_answer(answer_id: str, payload: schemas.VoteRequest | None) -> dict[str, str]:
    if not validation.is_numeric_id(answer_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid answerId.")

    vote = validation.parse_vote(payload.vote if payload is not None else None)
    if vote is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid vote value.")

    with store_errors("Unable to vote answer.", event="answer_vote_failed", answer_id=answer_id):
        if not await repository.answer_exists(int(answer_id)):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Answer not found.")
        await repository.insert_answer_vote(int(answer_id), vote=vote)

    logger.info("answer_vote_recorded answer_id=%s vote=%s", answer_id, vote)
    return {"message": "Vote on the answer has been recorded successfully."}
