"""
Question business logic.

Scope:
- question CRUD and search
- answers nested under a question (SQL lives in `answers.repository`)
- question votes

Ids on the vote and delete-answer endpoints are checked against `^\\d+$`
here; the other endpoints hand the raw id to the store and let a bad value
fail there (500).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import HTTPException, status

from answers import repository as answer_repository
from answers import schemas as answer_schemas
from core import validation
from core.errors import INVALID_REQUEST_MESSAGE, store_errors

from . import repository, schemas

MAX_ANSWER_LENGTH = 300

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _store_id(raw: str) -> int:
    # Raises ValueError for non-integers; callers run this inside store_errors.
    return validation.parse_store_id(raw)


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


async def list_questions() -> list[dict[str, Any]]:
    with store_errors("Unable to fetch questions.", event="question_list_failed"):
        return await repository.list_questions()


async def search_questions(*, title: str | None = None, category: str | None = None) -> list[dict[str, Any]]:
    with store_errors(
        "Unable to fetch questions.",
        event="question_search_failed",
        title=title,
        category=category,
    ):
        return await repository.search_questions(title=title or "", category=category or "")


async def get_question(question_id: str) -> dict[str, Any]:
    with store_errors("Unable to fetch question.", event="question_get_failed", question_id=question_id):
        row = await repository.get_question(_store_id(question_id))
    if row is None:
        raise _not_found("Question not found.")
    return row


async def create_question(payload: schemas.QuestionWriteRequest) -> dict[str, str]:
    with store_errors(INVALID_REQUEST_MESSAGE, event="question_create_failed"):
        row = await repository.create_question(
            title=payload.title,
            description=payload.description,
            category=payload.category,
            created_at=_utc_now(),
        )
    logger.info("question_created question_id=%s", row["id"])
    return {"message": "Question created successfully."}


async def update_question(question_id: str, payload: schemas.QuestionWriteRequest) -> dict[str, str]:
    with store_errors("Unable to update question.", event="question_update_failed", question_id=question_id):
        qid = _store_id(question_id)
        if not await repository.question_exists(qid):
            raise _not_found("Question not found.")
        row = await repository.update_question(
            qid,
            title=payload.title,
            description=payload.description,
            category=payload.category,
            updated_at=_utc_now(),
        )
    if row is None:
        raise _not_found("Question not found.")
    logger.info("question_updated question_id=%s", question_id)
    return {"message": "Question updated successfully."}


async def delete_question(question_id: str) -> dict[str, str]:
    # No existence check: deleting an unknown id is a no-op in the store.
    with store_errors("Unable to delete question.", event="question_delete_failed", question_id=question_id):
        await repository.delete_question(_store_id(question_id))
    logger.info("question_deleted question_id=%s", question_id)
    return {"message": "Question deleted successfully."}


def _answer_content(payload: answer_schemas.AnswerCreateRequest | None) -> str:
    if payload is None:
        raise _bad_request(INVALID_REQUEST_MESSAGE)

    content = payload.answer if payload.answer is not None else payload.content
    if not content:
        raise _bad_request(INVALID_REQUEST_MESSAGE)
    if validation.utf16_length(content) >= MAX_ANSWER_LENGTH:
        raise _bad_request(f"Answer must be shorter than {MAX_ANSWER_LENGTH} characters.")
    return content


async def create_answer(
    question_id: str,
    payload: answer_schemas.AnswerCreateRequest | None,
) -> dict[str, list[dict[str, Any]]]:
    content = _answer_content(payload)

    with store_errors("Unable to create answer.", event="answer_create_failed", question_id=question_id):
        qid = _store_id(question_id)
        if not await repository.question_exists(qid):
            raise _not_found("Question not found.")
        row = await answer_repository.create_answer(question_id=qid, content=content)

    logger.info("answer_created question_id=%s answer_id=%s", question_id, row["id"])
    return {"data": [row]}


async def list_answers(question_id: str) -> list[dict[str, Any]]:
    with store_errors("Unable to fetch answers.", event="answer_list_failed", question_id=question_id):
        return await answer_repository.list_answers(_store_id(question_id))


async def delete_answer(question_id: str, answer_id: str) -> dict[str, str]:
    if not (validation.is_numeric_id(question_id) and validation.is_numeric_id(answer_id)):
        raise _bad_request("Invalid questionId or answerId.")

    qid, aid = int(question_id), int(answer_id)
    with store_errors(
        "Unable to delete answer.",
        event="answer_delete_failed",
        question_id=question_id,
        answer_id=answer_id,
    ):
        if not await repository.question_exists(qid):
            raise _not_found("Question not found.")
        if not await answer_repository.answer_belongs_to_question(aid, question_id=qid):
            raise _not_found("Answer not found.")
        await answer_repository.delete_answer(aid, question_id=qid)

    logger.info("answer_deleted question_id=%s answer_id=%s", question_id, answer_id)
    return {"message": "Answer deleted successfully."}


async def vote_question(question_id: str, payload: answer_schemas.VoteRequest | None) -> dict[str, str]:
    if not validation.is_numeric_id(question_id):
        raise _bad_request("Invalid questionId.")

    vote = validation.parse_vote(payload.vote if payload is not None else None)
    if vote is None:
        raise _bad_request("Invalid vote value.")

    with store_errors("Unable to vote question.", event="question_vote_failed", question_id=question_id):
        if not await repository.question_exists(int(question_id)):
            raise _not_found("Question not found.")
        await repository.insert_question_vote(int(question_id), vote=vote)

    logger.info("question_vote_recorded question_id=%s vote=%s", question_id, vote)
    return {"message": "Vote on the question has been recorded successfully."}
