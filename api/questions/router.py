"""
Question API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from answers import schemas as answer_schemas
from core.errors import MessageResponse, error_responses

from . import schemas, service

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.get(
    "",
    response_model=list[schemas.QuestionResponse],
    responses=error_responses(500),
)
async def list_questions() -> list[dict]:
    return await service.list_questions()


# Registered before "/{question_id}" so "search" is not taken as an id.
@router.get(
    "/search",
    response_model=list[schemas.QuestionResponse],
    responses=error_responses(500),
)
async def search_questions(
    title: str | None = Query(default=None, description="Case-insensitive title search term."),
    category: str | None = Query(default=None, description="Case-insensitive category search term."),
) -> list[dict]:
    return await service.search_questions(title=title, category=category)


@router.get(
    "/{question_id}",
    response_model=schemas.QuestionResponse,
    responses=error_responses(404, 500),
)
async def get_question(question_id: str) -> dict:
    return await service.get_question(question_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses=error_responses(400, 500),
)
async def create_question(payload: schemas.QuestionWriteRequest) -> dict:
    return await service.create_question(payload)


@router.put(
    "/{question_id}",
    response_model=MessageResponse,
    responses=error_responses(400, 404, 500),
)
async def update_question(question_id: str, payload: schemas.QuestionWriteRequest) -> dict:
    """
    Replace title, description and category of a question.
    """
    return await service.update_question(question_id, payload)


@router.delete(
    "/{question_id}",
    response_model=MessageResponse,
    responses=error_responses(500),
)
async def delete_question(question_id: str) -> dict:
    return await service.delete_question(question_id)


@router.post(
    "/{question_id}/answers",
    status_code=status.HTTP_201_CREATED,
    response_model=answer_schemas.AnswerCreatedResponse,
    responses=error_responses(400, 404, 500),
)
async def create_answer(
    question_id: str,
    payload: answer_schemas.AnswerCreateRequest | None = None,
) -> dict:
    """
    Add an answer to a question. Content must be shorter than 300 characters.
    """
    return await service.create_answer(question_id, payload)


@router.get(
    "/{question_id}/answers",
    response_model=list[answer_schemas.AnswerResponse],
    responses=error_responses(500),
)
async def list_answers(question_id: str) -> list[dict]:
    return await service.list_answers(question_id)


@router.delete(
    "/{question_id}/answers/{answer_id}",
    response_model=MessageResponse,
    responses=error_responses(400, 404, 500),
)
async def delete_answer(question_id: str, answer_id: str) -> dict:
    return await service.delete_answer(question_id, answer_id)


@router.post(
    "/{question_id}/vote",
    response_model=MessageResponse,
    responses=error_responses(400, 404, 500),
)
async def vote_question(
    question_id: str,
    payload: answer_schemas.VoteRequest | None = None,
) -> dict:
    """
    Record one upvote (1) or downvote (-1) on a question.
    """
    return await service.vote_question(question_id, payload)
