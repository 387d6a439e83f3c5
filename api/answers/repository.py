"""
Answer persistence (raw SQL).

Owns the `answers` and `answer_votes` tables. The questions feature reuses
these helpers for its nested answer endpoints.
"""

from __future__ import annotations

from typing import Any

from core import db


async def create_answer(*, question_id: int, content: str) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO answers (question_id, content)
        VALUES ($1, $2)
        RETURNING id, content
        """,
        question_id,
        content,
    )
    if row is None:
        raise RuntimeError("Failed to create answer.")
    return row


async def list_answers(question_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, question_id, content, created_at
        FROM answers
        WHERE question_id = $1
        ORDER BY id
        """,
        question_id,
    )


async def answer_exists(answer_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM answers
        WHERE id = $1
        LIMIT 1
        """,
        answer_id,
    )
    return row is not None


async def answer_belongs_to_question(answer_id: int, *, question_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM answers
        WHERE id = $1
          AND question_id = $2
        LIMIT 1
        """,
        answer_id,
        question_id,
    )
    return row is not None


async def delete_answer(answer_id: int, *, question_id: int) -> None:
    await db.execute(
        """
        DELETE FROM answers
        WHERE id = $1
          AND question_id = $2
        """,
        answer_id,
        question_id,
    )


async def insert_answer_vote(answer_id: int, *, vote: int) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO answer_votes (answer_id, vote)
        VALUES ($1, $2)
        RETURNING id, answer_id, vote
        """,
        answer_id,
        vote,
    )
    if row is None:
        raise RuntimeError("Failed to record answer vote.")
    return row
