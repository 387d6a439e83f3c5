"""
Question persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from core import db

QUESTION_COLUMNS = "id, title, description, category, created_at, updated_at, published_at"


async def list_questions() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {QUESTION_COLUMNS}
        FROM questions
        ORDER BY id
        """
    )


async def search_questions(*, title: str = "", category: str = "") -> list[dict[str, Any]]:
    """
    Case-insensitive substring search on title OR category.

    An empty term is ignored; with both terms empty every row matches.
    """
    return await db.fetch_all(
        f"""
        SELECT {QUESTION_COLUMNS}
        FROM questions
        WHERE ($1 = '' AND $2 = '')
           OR ($1 <> '' AND title ILIKE ('%' || $1 || '%'))
           OR ($2 <> '' AND category ILIKE ('%' || $2 || '%'))
        ORDER BY id
        """,
        title or "",
        category or "",
    )


async def get_question(question_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {QUESTION_COLUMNS}
        FROM questions
        WHERE id = $1
        """,
        question_id,
    )


async def question_exists(question_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM questions
        WHERE id = $1
        LIMIT 1
        """,
        question_id,
    )
    return row is not None


async def create_question(
    *,
    title: Any,
    description: Any,
    category: Any,
    created_at: datetime,
) -> dict[str, Any]:
    # created_at, updated_at and published_at all start at the same instant.
    row = await db.fetch_one(
        f"""
        INSERT INTO questions (title, description, category, created_at, updated_at, published_at)
        VALUES ($1, $2, $3, $4, $4, $4)
        RETURNING {QUESTION_COLUMNS}
        """,
        title,
        description,
        category,
        created_at,
    )
    if row is None:
        raise RuntimeError("Failed to create question.")
    return row


async def update_question(
    question_id: int,
    *,
    title: Any,
    description: Any,
    category: Any,
    updated_at: datetime,
) -> dict[str, Any] | None:
    """
    Full replace of the editable fields. Returns None when the id is unknown.
    """
    return await db.fetch_one(
        f"""
        UPDATE questions
        SET title = $1,
            description = $2,
            category = $3,
            updated_at = $4
        WHERE id = $5
        RETURNING {QUESTION_COLUMNS}
        """,
        title,
        description,
        category,
        updated_at,
        question_id,
    )


async def delete_question(question_id: int) -> None:
    await db.execute(
        """
        DELETE FROM questions
        WHERE id = $1
        """,
        question_id,
    )


async def insert_question_vote(question_id: int, *, vote: int) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO question_votes (question_id, vote)
        VALUES ($1, $2)
        RETURNING id, question_id, vote
        """,
        question_id,
        vote,
    )
    if row is None:
        raise RuntimeError("Failed to record question vote.")
    return row
