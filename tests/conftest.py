"""
Pytest configuration and fixtures.

The app runs against an in-memory stand-in for the repository layer, so no
database is needed.
"""
from datetime import datetime, timezone
from itertools import count
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from answers import repository as answer_repository
from core import db
from questions import repository as question_repository


def _check_text_columns(*values):
    # Mirrors NOT NULL text columns: asyncpg refuses None and non-str values.
    for value in values:
        if value is None:
            raise RuntimeError("null value violates not-null constraint")
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")


class FakeForumStore:
    """Dict-backed replacement for the question/answer repository functions."""

    def __init__(self):
        self.questions = {}
        self.answers = {}
        self.question_votes = []
        self.answer_votes = []
        self._ids = count(1)

    # questions

    async def list_questions(self):
        return [dict(q) for _, q in sorted(self.questions.items())]

    async def search_questions(self, *, title="", category=""):
        if not title and not category:
            return await self.list_questions()
        rows = []
        for _, q in sorted(self.questions.items()):
            title_hit = bool(title) and title.lower() in q["title"].lower()
            category_hit = bool(category) and category.lower() in q["category"].lower()
            if title_hit or category_hit:
                rows.append(dict(q))
        return rows

    async def get_question(self, question_id):
        row = self.questions.get(question_id)
        return dict(row) if row is not None else None

    async def question_exists(self, question_id):
        return question_id in self.questions

    async def create_question(self, *, title, description, category, created_at):
        _check_text_columns(title, description, category)
        question_id = next(self._ids)
        self.questions[question_id] = {
            "id": question_id,
            "title": title,
            "description": description,
            "category": category,
            "created_at": created_at,
            "updated_at": created_at,
            "published_at": created_at,
        }
        return dict(self.questions[question_id])

    async def update_question(self, question_id, *, title, description, category, updated_at):
        row = self.questions.get(question_id)
        if row is None:
            return None
        _check_text_columns(title, description, category)
        row.update(title=title, description=description, category=category, updated_at=updated_at)
        return dict(row)

    async def delete_question(self, question_id):
        self.questions.pop(question_id, None)
        for answer_id in [a for a, row in self.answers.items() if row["question_id"] == question_id]:
            del self.answers[answer_id]

    async def insert_question_vote(self, question_id, *, vote):
        row = {"id": next(self._ids), "question_id": question_id, "vote": vote}
        self.question_votes.append(row)
        return row

    # answers

    async def create_answer(self, *, question_id, content):
        answer_id = next(self._ids)
        self.answers[answer_id] = {
            "id": answer_id,
            "question_id": question_id,
            "content": content,
            "created_at": datetime.now(timezone.utc),
        }
        return {"id": answer_id, "content": content}

    async def list_answers(self, question_id):
        return [dict(a) for _, a in sorted(self.answers.items()) if a["question_id"] == question_id]

    async def answer_exists(self, answer_id):
        return answer_id in self.answers

    async def answer_belongs_to_question(self, answer_id, *, question_id):
        row = self.answers.get(answer_id)
        return row is not None and row["question_id"] == question_id

    async def delete_answer(self, answer_id, *, question_id):
        if await self.answer_belongs_to_question(answer_id, question_id=question_id):
            del self.answers[answer_id]

    async def insert_answer_vote(self, answer_id, *, vote):
        row = {"id": next(self._ids), "answer_id": answer_id, "vote": vote}
        self.answer_votes.append(row)
        return row

    def votes_for_question(self, question_id):
        return [v for v in self.question_votes if v["question_id"] == question_id]


QUESTION_FUNCS = (
    "list_questions",
    "search_questions",
    "get_question",
    "question_exists",
    "create_question",
    "update_question",
    "delete_question",
    "insert_question_vote",
)

ANSWER_FUNCS = (
    "create_answer",
    "list_answers",
    "answer_exists",
    "answer_belongs_to_question",
    "delete_answer",
    "insert_answer_vote",
)


@pytest.fixture
def store(monkeypatch):
    fake = FakeForumStore()
    for name in QUESTION_FUNCS:
        monkeypatch.setattr(question_repository, name, getattr(fake, name))
    for name in ANSWER_FUNCS:
        monkeypatch.setattr(answer_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def client(store, monkeypatch):
    """Test client with the DB pool lifecycle stubbed out."""
    monkeypatch.setattr(db, "init_pool", AsyncMock())
    monkeypatch.setattr(db, "close_pool", AsyncMock())
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def question_id(client, store):
    response = client.post(
        "/questions",
        json={"title": "Q1", "description": "D", "category": "C"},
    )
    assert response.status_code == 201
    return max(store.questions)
