"""
Error envelope and store error boundary.

Every error response body is `{"message": "..."}`. Services raise
`HTTPException` for validation/not-found outcomes and wrap store calls in
`store_errors(...)` so unexpected failures become a generic 500.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data."


class ErrorResponse(BaseModel):
    message: str


class MessageResponse(BaseModel):
    message: str


def error_responses(*status_codes: int) -> dict[int | str, dict]:
    """
    OpenAPI `responses=` entry documenting the `{message}` envelope.
    """
    return {code: {"model": ErrorResponse} for code in status_codes}


@contextmanager
def store_errors(message: str, *, event: str, **context: object) -> Iterator[None]:
    """
    Turn any non-HTTP failure inside the block into a logged 500.

    `message` is what the client sees; `event` and `context` only go to the log.
    """
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        details = " ".join(f"{key}={value}" for key, value in context.items())
        logger.exception("%s %s", event, details)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        ) from exc


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_validation_failed errors=%s", exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_REQUEST_MESSAGE},
    )


def install_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
