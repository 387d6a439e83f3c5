from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from answers import router as answers_router
from core import db, errors, settings
from core.log import configure_logging
from questions import router as questions_router

API_DESCRIPTION = "RESTful API for managing questions, answers, and voting system"

OPENAPI_TAGS = [
    {"name": "Test", "description": "Test endpoints"},
    {"name": "Questions", "description": "Question management endpoints"},
    {"name": "Answers", "description": "Answer management endpoints"},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(
    title="Question & Answer API",
    version="1.0.0",
    description=API_DESCRIPTION,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)

# Allow a local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.install_handlers(app)

app.include_router(questions_router.router)
app.include_router(answers_router.router)


@app.get("/test", tags=["Test"])
def liveness() -> str:
    return "Server API is working 🚀"


def run() -> None:
    uvicorn.run(app, host=settings.host(), port=settings.port())


if __name__ == "__main__":
    run()
