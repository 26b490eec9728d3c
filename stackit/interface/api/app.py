"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stackit.config import Settings
from stackit.interface.api.errors import setup_error_handlers
from stackit.interface.api.routes import (
    answers,
    comments,
    health,
    notifications,
    questions,
    users,
    votes,
)
from stackit.util.di.container import create_container, setup_di
from stackit.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    questions.router,
    answers.router,
    comments.router,
    votes.router,
    users.router,
    notifications.router,
)


def create_app() -> FastAPI:
    """Build the StackIt API.

    Logfire must already be configured: ``scripts/start_app.py`` does it
    for the server and ``tests/conftest.py`` for the test suite.
    """
    settings = Settings()

    application = FastAPI(
        title="StackIt API",
        description="Q&A with StackPoints, levels, streaks and achievements",
        version="0.1.0",
    )
    instrument_fastapi(application)

    # Auth travels in a cookie, so the frontend origin needs credentials
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
        max_age=600,
    )

    setup_di(application, create_container())
    setup_error_handlers(application)

    for router in ROUTERS:
        application.include_router(router)

    return application


app = create_app()
