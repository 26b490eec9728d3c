"""Logfire setup for the StackIt API.

Spans opened by the scoring coordinator (``scoring.cast_vote``,
``scoring.accept_answer``) nest under the FastAPI request span, and the
SQL issued inside them nests under those.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from stackit.config import ObservabilitySettings, Settings


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether spans leave the process.

    An explicit ``send_to_logfire`` wins. Otherwise a configured token
    turns sending on.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name="stackit-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token or None,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    # Route template groups /questions/{question_id} spans together
    route = request.scope.get("route")
    extra = {"route": getattr(route, "path", request.url.path)}
    if "auth_token" in request.cookies:
        extra["authenticated"] = True
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries, including the row locks taken by ledger updates.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
