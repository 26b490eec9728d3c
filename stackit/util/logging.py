"""Standard library logging routed through Logfire.

uvicorn, alembic and SQLAlchemy log through ``logging``. Sending those
records to Logfire keeps them next to the request and scoring spans.
"""

import logging

import logfire

from stackit.config import Settings

# Third-party loggers held at WARNING or above
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg", "uvicorn.access")


def log_level_for(settings: Settings) -> int:
    """Pick the application log level for the environment.

    Args:
        settings: Application settings

    Returns:
        DEBUG when debugging, WARNING under test, INFO otherwise
    """
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to Logfire.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = log_level_for(settings)

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by imported libraries
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("stackit").setLevel(level)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
