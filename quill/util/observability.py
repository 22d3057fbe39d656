"""Logfire setup and instrumentation.

Spans and structured events from the services go through logfire; this
module configures where they are sent and hooks logfire into FastAPI,
SQLAlchemy and Redis.

Usage:
    import logfire

    logfire.info("Comment created", comment_id=comment.id, root_id=comment.root_id)

    with logfire.span("comment_service.create_comment", article_id=article_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quill.config import Settings


def _should_send(settings: Settings) -> bool:
    # Explicit setting first, then token presence
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process.

    Without a token (and without ``OBSERVABILITY__SEND_TO_LOGFIRE=true``)
    events only go to the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    options = {
        "service_name": "quill-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        cache_backend=settings.cache.backend,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Request spans carry the method, path and client host; headers are not
    captured, so tokens never reach the trace.
    """

    def _request_attributes(request, attributes):
        extra = {**attributes}
        method = getattr(request, "method", None)
        if method:
            extra["method"] = method
        url = getattr(request, "url", None)
        if url is not None:
            extra["path"] = url.path
        client = getattr(request, "client", None)
        if client:
            extra["client_host"] = client.host
        return extra

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the active span context
    )


def instrument_redis() -> None:
    """Trace every Redis command issued by the cache."""
    logfire.instrument_redis(capture_statement=False)
