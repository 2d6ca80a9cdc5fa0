"""
Structured logging for the Bookshelf API using structlog.

Every log line emitted while a request is being handled carries that request's
id and, for /graphql requests, the GraphQL operation name. Both live in context
variables set by LoggingContextMiddleware, so resolver and store logs pick them
up without being passed anything.
"""

import logging
import secrets
import sys
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


class RequestContextFilter:
    """structlog processor binding the request id and GraphQL operation name."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        _ = logger, method_name

        request_id = request_id_ctx.get()
        if request_id:
            event_dict.setdefault("request_id", request_id)

        operation = graphql_operation_ctx.get()
        if operation:
            event_dict.setdefault("graphql_operation", operation)

        return event_dict


def resolve_log_level(level: str | None, debug: bool = False) -> int:
    """Map a level name such as "info" or "WARNING" to a logging level.

    Debug mode always wins. Unknown names fall back to INFO.
    """
    if debug:
        return logging.DEBUG
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        debug: Log everything with human-readable console output. Otherwise
            render JSON lines.
        level: Level name used when not in debug mode (e.g. settings.log_level).
    """
    log_level = resolve_log_level(level, debug)

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            RequestContextFilter(),
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Random 12-character urlsafe request id."""
    return secrets.token_urlsafe(9)


def set_request_context(request_id: str | None = None) -> str:
    """Set the request id for the current context, generating one if None.

    Returns:
        The request id now in effect
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    return request_id


def set_graphql_operation(operation: str | None) -> None:
    """Record the GraphQL operation handled by the current request."""
    graphql_operation_ctx.set(operation)


def clear_request_context() -> None:
    request_id_ctx.set(None)
    graphql_operation_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def get_graphql_operation() -> str | None:
    return graphql_operation_ctx.get()
