"""Structured logging configuration for sketch-py.

Provides the structlog setup used by the CLI and a request logging
middleware for the live view.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from litestar.types import ASGIApp, Message, Receive, Scope, Send


def configure_logging(*, debug: bool = False, json_logs: bool = False, stream: TextIO | None = None) -> None:
    """Configure structured logging for sketch-py.

    Log lines go to stderr so rendered output and CLI messages on stdout stay
    clean. Values bound with :func:`structlog.contextvars.bound_contextvars`
    (the render pipeline binds ``sketch`` and ``backend``) are merged into
    every event.

    Args:
        debug: Enable debug level logging, including backend commands.
        json_logs: Output logs as JSON (for scripting and CI).
        stream: Where log lines are written; defaults to ``sys.stderr``.
    """
    stream = stream or sys.stderr
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_logs:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


class RequestLoggingMiddleware:
    """Middleware that logs each live view request with its status and duration."""

    def __init__(self, app: ASGIApp) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application.
        """
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Process the request and log information."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        logger = structlog.get_logger(__name__)
        start_time = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            log_method = logger.warning if status_code >= 400 else logger.debug
            log_method(
                "Request completed",
                method=scope.get("method", ""),
                path=scope.get("path", ""),
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
            )
