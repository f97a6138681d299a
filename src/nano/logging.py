"""
Structured logging for the bid adapter.

Every adapter event goes through a structlog logger bound with the bidder
code. While a translation runs, LogContext puts the auction's request id
into a ContextVar so each event of that call carries it.

Importing the adapter never touches logging setup; the host (or
run_adapter.py) calls configure_logging() once at startup.
"""

import logging
import os
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog

SERVICE_NAME = "nano-adapter"

# Auction being translated by the current call
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    return request_id_var.get()


def generate_request_id() -> str:
    """Id for calls whose bid request carries none."""
    return uuid.uuid4().hex


def add_request_id(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Tag events emitted inside a LogContext with its request id."""
    request_id = get_request_id()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def add_service_info(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict["service"] = SERVICE_NAME
    return event_dict


def _renderer(format: str) -> structlog.typing.Processor:
    if format == "console":
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    return structlog.processors.JSONRenderer()


def configure_logging(
    level: str = "INFO",
    format: str = "json",
    show_timestamps: bool = True,
) -> None:
    """
    Configure structlog on top of the stdlib logging module.

    LOG_LEVEL and LOG_FORMAT override the arguments.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format ('json' or 'console')
        show_timestamps: Whether to stamp events with an ISO timestamp
    """
    level = os.getenv("LOG_LEVEL", level).upper()
    format = os.getenv("LOG_FORMAT", format).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    processors: list[structlog.typing.Processor] = []
    if show_timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.contextvars.merge_contextvars,
        add_request_id,
        add_service_info,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
        _renderer(format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bidder_logger(bidder_code: str) -> structlog.stdlib.BoundLogger:
    """Logger for request/response translation events of one bidder."""
    return structlog.get_logger("nano.bidder").bind(bidder=bidder_code)


def config_logger() -> structlog.stdlib.BoundLogger:
    return structlog.get_logger("nano.config")


class LogContext:
    """
    Scope a request id (and optional extra keys) to one adapter call.

    On exit the previous request id is restored and only the keys bound
    here are unbound, so a host's own context survives nested use.
    """

    def __init__(self, request_id: str | None = None, **context: Any):
        self.request_id = request_id or generate_request_id()
        self.context = context
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = request_id_var.set(self.request_id)
        if self.context:
            structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.context:
            structlog.contextvars.unbind_contextvars(*self.context)
        request_id_var.reset(self._token)
