# hook_studio/shared/logging_config.py
import json
import logging
import sys

import structlog
from opentelemetry import trace

from hook_studio.shared.config import settings


def add_service_context(_, __, event_dict):
    """Stamps every entry with the service name and environment."""
    event_dict.setdefault("service", settings.APP_NAME)
    event_dict.setdefault("env", settings.APP_ENV.value)
    return event_dict


def add_open_telemetry_spans(_, __, event_dict):
    """
    Adds trace_id/span_id of the active span so a log line can be joined
    with its trace. Entries outside a recording span carry neither key.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def build_processors(log_format: str):
    """Returns the structlog processor chain for the given output format."""
    processors = [
        structlog.contextvars.merge_contextvars,  # request_id, path
        add_service_context,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        # Localized messages (e.g. Korean) stay readable in the output
        processors.append(structlog.processors.JSONRenderer(serializer=json.dumps, ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    return processors


def configure_logging():
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).
    """
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=build_processors(settings.LOG_FORMAT),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Uvicorn / httpx / openai log through the standard library.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
