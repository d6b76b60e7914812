import logging
from typing import Optional, TextIO

import structlog
from opentelemetry import trace
from numwords.shared.config import settings

PACKAGE_LOGGER = "numwords"

# Silent unless the host application attaches a handler.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

def add_open_telemetry_spans(_, __, event_dict):
    """
    Adds the ids of the active conversion span to the event.
    Outside a recording span both ids are None.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict

def _renderer(log_format: str):
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()

def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None, stream: Optional[TextIO] = None):
    """
    Routes numwords events through the standard logging library.

    Events carry the language and mode bound by the conversion use case
    (through contextvars) plus the active trace/span ids. The level and
    format default to LOG_LEVEL / LOG_FORMAT from the settings. Nothing is
    written anywhere unless `stream` is given or the host application adds
    a handler to the "numwords" logger.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_format = log_format or settings.LOG_FORMAT

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_open_telemetry_spans,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _renderer(log_format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level_name)
    if stream is not None:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)

def init_library_logging():
    """Applies the settings-driven setup unless the host already configured structlog."""
    if not structlog.is_configured():
        configure_logging()
