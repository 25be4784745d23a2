import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor

from hostfs.core.config import Settings, settings as default_settings
from hostfs.infrastructure.logging_processors import (
    ServiceContextProcessor,
    format_exception_info,
    sanitize_sensitive_data,
    set_log_severity,
)


def build_processors(settings: Optional[Settings] = None) -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        ServiceContextProcessor(settings),
        structlog.processors.add_log_level,
        set_log_severity,
        format_exception_info,
        structlog.processors.TimeStamper(fmt="iso"),
        # Must run last before rendering
        sanitize_sensitive_data,
    ]


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Route hostfs (and root) logging through structlog.

    hostfs never calls this itself; the host application opts in.
    """
    settings = settings or default_settings
    shared_processors = build_processors(settings)

    if settings.log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    # Backed by a stdlib logger so output follows the host's logging levels
    return structlog.wrap_logger(logging.getLogger(name))


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
