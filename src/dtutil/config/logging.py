"""structlog configuration for dtutil.

The library itself only logs through ``logging.getLogger(__name__)``;
applications opt in to rendering by calling :func:`configure_logging`.

Two output modes:
- Human (default): console output to stderr, colored on a TTY
- JSON (``log_json``): Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from dtutil.config.models import LoggingConfig


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Destination for rendered lines. Defaults to stderr.
    """
    dt_level = logging.DEBUG if verbose else logging.WARNING
    out = stream if stream is not None else sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("dtutil").setLevel(dt_level)


def configure_from_config(config: LoggingConfig) -> None:
    """Apply a ``[logging]`` config section."""
    configure_logging(verbose=config.verbose, log_json=config.log_json)
