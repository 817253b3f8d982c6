"""structlog configuration for randclass.

stdout carries only the chosen class name (or the failure report), so
every log line goes to stderr, in one of two renderings:

- Human (default): console-rendered lines, colored when stderr is a TTY.
- JSON (``--log-json``): one JSON object per line. Exception info is
  rendered into an ``exception`` string field, because the loader logs
  the traceback of a failed library at debug level and a raw traceback
  block would break the one-object-per-line stream.

Only the ``randclass`` logger follows ``--verbose``; everything else,
including code run by the loaded libraries, stays at WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "randclass"


def _shared_processors(*, log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if log_json:
        processors.append(structlog.processors.format_exc_info)
    return processors


def _renderer(*, log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Safe to call more than once: the root handler is replaced, not added.

    Args:
        verbose: Let ``randclass`` debug records through.
        log_json: Render JSON lines instead of console lines.
    """
    shared = _shared_processors(log_json=log_json)

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json=log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
