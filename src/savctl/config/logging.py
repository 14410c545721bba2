"""structlog setup for the savctl CLI.

stdout carries results only, so every log line goes to stderr:

- ``savctl.*``: the search service's ``search.denied`` (warning),
  ``search.rejected`` (info) and ``search.completed`` (debug) events.
  WARNING by default, DEBUG with ``--verbose``.
- ``sqlalchemy.engine``: statements and bound parameters at INFO when
  ``[database] echo`` is on. SQLAlchemy's own echo handler would print
  to stdout, so engines are created without it and the logger is routed
  here instead.

``--log-json`` switches the renderer to one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "savctl"
SQL_LOGGER = "sqlalchemy.engine"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    tail: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta
    ]
    if log_json:
        tail += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        tail.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return structlog.stdlib.ProcessorFormatter(foreign_pre_chain=_pre_chain(), processors=tail)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    sql_echo: bool = False,
) -> None:
    """Send structlog and stdlib records through one stderr handler.

    Called once per CLI invocation; reconfiguring replaces the handler.
    """
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(log_json))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.WARNING)
