"""structlog setup for the agecalc CLI.

Everything is written to stderr so that stdout carries only results.
``--log-json`` switches from the console renderer to JSON lines and
``--verbose`` drops the ``agecalc`` logger to DEBUG. Third-party loggers
stay at WARNING either way.

Service code logs through stdlib ``logging`` and passes domain context as
``extra``; the ``op`` and ``age`` keys are lifted into the event, and a
rejected birth date's ``field_errors`` mapping is reduced to the failing
field names plus a count.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

APP_LOGGER = "agecalc"
_EXTRA_KEYS = ("op", "age", "field_errors")
_FIELD_ORDER = ("day", "month", "year")


def summarize_field_errors(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    errors = event_dict.pop("field_errors", None)
    if errors:
        event_dict["fields"] = sorted(
            errors, key=lambda name: (_FIELD_ORDER.index(name) if name in _FIELD_ORDER else 99)
        )
        event_dict["rejected"] = len(errors)
    return event_dict


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        summarize_field_errors,
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Safe to call repeatedly; the root handler is replaced, not stacked.
    """
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.ExtraAdder(allow=_EXTRA_KEYS), *_processors()],
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
