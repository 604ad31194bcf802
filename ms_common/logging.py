"""Shared logging configuration using structlog.

Records always go to stderr (and optionally a file) so that stdout stays
free for the selected value. ``extra=`` fields on stdlib records, such as
an error payload, are carried into the rendered event.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

from ms_common.config.env import parse_bool_env

ENV_LEVEL = "MS_LOG_LEVEL"
ENV_JSON = "MS_LOG_JSON"
ENV_FILE = "MS_LOG_FILE"


def _resolve_level(value: str | int | None, debug: bool, default: int) -> int:
    if debug:
        return logging.DEBUG
    if isinstance(value, int):
        return value
    if not value:
        return default
    if value.strip().isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value.strip().upper(), default)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _build_formatter(json: bool) -> logging.Formatter:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    )
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[*_shared_processors(), structlog.stdlib.ExtraAdder()],
    )


def _build_handlers(formatter: logging.Formatter, log_file: str | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
    default: int = logging.WARNING,
) -> None:
    """Install the shared formatter on the root logger and configure structlog.

    Explicit arguments win over ``MS_LOG_LEVEL``, ``MS_LOG_JSON`` and
    ``MS_LOG_FILE``. The default level is WARNING: anything chattier would
    interleave with an in-place menu redraw. Existing root handlers are
    left alone unless ``force`` is set.
    """
    _configure_structlog()
    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return

    use_json = json if json is not None else bool(parse_bool_env(os.environ.get(ENV_JSON)))
    target_file = log_file if log_file is not None else os.environ.get(ENV_FILE)
    handlers = _build_handlers(_build_formatter(use_json), target_file)

    if force:
        root_logger.handlers.clear()
    root_logger.setLevel(_resolve_level(level or os.environ.get(ENV_LEVEL), debug, default))
    for handler in handlers:
        root_logger.addHandler(handler)
