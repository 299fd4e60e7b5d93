"""Structlog configuration for the service, with a stdlib bridge.

- configure_logging(): one-shot setup driven by AppSettings
- get_logger(): a structlog logger bound to a component name

JSON output is reshaped by the log schema processor; console output stays flat.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from promo_quoter.infrastructure.configuration.app_settings import AppSettings, LogFormat
from promo_quoter.infrastructure.observability.logging.log_schema_processor import (
    build_log_schema_processor,
)

_CONFIGURED = False

_JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})


def configure_logging(settings: AppSettings) -> None:
    """Configure structlog and route stdlib logging through it.

    Only the first call takes effect.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    json_output = _wants_json(settings)
    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    )
    processors = _shared_processors(settings, json_output)
    level = logging.getLevelNamesMapping()[settings.log_level]

    structlog.configure(
        processors=[*processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _bridge_stdlib(processors, renderer, level)


def get_logger(component: str) -> Any:
    """Return a structlog logger pre-bound with context_component."""
    return structlog.get_logger().bind(context_component=component)


def _wants_json(settings: AppSettings) -> bool:
    if settings.log_format == LogFormat.AUTO:
        return settings.env.lower() in _JSON_ENVIRONMENTS
    return settings.log_format == LogFormat.JSON


def _shared_processors(settings: AppSettings, json_output: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(build_log_schema_processor(settings.service_name, settings.env))
    return processors


def _bridge_stdlib(processors: list[Any], renderer: Any, level: int) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *processors, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
