"""Structlog processor that reshapes flat event fields into the service log schema.

Top level: timestamp, level, service, environment, correlation_id, message.
Prefixed keyword fields (``processing_*``, ``error_*``, ``context_*``) and the
order identifiers are folded into nested blocks; a block is only emitted when
its trigger field is present. Whatever is left lands in ``extra``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]


@dataclass(frozen=True)
class _FieldGroup:
    name: str
    trigger: tuple[str, ...]
    fields: Mapping[str, str]
    defaults: Mapping[str, Any]

    def extract(self, event_dict: dict[str, Any]) -> dict[str, Any] | None:
        if not any(event_dict.get(key) is not None for key in self.trigger):
            return None
        return {
            out_key: event_dict.pop(in_key, self.defaults.get(out_key))
            for out_key, in_key in self.fields.items()
        }


_GROUPS: tuple[_FieldGroup, ...] = (
    _FieldGroup(
        name="processing",
        trigger=("processing_status",),
        fields={
            "status": "processing_status",
            "duration_ms": "processing_duration_ms",
            "attempt": "processing_attempt",
        },
        defaults={},
    ),
    _FieldGroup(
        name="error",
        trigger=("error_type",),
        fields={"type": "error_type", "details": "error_details", "retryable": "error_retryable"},
        defaults={"retryable": False},
    ),
    _FieldGroup(
        name="context",
        trigger=("context_component", "context_endpoint"),
        fields={
            "component": "context_component",
            "endpoint": "context_endpoint",
            "method": "context_method",
            "event_type": "event_type",
        },
        defaults={},
    ),
    _FieldGroup(
        name="order",
        trigger=("idempotency_key", "order_id"),
        fields={"idempotency_key": "idempotency_key", "order_id": "order_id"},
        defaults={},
    ),
)


def _as_float(value: Any) -> float | None:
    try:
        return None if value is None else float(value)
    except (TypeError, ValueError):
        return None


def build_log_schema_processor(service: str, environment: str) -> Processor:
    def log_schema_processor(
        logger: Any,  # noqa: ARG001
        method_name: str,  # noqa: ARG001
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        shaped: dict[str, Any] = {
            "timestamp": event_dict.pop("timestamp", None),
            "level": event_dict.pop("level", "info"),
            "service": service,
            "environment": environment,
            "correlation_id": event_dict.pop("correlation_id", None),
            "message": event_dict.pop("event", ""),
        }
        for group in _GROUPS:
            block = group.extract(event_dict)
            if block is not None:
                shaped[group.name] = block

        if "processing" in shaped:
            shaped["processing"]["duration_ms"] = _as_float(shaped["processing"]["duration_ms"])
        if event_dict:
            shaped["extra"] = dict(event_dict)
        return shaped

    return log_schema_processor
