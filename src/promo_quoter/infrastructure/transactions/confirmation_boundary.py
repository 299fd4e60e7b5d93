from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Any

from promo_quoter.core.application.dtos import CartItem, ConfirmResult
from promo_quoter.core.application.services import OrderConfirmationService
from promo_quoter.infrastructure.common.retry import RetryPolicy


@dataclass(frozen=True)
class ConfirmationBoundary:
    """
    Runs each confirmation attempt in a fresh unit of work and retries retryable
    conflicts (stale stock versions, a concurrent writer taking the same key).
    A retried attempt that finds the winner's key replays the winner's order.
    """

    service: OrderConfirmationService
    unit_of_work_factory: Callable[[], AbstractContextManager[Any]]
    retry_policy: RetryPolicy

    def confirm(
        self,
        items: Sequence[CartItem],
        customer_segment: str,
        idempotency_key: str | None = None,
    ) -> ConfirmResult:
        return self.retry_policy.run(lambda: self._attempt(items, customer_segment, idempotency_key))

    def _attempt(
        self,
        items: Sequence[CartItem],
        customer_segment: str,
        idempotency_key: str | None,
    ) -> ConfirmResult:
        with self.unit_of_work_factory():
            return self.service.confirm(items, customer_segment, idempotency_key)
