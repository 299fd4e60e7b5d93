"""Pricing exception hierarchy.

Every service, store adapter and boundary raises from this tree, so callers
can branch on the type (and on ``retryable``) instead of on message text.
"""

from typing import Any


class PricingError(Exception):
    """Base exception for all quoting and confirmation errors."""

    retryable: bool = False

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class NotFoundError(PricingError):
    """A requested product (or a referenced record) does not exist."""


class InsufficientStockError(PricingError):
    """The requested quantity exceeds the product's available stock."""


class OptimisticConflictError(PricingError):
    """A stock write observed a stale version stamp.

    Retrying with freshly loaded state may succeed.
    """

    retryable = True


class ConflictError(PricingError):
    """Catch-all for unexpected failures surfaced to the boundary."""


class IdempotencyKeyConflictError(ConflictError):
    """Another request stored the same idempotency key first.

    A retry observes the winner's record and replays its order.
    """

    retryable = True
