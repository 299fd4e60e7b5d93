from promo_quoter.core.application.exceptions.pricing_exceptions import (
    ConflictError,
    IdempotencyKeyConflictError,
    InsufficientStockError,
    NotFoundError,
    OptimisticConflictError,
    PricingError,
)

__all__ = [
    "ConflictError",
    "IdempotencyKeyConflictError",
    "InsufficientStockError",
    "NotFoundError",
    "OptimisticConflictError",
    "PricingError",
]
