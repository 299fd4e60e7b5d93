from promo_quoter.infrastructure.transactions.confirmation_boundary import ConfirmationBoundary
from promo_quoter.infrastructure.transactions.in_memory_unit_of_work import (
    InMemoryUnitOfWork,
    SnapshotStore,
)

__all__ = ["ConfirmationBoundary", "InMemoryUnitOfWork", "SnapshotStore"]
