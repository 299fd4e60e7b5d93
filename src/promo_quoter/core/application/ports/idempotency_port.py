from abc import ABC, abstractmethod

from promo_quoter.core.domain.order import IdempotencyRecord


class IdempotencyPort(ABC):

    @abstractmethod
    def find_by_key(self, key: str) -> IdempotencyRecord | None:
        pass

    @abstractmethod
    def save(self, record: IdempotencyRecord) -> None:
        """Stores a new record.

        Implementations that enforce key uniqueness raise
        IdempotencyKeyConflictError when the key is already present.
        """
        pass
