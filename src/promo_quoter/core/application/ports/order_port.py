from abc import ABC, abstractmethod

from promo_quoter.core.domain.order import Order


class OrderPort(ABC):

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persists the order and returns it with a generated id."""
        pass

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        pass
