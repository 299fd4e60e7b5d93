import copy
import threading
from uuid import uuid4

from promo_quoter.core.application.ports import OrderPort
from promo_quoter.core.domain.order import Order


class InMemoryOrderRepository(OrderPort):

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._orders: dict[str, Order] = {}

    def save(self, order: Order) -> Order:
        with self._lock:
            stored = copy.deepcopy(order)
            if stored.id is None:
                stored.id = str(uuid4())
            self._orders[stored.id] = stored
            return copy.deepcopy(stored)

    def find_by_id(self, order_id: str) -> Order | None:
        with self._lock:
            order = self._orders.get(order_id)
            return copy.deepcopy(order) if order is not None else None

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    def snapshot(self) -> dict[str, Order]:
        with self._lock:
            return copy.deepcopy(self._orders)

    def restore(self, state: dict[str, Order]) -> None:
        with self._lock:
            self._orders = copy.deepcopy(state)
