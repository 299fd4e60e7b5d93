import threading
from decimal import Decimal
from pathlib import Path
from typing import Any
from uuid import uuid4

from promo_quoter.core.application.ports import OrderPort
from promo_quoter.core.domain.order import Order, OrderItem
from promo_quoter.infrastructure.repositories.json_file_store import JsonFileStore

STORE_FILE_NAME = "orders.json"


def _order_to_json(order: Order) -> dict[str, Any]:
    return {
        "total": str(order.total),
        "items": [
            {
                "product_id": item.product_id,
                "name": item.name,
                "qty": item.qty,
                "unit_price": str(item.unit_price),
                "line_total": str(item.line_total),
            }
            for item in order.items
        ],
    }


def _order_from_json(order_id: str, entry: dict[str, Any]) -> Order:
    return Order(
        id=order_id,
        total=Decimal(entry["total"]),
        items=[
            OrderItem(
                product_id=item["product_id"],
                name=item["name"],
                qty=item["qty"],
                unit_price=Decimal(item["unit_price"]),
                line_total=Decimal(item["line_total"]),
            )
            for item in entry.get("items", [])
        ],
    )


class OrderStoreFileAdapter(OrderPort):
    """Orders kept in a JSON file next to the idempotency keys, so replays survive a restart.

    Money is stored as decimal strings.
    """

    def __init__(self, store_dir: Path):
        self.store_dir = store_dir
        self.file_path = self.store_dir / STORE_FILE_NAME
        self._file = JsonFileStore(self.file_path)
        self._lock = threading.Lock()

    def save(self, order: Order) -> Order:
        order_id = order.id or str(uuid4())
        entry = _order_to_json(order)
        with self._lock:
            data = self._file.read()
            data[order_id] = entry
            self._file.write(data)
        return _order_from_json(order_id, entry)

    def find_by_id(self, order_id: str) -> Order | None:
        with self._lock:
            entry = self._file.read().get(order_id)
        return _order_from_json(order_id, entry) if entry is not None else None

    def count(self) -> int:
        with self._lock:
            return len(self._file.read())

    def snapshot(self) -> dict[str, dict[str, Any]]:
        with self._lock:
            return self._file.read()

    def restore(self, state: dict[str, dict[str, Any]]) -> None:
        with self._lock:
            self._file.write(state)
