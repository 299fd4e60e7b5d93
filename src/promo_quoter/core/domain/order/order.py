from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class OrderItem:
    product_id: int
    name: str
    qty: int
    unit_price: Decimal
    line_total: Decimal


@dataclass
class Order:
    """Order aggregate. Items are created and discarded together with the order."""

    total: Decimal
    items: list[OrderItem] = field(default_factory=list)
    id: str | None = None
