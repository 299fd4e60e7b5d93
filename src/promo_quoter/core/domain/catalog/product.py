from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Product:
    """Catalog entry. ``version`` is the optimistic-concurrency stamp checked on save."""

    id: int
    name: str
    category: str
    price: Decimal
    stock: int
    version: int = 0

    def reserve(self, quantity: int) -> None:
        self.stock = self.stock - quantity
