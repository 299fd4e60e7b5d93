from dataclasses import dataclass, field
from decimal import Decimal

from promo_quoter.core.domain.shared.money import ZERO, round_money


@dataclass
class CartLine:
    """One requested product line. Discounts accumulate as rules apply."""

    product_id: int
    name: str
    category: str
    quantity: int
    unit_price: Decimal
    discount: Decimal = field(default=ZERO)

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"quantity must be positive, got {self.quantity}")
        if self.unit_price < ZERO:
            raise ValueError(f"unit_price must be non-negative, got {self.unit_price}")

    @property
    def original_subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def final_subtotal(self) -> Decimal:
        # Not clamped: stacked discounts may push this below zero.
        return round_money(self.original_subtotal - self.discount)

    def add_discount(self, amount: Decimal) -> None:
        if amount < ZERO:
            raise ValueError(f"discount amount must be non-negative, got {amount}")
        self.discount = self.discount + amount
