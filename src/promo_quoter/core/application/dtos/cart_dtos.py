from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from promo_quoter.core.domain.cart import CartLine


@dataclass(frozen=True, slots=True)
class CartItem:
    product_id: int
    qty: int


@dataclass(frozen=True, slots=True)
class QuoteLine:
    product_id: int
    name: str
    qty: int
    unit_price: Decimal
    original_subtotal: Decimal
    discount: Decimal
    final_subtotal: Decimal

    @classmethod
    def from_cart_line(cls, line: CartLine) -> QuoteLine:
        return cls(
            product_id=line.product_id,
            name=line.name,
            qty=line.quantity,
            unit_price=line.unit_price,
            original_subtotal=line.original_subtotal,
            discount=line.discount,
            final_subtotal=line.final_subtotal,
        )


@dataclass(frozen=True, slots=True)
class QuoteResult:
    lines: list[QuoteLine]
    total: Decimal
    applied_promotions: list[str]
    audit_trail: list[str]


@dataclass(frozen=True, slots=True)
class ConfirmResult:
    order_id: str
    total: Decimal
