from decimal import Decimal

from promo_quoter.core.domain.cart.cart_line import CartLine
from promo_quoter.core.domain.shared.money import ZERO


class CartContext:
    """
    Priced cart for a single quote/confirm call.
    Lines keep request order; duplicate product ids stay as separate lines.
    The audit log is append-only and owned by this instance.
    """

    def __init__(self, lines: list[CartLine]) -> None:
        if lines is None:
            raise ValueError("lines must not be None")
        self._lines = lines
        self._audit: list[str] = []

    @property
    def lines(self) -> list[CartLine]:
        return self._lines

    @property
    def audit_entries(self) -> list[str]:
        return list(self._audit)

    def line_by_product(self, product_id: int) -> CartLine | None:
        return next((line for line in self._lines if line.product_id == product_id), None)

    def lines_in_category(self, category: str | None) -> list[CartLine]:
        return [line for line in self._lines if line.category == category]

    def audit(self, message: str) -> None:
        self._audit.append(message)

    def total(self) -> Decimal:
        return sum((line.final_subtotal for line in self._lines), ZERO)
