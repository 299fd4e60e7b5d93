from abc import ABC, abstractmethod

from promo_quoter.core.domain.cart import CartContext
from promo_quoter.core.domain.promotion import PromotionDef, PromotionResult


class PromotionRule(ABC):
    """Contract for pluggable promotion rules."""

    @abstractmethod
    def supports(self, definition: PromotionDef) -> bool:
        """Can this rule handle the given promotion definition?"""

    @abstractmethod
    def apply(self, cart: CartContext, definition: PromotionDef) -> PromotionResult:
        """Mutate line discounts, append audit entries and report the discount applied."""
