from decimal import Decimal

from promo_quoter.core.application.rules.promotion_rule import PromotionRule
from promo_quoter.core.domain.cart import CartContext
from promo_quoter.core.domain.promotion import PromotionDef, PromotionResult, PromotionType
from promo_quoter.core.domain.shared.money import ZERO, round_money

_HUNDRED = Decimal(100)


class PercentOffCategoryRule(PromotionRule):
    """Takes ``percent`` off the subtotal of every line in ``category``."""

    code = PromotionType.PERCENT_OFF_CATEGORY.value

    def supports(self, definition: PromotionDef) -> bool:
        return definition.type == PromotionType.PERCENT_OFF_CATEGORY

    def apply(self, cart: CartContext, definition: PromotionDef) -> PromotionResult:
        percent = definition.percent if definition.percent is not None else ZERO
        total_discount = ZERO
        for line in cart.lines_in_category(definition.category):
            line_discount = round_money(line.original_subtotal * percent / _HUNDRED)
            if line_discount > ZERO:
                line.add_discount(line_discount)
                cart.audit(f"{self.code}({percent}%) on {line.name}: -{line_discount}")
                total_discount += line_discount
        return PromotionResult.of(self.code, total_discount)
