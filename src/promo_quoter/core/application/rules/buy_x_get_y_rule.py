from promo_quoter.core.application.rules.promotion_rule import PromotionRule
from promo_quoter.core.domain.cart import CartContext
from promo_quoter.core.domain.promotion import PromotionDef, PromotionResult, PromotionType
from promo_quoter.core.domain.shared.money import round_money


class BuyXGetYRule(PromotionRule):
    """Every block of ``buy_qty + free_qty`` units earns ``free_qty`` free units."""

    code = PromotionType.BUY_X_GET_Y.value

    def supports(self, definition: PromotionDef) -> bool:
        return definition.type == PromotionType.BUY_X_GET_Y

    def apply(self, cart: CartContext, definition: PromotionDef) -> PromotionResult:
        line = cart.line_by_product(definition.product_id)
        if line is None:
            return PromotionResult.none(self.code)

        buy_qty = definition.buy_qty or 0
        free_qty = definition.free_qty or 0
        block = buy_qty + free_qty
        if block <= 0:
            return PromotionResult.none(self.code)

        free_units = (line.quantity // block) * free_qty
        discount = round_money(line.unit_price * free_units)

        if free_units > 0:
            line.add_discount(discount)
            cart.audit(f"BUY_{buy_qty}_GET_{free_qty} on {line.name}: free={free_units}, -{discount}")

        return PromotionResult.of(self.code, discount)
