from decimal import Decimal
from unittest.mock import MagicMock

from promo_quoter.core.application.pipeline import PipelineResult, PromotionPipeline
from promo_quoter.core.application.rules import PromotionRule, default_rules
from promo_quoter.core.domain.cart import CartContext, CartLine
from promo_quoter.core.domain.promotion import PromotionDef, PromotionResult, PromotionType


def _percent(name, priority, percent="10", enabled=True, category="ELECTRONICS"):
    return PromotionDef(
        id=None,
        type=PromotionType.PERCENT_OFF_CATEGORY,
        name=name,
        priority=priority,
        enabled=enabled,
        category=category,
        percent=Decimal(percent),
    )


def _cart():
    return CartContext(
        [CartLine(product_id=1, name="Laptop", category="ELECTRONICS", quantity=1, unit_price=Decimal("100.00"))]
    )


def _mock_rule(supports=True):
    rule = MagicMock(spec=PromotionRule)
    rule.supports.return_value = supports
    rule.apply.return_value = PromotionResult.none("MOCK")
    return rule


class TestPromotionPipeline:

    def test_applies_by_ascending_priority(self):
        cart = _cart()
        definitions = [_percent("Late", priority=5, percent="50"), _percent("Early", priority=1, percent="10")]

        result = PromotionPipeline(default_rules()).run(cart, definitions)

        assert result.audit == [
            "PERCENT_OFF_CATEGORY(10%) on Laptop: -10.00",
            "PERCENT_OFF_CATEGORY(50%) on Laptop: -50.00",
        ]
        assert cart.total() == Decimal("40.00")

    def test_equal_priorities_keep_input_order(self):
        cart = _cart()
        definitions = [_percent("B", priority=1, percent="20"), _percent("A", priority=1, percent="10")]

        result = PromotionPipeline(default_rules()).run(cart, definitions)

        assert result.audit == [
            "PERCENT_OFF_CATEGORY(20%) on Laptop: -20.00",
            "PERCENT_OFF_CATEGORY(10%) on Laptop: -10.00",
        ]

    def test_disabled_definitions_are_skipped(self):
        cart = _cart()

        result = PromotionPipeline(default_rules()).run(cart, [_percent("Off", priority=1, enabled=False)])

        assert result == PipelineResult(audit=[])
        assert cart.total() == Decimal("100.00")

    def test_first_supporting_rule_wins(self):
        first, second = _mock_rule(), _mock_rule()
        cart = _cart()
        definition = _percent("Tech", priority=1)

        PromotionPipeline([first, second]).run(cart, [definition])

        first.apply.assert_called_once_with(cart, definition)
        second.apply.assert_not_called()
        second.supports.assert_not_called()

    def test_unsupported_definition_is_skipped(self):
        rule = _mock_rule(supports=False)
        cart = _cart()

        result = PromotionPipeline([rule]).run(cart, [_percent("Tech", priority=1)])

        rule.apply.assert_not_called()
        assert result.audit == []

    def test_returns_pre_existing_audit_entries(self):
        cart = _cart()
        cart.audit("seeded")

        result = PromotionPipeline(default_rules()).run(cart, [_percent("Tech", priority=1)])

        assert result.audit == ["seeded", "PERCENT_OFF_CATEGORY(10%) on Laptop: -10.00"]

    def test_stacked_discounts_may_go_negative(self):
        cart = _cart()
        definitions = [_percent("A", priority=1, percent="60"), _percent("B", priority=2, percent="60")]

        PromotionPipeline(default_rules()).run(cart, definitions)

        assert cart.total() == Decimal("-20.00")

    def test_rules_are_exposed_in_registration_order(self):
        rules = default_rules()
        pipeline = PromotionPipeline(rules)
        assert pipeline.rules == tuple(rules)
