from decimal import Decimal

import pytest

from promo_quoter.core.application.dtos import CartItem
from promo_quoter.core.application.exceptions import NotFoundError
from promo_quoter.core.domain.promotion import PromotionRecord, PromotionType


@pytest.fixture
def promotions(promotion_repo):
    promotion_repo.add(
        PromotionRecord(
            id=1,
            type=PromotionType.PERCENT_OFF_CATEGORY,
            name="Tech10",
            priority=1,
            category="ELECTRONICS",
            percent=Decimal("10"),
        )
    )
    promotion_repo.add(
        PromotionRecord(
            id=2,
            type=PromotionType.BUY_X_GET_Y,
            name="Soda2x1",
            priority=2,
            product_id=3,
            buy_qty=2,
            free_qty=1,
        )
    )
    promotion_repo.add(
        PromotionRecord(
            id=3,
            type=PromotionType.PERCENT_OFF_CATEGORY,
            name="DrinksOff",
            enabled=False,
            category="DRINKS",
            percent=Decimal("50"),
        )
    )
    return promotion_repo


class TestQuotationService:

    def test_quotes_lines_with_discounts(self, quotation_service, promotions):
        quote = quotation_service.quote([CartItem(1, 1), CartItem(3, 5)], "REGULAR")

        laptop, soda = quote.lines
        assert (laptop.original_subtotal, laptop.discount, laptop.final_subtotal) == (
            Decimal("1000.00"),
            Decimal("100.00"),
            Decimal("900.00"),
        )
        assert (soda.original_subtotal, soda.discount, soda.final_subtotal) == (
            Decimal("6.25"),
            Decimal("1.25"),
            Decimal("5.00"),
        )
        assert quote.total == Decimal("905.00")
        assert quote.audit_trail == [
            "PERCENT_OFF_CATEGORY(10%) on Laptop: -100.00",
            "BUY_2_GET_1 on Soda: free=1, -1.25",
        ]

    def test_total_equals_sum_of_final_subtotals(self, quotation_service, promotions):
        quote = quotation_service.quote([CartItem(1, 2), CartItem(2, 3), CartItem(3, 7)], "VIP")

        assert quote.total == sum((line.final_subtotal for line in quote.lines), Decimal("0"))

    def test_applied_promotions_lists_every_mapped_promotion(self, quotation_service, promotions):
        quote = quotation_service.quote([CartItem(2, 1)], "REGULAR")

        assert quote.applied_promotions == ["Tech10", "Soda2x1", "DrinksOff"]

    def test_duplicate_products_stay_separate_lines(self, quotation_service, promotions):
        quote = quotation_service.quote([CartItem(1, 1), CartItem(1, 2)], "REGULAR")

        assert [line.qty for line in quote.lines] == [1, 2]
        assert [line.product_id for line in quote.lines] == [1, 1]

    def test_lines_keep_request_order(self, quotation_service):
        quote = quotation_service.quote([CartItem(3, 1), CartItem(1, 1), CartItem(2, 1)], "REGULAR")

        assert [line.name for line in quote.lines] == ["Soda", "Laptop", "Mouse"]

    def test_unknown_product_names_first_missing_id(self, quotation_service):
        with pytest.raises(NotFoundError, match="Product not found: 99"):
            quotation_service.quote([CartItem(1, 1), CartItem(99, 1), CartItem(98, 1)], "REGULAR")

    def test_without_promotions_prices_at_list(self, quotation_service):
        quote = quotation_service.quote([CartItem(2, 2)], "REGULAR")

        assert quote.total == Decimal("50.00")
        assert quote.applied_promotions == []
        assert quote.audit_trail == []

    def test_quote_does_not_touch_stock(self, quotation_service, product_repo):
        quotation_service.quote([CartItem(1, 3)], "REGULAR")

        assert product_repo.find_by_id(1).stock == 10
