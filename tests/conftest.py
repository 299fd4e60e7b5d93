from datetime import UTC, datetime
from decimal import Decimal

import pytest

from promo_quoter.core.application.pipeline import PromotionPipeline
from promo_quoter.core.application.rules import default_rules
from promo_quoter.core.application.services import OrderConfirmationService, QuotationService
from promo_quoter.core.domain.catalog import Product
from promo_quoter.infrastructure.repositories import (
    InMemoryIdempotencyRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryPromotionRepository,
)

FIXED_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def product_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository(
        [
            Product(id=1, name="Laptop", category="ELECTRONICS", price=Decimal("1000.00"), stock=10),
            Product(id=2, name="Mouse", category="ELECTRONICS", price=Decimal("25.00"), stock=5),
            Product(id=3, name="Soda", category="DRINKS", price=Decimal("1.25"), stock=50),
            Product(id=4, name="Gum", category="SNACKS", price=Decimal("0.333"), stock=0),
        ]
    )


@pytest.fixture
def promotion_repo() -> InMemoryPromotionRepository:
    return InMemoryPromotionRepository()


@pytest.fixture
def order_repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def idempotency_repo() -> InMemoryIdempotencyRepository:
    return InMemoryIdempotencyRepository()


@pytest.fixture
def quotation_service(product_repo, promotion_repo) -> QuotationService:
    return QuotationService(
        products=product_repo,
        promotions=promotion_repo,
        pipeline=PromotionPipeline(default_rules()),
    )


@pytest.fixture
def confirmation_service(
    product_repo, order_repo, idempotency_repo, quotation_service
) -> OrderConfirmationService:
    return OrderConfirmationService(
        products=product_repo,
        orders=order_repo,
        idempotency=idempotency_repo,
        quotation=quotation_service,
        clock=lambda: FIXED_NOW,
    )

