from collections.abc import Sequence

import structlog

from promo_quoter.core.application.dtos import CartItem, QuoteLine, QuoteResult
from promo_quoter.core.application.exceptions import NotFoundError
from promo_quoter.core.application.mappers import PromotionDefMapper
from promo_quoter.core.application.pipeline import PromotionPipeline
from promo_quoter.core.application.ports import ProductPort, PromotionPort
from promo_quoter.core.domain.cart import CartContext, CartLine
from promo_quoter.core.domain.promotion import PromotionDef

logger = structlog.get_logger()


class QuotationService:
    """Prices a cart: resolve products -> build lines -> run promotions -> shape the quote."""

    def __init__(
        self,
        products: ProductPort,
        promotions: PromotionPort,
        pipeline: PromotionPipeline,
        mapper: PromotionDefMapper | None = None,
    ) -> None:
        self._products = products
        self._promotions = promotions
        self._pipeline = pipeline
        self._mapper = mapper or PromotionDefMapper()

    def quote(self, items: Sequence[CartItem], customer_segment: str) -> QuoteResult:
        logger.info("Quote started", item_count=len(items), customer_segment=customer_segment)
        cart = CartContext(self._build_lines(items))
        definitions = self._load_definitions()
        pipeline_result = self._pipeline.run(cart, definitions)

        quote = QuoteResult(
            lines=[QuoteLine.from_cart_line(line) for line in cart.lines],
            total=cart.total(),
            # Every mapped promotion is reported, including disabled or unmatched ones.
            applied_promotions=[d.name for d in definitions],
            audit_trail=pipeline_result.audit,
        )
        logger.info(
            "Quote completed",
            total=str(quote.total),
            line_count=len(quote.lines),
            audit_entries=len(quote.audit_trail),
        )
        return quote

    def _build_lines(self, items: Sequence[CartItem]) -> list[CartLine]:
        found = self._products.find_all_by_ids([item.product_id for item in items])
        by_id = {product.id: product for product in found}

        lines: list[CartLine] = []
        for item in items:
            product = by_id.get(item.product_id)
            if product is None:
                raise NotFoundError(
                    f"Product not found: {item.product_id}",
                    context={"product_id": item.product_id},
                )
            lines.append(
                CartLine(
                    product_id=product.id,
                    name=product.name,
                    category=product.category,
                    quantity=item.qty,
                    unit_price=product.price,
                )
            )
        return lines

    def _load_definitions(self) -> list[PromotionDef]:
        return [self._mapper.from_record(record) for record in self._promotions.list_all()]
