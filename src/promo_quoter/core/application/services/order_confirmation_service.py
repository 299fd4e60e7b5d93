"""Order confirmation: idempotency check -> quote -> reserve stock -> persist order -> record key."""

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

import structlog

from promo_quoter.core.application.dtos import CartItem, ConfirmResult, QuoteResult
from promo_quoter.core.application.exceptions import (
    ConflictError,
    InsufficientStockError,
    NotFoundError,
    PricingError,
)
from promo_quoter.core.application.ports import IdempotencyPort, OrderPort, ProductPort
from promo_quoter.core.application.services.quotation_service import QuotationService
from promo_quoter.core.domain.order import IdempotencyRecord, Order, OrderItem

logger = structlog.get_logger()


def _utc_now() -> datetime:
    return datetime.now(UTC)


class OrderConfirmationService:
    """
    Confirms a cart into an order, reserving stock exactly once per idempotency key.

    The service does not roll back partial stock reservations and does not retry
    on conflicts; both belong to the transaction boundary wrapping ``confirm``.
    """

    def __init__(
        self,
        products: ProductPort,
        orders: OrderPort,
        idempotency: IdempotencyPort,
        quotation: QuotationService,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._products = products
        self._orders = orders
        self._idempotency = idempotency
        self._quotation = quotation
        self._clock = clock

    def confirm(
        self,
        items: Sequence[CartItem],
        customer_segment: str,
        idempotency_key: str | None = None,
    ) -> ConfirmResult:
        key = self._normalize_key(idempotency_key)
        log = logger.bind(idempotency_key=key, event_type="order.confirm")
        log.info("Order confirmation started", item_count=len(items))
        try:
            if key is not None:
                replay = self._step_1_check_idempotency(key)
                if replay is not None:
                    log.info("Idempotent replay", order_id=replay.order_id)
                    return replay

            quote = self._step_2_quote(items, customer_segment)
            self._step_3_reserve_stock(items)
            order = self._step_4_persist_order(quote)
            if key is not None:
                self._step_5_record_idempotency(key, order.id)
        except PricingError as exc:
            log.warning(
                "Order confirmation failed",
                processing_status="ERROR",
                error_type=type(exc).__name__,
                error_details=str(exc),
                error_retryable=exc.retryable,
            )
            raise

        log.info("Order confirmed", order_id=order.id, total=str(quote.total), processing_status="SUCCESS")
        return ConfirmResult(order_id=order.id, total=quote.total)

    # ── Steps ──────────────────────────────────────────────────────────

    def _step_1_check_idempotency(self, key: str) -> ConfirmResult | None:
        record = self._idempotency.find_by_key(key)
        if record is None:
            return None
        order = self._orders.find_by_id(record.order_id)
        if order is None:
            raise ConflictError(
                f"Idempotency key '{key}' references missing order {record.order_id}",
                context={"idempotency_key": key, "order_id": record.order_id},
            )
        return ConfirmResult(order_id=order.id, total=order.total)

    def _step_2_quote(self, items: Sequence[CartItem], customer_segment: str) -> QuoteResult:
        return self._quotation.quote(items, customer_segment)

    def _step_3_reserve_stock(self, items: Sequence[CartItem]) -> None:
        for item in items:
            product = self._products.find_by_id(item.product_id)
            if product is None:
                raise NotFoundError(
                    f"Product not found: {item.product_id}",
                    context={"product_id": item.product_id},
                )
            if product.stock < item.qty:
                raise InsufficientStockError(
                    f"Insufficient stock for {product.name}",
                    context={"product_id": product.id, "stock": product.stock, "requested": item.qty},
                )
            product.reserve(item.qty)
            self._products.save(product)
            logger.debug("Stock reserved", product_id=product.id, qty=item.qty, stock=product.stock)

    def _step_4_persist_order(self, quote: QuoteResult) -> Order:
        order = Order(
            total=quote.total,
            items=[
                OrderItem(
                    product_id=line.product_id,
                    name=line.name,
                    qty=line.qty,
                    unit_price=line.unit_price,
                    line_total=line.final_subtotal,
                )
                for line in quote.lines
            ],
        )
        return self._orders.save(order)

    def _step_5_record_idempotency(self, key: str, order_id: str) -> None:
        self._idempotency.save(IdempotencyRecord(key=key, order_id=order_id, created_at=self._clock()))

    @staticmethod
    def _normalize_key(idempotency_key: str | None) -> str | None:
        if idempotency_key is None or not idempotency_key.strip():
            return None
        return idempotency_key
