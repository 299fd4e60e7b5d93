from promo_quoter.core.domain.order.idempotency_record import IdempotencyRecord
from promo_quoter.core.domain.order.order import Order, OrderItem

__all__ = ["IdempotencyRecord", "Order", "OrderItem"]
