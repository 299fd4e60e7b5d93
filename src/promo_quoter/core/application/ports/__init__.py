from promo_quoter.core.application.ports.idempotency_port import IdempotencyPort
from promo_quoter.core.application.ports.order_port import OrderPort
from promo_quoter.core.application.ports.product_port import ProductPort
from promo_quoter.core.application.ports.promotion_port import PromotionPort

__all__ = ["IdempotencyPort", "OrderPort", "ProductPort", "PromotionPort"]
