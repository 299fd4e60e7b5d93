from dataclasses import dataclass
from decimal import Decimal

from promo_quoter.core.domain.promotion.promotion_def import PromotionType


@dataclass
class PromotionRecord:
    """A promotion as held by the promotion store. ``priority`` may be unset."""

    id: int | None
    type: PromotionType
    name: str
    enabled: bool = True
    priority: int | None = None
    category: str | None = None
    percent: Decimal | None = None
    product_id: int | None = None
    buy_qty: int | None = None
    free_qty: int | None = None
