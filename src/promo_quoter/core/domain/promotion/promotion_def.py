from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PromotionType(str, Enum):
    PERCENT_OFF_CATEGORY = "PERCENT_OFF_CATEGORY"
    BUY_X_GET_Y = "BUY_X_GET_Y"


@dataclass(frozen=True, slots=True)
class PromotionDef:
    """Storage-agnostic view of a promotion, as consumed by the pipeline."""

    id: int | None
    type: PromotionType
    name: str
    priority: int
    enabled: bool
    # PERCENT_OFF_CATEGORY
    category: str | None = None
    percent: Decimal | None = None
    # BUY_X_GET_Y
    product_id: int | None = None
    buy_qty: int | None = None
    free_qty: int | None = None
