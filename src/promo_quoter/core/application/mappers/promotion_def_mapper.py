from dataclasses import dataclass

from promo_quoter.core.domain.promotion import PromotionDef, PromotionRecord

DEFAULT_PRIORITY = 100


@dataclass(frozen=True)
class PromotionDefMapper:
    """Maps stored promotion records to pipeline definitions; fills in the default priority."""

    default_priority: int = DEFAULT_PRIORITY

    def from_record(self, record: PromotionRecord) -> PromotionDef:
        return PromotionDef(
            id=record.id,
            type=record.type,
            name=record.name,
            priority=self.default_priority if record.priority is None else record.priority,
            enabled=record.enabled,
            category=record.category,
            percent=record.percent,
            product_id=record.product_id,
            buy_qty=record.buy_qty,
            free_qty=record.free_qty,
        )
