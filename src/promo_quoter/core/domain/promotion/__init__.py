from promo_quoter.core.domain.promotion.promotion_def import PromotionDef, PromotionType
from promo_quoter.core.domain.promotion.promotion_record import PromotionRecord
from promo_quoter.core.domain.promotion.promotion_result import PromotionResult

__all__ = ["PromotionDef", "PromotionRecord", "PromotionResult", "PromotionType"]
