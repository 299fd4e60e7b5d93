from promo_quoter.core.application.mappers.promotion_def_mapper import PromotionDefMapper

__all__ = ["PromotionDefMapper"]
