from promo_quoter.core.application.rules.buy_x_get_y_rule import BuyXGetYRule
from promo_quoter.core.application.rules.percent_off_category_rule import PercentOffCategoryRule
from promo_quoter.core.application.rules.promotion_rule import PromotionRule
from promo_quoter.core.application.rules.registry import default_rules

__all__ = ["BuyXGetYRule", "PercentOffCategoryRule", "PromotionRule", "default_rules"]
