from promo_quoter.core.application.rules.buy_x_get_y_rule import BuyXGetYRule
from promo_quoter.core.application.rules.percent_off_category_rule import PercentOffCategoryRule
from promo_quoter.core.application.rules.promotion_rule import PromotionRule


def default_rules() -> list[PromotionRule]:
    """Registration order matters: the pipeline picks the first rule that supports a definition."""
    return [
        PercentOffCategoryRule(),
        BuyXGetYRule(),
    ]
