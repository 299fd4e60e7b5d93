from promo_quoter.core.domain.shared.money import CENTS, ZERO, round_money

__all__ = ["CENTS", "ZERO", "round_money"]
