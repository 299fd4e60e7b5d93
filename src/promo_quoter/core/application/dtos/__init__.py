from promo_quoter.core.application.dtos.cart_dtos import (
    CartItem,
    ConfirmResult,
    QuoteLine,
    QuoteResult,
)

__all__ = ["CartItem", "ConfirmResult", "QuoteLine", "QuoteResult"]
