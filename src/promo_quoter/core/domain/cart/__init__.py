from promo_quoter.core.domain.cart.cart_context import CartContext
from promo_quoter.core.domain.cart.cart_line import CartLine

__all__ = ["CartContext", "CartLine"]
