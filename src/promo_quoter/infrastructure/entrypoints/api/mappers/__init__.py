from promo_quoter.infrastructure.entrypoints.api.mappers.cart_mapper import CartMapper

__all__ = ["CartMapper"]
