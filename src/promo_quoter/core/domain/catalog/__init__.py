from promo_quoter.core.domain.catalog.product import Product

__all__ = ["Product"]
