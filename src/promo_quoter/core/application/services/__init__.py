from promo_quoter.core.application.services.order_confirmation_service import (
    OrderConfirmationService,
)
from promo_quoter.core.application.services.quotation_service import QuotationService

__all__ = ["OrderConfirmationService", "QuotationService"]
