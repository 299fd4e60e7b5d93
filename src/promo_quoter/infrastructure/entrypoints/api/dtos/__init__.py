from promo_quoter.infrastructure.entrypoints.api.dtos.cart_dtos import (
    CartItemDTO,
    ConfirmRequestDTO,
    ConfirmResponseDTO,
    QuoteItemResponseDTO,
    QuoteRequestDTO,
    QuoteResponseDTO,
)

__all__ = [
    "CartItemDTO",
    "ConfirmRequestDTO",
    "ConfirmResponseDTO",
    "QuoteItemResponseDTO",
    "QuoteRequestDTO",
    "QuoteResponseDTO",
]
