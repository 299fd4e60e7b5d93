from promo_quoter.core.application.dtos import CartItem, ConfirmResult, QuoteResult
from promo_quoter.infrastructure.entrypoints.api.dtos import (
    CartItemDTO,
    ConfirmResponseDTO,
    QuoteItemResponseDTO,
    QuoteResponseDTO,
)


class CartMapper:
    """Translates between HTTP DTOs and application DTOs."""

    @staticmethod
    def to_items(items: list[CartItemDTO]) -> list[CartItem]:
        return [CartItem(product_id=i.product_id, qty=i.qty) for i in items]

    @staticmethod
    def to_quote_response(result: QuoteResult) -> QuoteResponseDTO:
        return QuoteResponseDTO(
            items=[
                QuoteItemResponseDTO(
                    product_id=line.product_id,
                    name=line.name,
                    qty=line.qty,
                    unit_price=line.unit_price,
                    original_subtotal=line.original_subtotal,
                    discount=line.discount,
                    final_subtotal=line.final_subtotal,
                )
                for line in result.lines
            ],
            total=result.total,
            applied_promotions=list(result.applied_promotions),
            audit_trail=list(result.audit_trail),
        )

    @staticmethod
    def to_confirm_response(result: ConfirmResult) -> ConfirmResponseDTO:
        return ConfirmResponseDTO(order_id=result.order_id, total=result.total)
