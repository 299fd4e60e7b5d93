from fastapi import APIRouter, Depends, Header

from promo_quoter.infrastructure.entrypoints.api.dtos import (
    ConfirmRequestDTO,
    ConfirmResponseDTO,
    QuoteRequestDTO,
    QuoteResponseDTO,
)
from promo_quoter.infrastructure.entrypoints.api.mappers import CartMapper
from promo_quoter.infrastructure.resolution.container import Container, get_container

router = APIRouter(prefix="/cart", tags=["cart"])


@router.post("/quote", response_model=QuoteResponseDTO)
def quote(
    request: QuoteRequestDTO,
    container: Container = Depends(get_container),
) -> QuoteResponseDTO:
    result = container.quotation_service.quote(
        CartMapper.to_items(request.items), request.customer_segment
    )
    return CartMapper.to_quote_response(result)


@router.post("/confirm", response_model=ConfirmResponseDTO)
def confirm(
    request: ConfirmRequestDTO,
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    container: Container = Depends(get_container),
) -> ConfirmResponseDTO:
    result = container.confirmation_boundary.confirm(
        CartMapper.to_items(request.items), request.customer_segment, idempotency_key
    )
    return CartMapper.to_confirm_response(result)
