from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CartItemDTO(CamelModel):
    product_id: int
    qty: int = Field(..., gt=0)


class QuoteRequestDTO(CamelModel):
    items: list[CartItemDTO] = Field(..., min_length=1)
    customer_segment: str

    @field_validator("customer_segment")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class ConfirmRequestDTO(QuoteRequestDTO):
    pass


class QuoteItemResponseDTO(CamelModel):
    product_id: int
    name: str
    qty: int
    unit_price: Decimal
    original_subtotal: Decimal
    discount: Decimal
    final_subtotal: Decimal


class QuoteResponseDTO(CamelModel):
    items: list[QuoteItemResponseDTO]
    total: Decimal
    applied_promotions: list[str]
    audit_trail: list[str]


class ConfirmResponseDTO(CamelModel):
    order_id: str
    total: Decimal
