from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from promo_quoter.core.domain.shared.money import ZERO


@dataclass(frozen=True, slots=True)
class PromotionResult:
    code: str
    discount: Decimal
    notes: str | None = None

    @classmethod
    def of(cls, code: str, discount: Decimal) -> PromotionResult:
        return cls(code=code, discount=discount)

    @classmethod
    def none(cls, code: str) -> PromotionResult:
        return cls(code=code, discount=ZERO)
