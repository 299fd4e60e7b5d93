"""Applies promotions to a cart.

- Keeps only enabled definitions and sorts them by priority (ascending, stable).
- For each definition, applies the first registered rule that supports it.
- Definitions no rule supports are skipped.
- Returns the cart's audit entries.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from operator import attrgetter

import structlog

from promo_quoter.core.application.rules.promotion_rule import PromotionRule
from promo_quoter.core.domain.cart import CartContext
from promo_quoter.core.domain.promotion import PromotionDef

logger = structlog.get_logger()


@dataclass(frozen=True)
class PipelineResult:
    audit: list[str]


class PromotionPipeline:

    def __init__(self, rules: Sequence[PromotionRule]) -> None:
        self._rules: tuple[PromotionRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[PromotionRule, ...]:
        return self._rules

    def run(self, cart: CartContext, definitions: Sequence[PromotionDef]) -> PipelineResult:
        active = sorted((d for d in definitions if d.enabled), key=attrgetter("priority"))
        for definition in active:
            rule = self._select_rule(definition)
            if rule is None:
                logger.debug("No rule supports promotion", promotion=definition.name)
                continue
            result = rule.apply(cart, definition)
            logger.debug(
                "Promotion applied",
                promotion=definition.name,
                rule=result.code,
                discount=str(result.discount),
            )
        return PipelineResult(audit=cart.audit_entries)

    def _select_rule(self, definition: PromotionDef) -> PromotionRule | None:
        return next((rule for rule in self._rules if rule.supports(definition)), None)
