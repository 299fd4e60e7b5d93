import copy
import threading
from collections.abc import Iterable

from promo_quoter.core.application.ports import PromotionPort
from promo_quoter.core.domain.promotion import PromotionRecord


class InMemoryPromotionRepository(PromotionPort):
    """Keeps promotions in insertion order, which is the tie-break order for equal priorities."""

    def __init__(self, promotions: Iterable[PromotionRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._promotions: list[PromotionRecord] = [copy.deepcopy(p) for p in promotions]

    def add(self, promotion: PromotionRecord) -> None:
        with self._lock:
            self._promotions.append(copy.deepcopy(promotion))

    def list_all(self) -> list[PromotionRecord]:
        with self._lock:
            return copy.deepcopy(self._promotions)
