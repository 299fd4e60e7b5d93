from abc import ABC, abstractmethod

from promo_quoter.core.domain.promotion import PromotionRecord


class PromotionPort(ABC):

    @abstractmethod
    def list_all(self) -> list[PromotionRecord]:
        """Returns every stored promotion, enabled or not."""
        pass
