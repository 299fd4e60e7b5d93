from abc import ABC, abstractmethod
from collections.abc import Sequence

from promo_quoter.core.domain.catalog import Product


class ProductPort(ABC):

    @abstractmethod
    def find_all_by_ids(self, ids: Sequence[int]) -> list[Product]:
        """Returns the products found. Missing ids are simply absent."""
        pass

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        pass

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persists a stock update.

        Raises OptimisticConflictError when ``product.version`` no longer
        matches the stored version.
        """
        pass
