import copy
import threading
from collections.abc import Iterable, Sequence

from promo_quoter.core.application.exceptions import NotFoundError, OptimisticConflictError
from promo_quoter.core.application.ports import ProductPort
from promo_quoter.core.domain.catalog import Product


class InMemoryProductRepository(ProductPort):
    """Product store with version-checked writes. Reads hand out copies."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._lock = threading.Lock()
        self._products: dict[int, Product] = {p.id: copy.deepcopy(p) for p in products}

    def add(self, product: Product) -> None:
        with self._lock:
            self._products[product.id] = copy.deepcopy(product)

    def find_all_by_ids(self, ids: Sequence[int]) -> list[Product]:
        with self._lock:
            unique_ids = dict.fromkeys(ids)
            return [copy.deepcopy(self._products[i]) for i in unique_ids if i in self._products]

    def find_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            product = self._products.get(product_id)
            return copy.deepcopy(product) if product is not None else None

    def save(self, product: Product) -> Product:
        with self._lock:
            stored = self._products.get(product.id)
            if stored is None:
                raise NotFoundError(f"Product not found: {product.id}", context={"product_id": product.id})
            if stored.version != product.version:
                raise OptimisticConflictError(
                    f"Product {product.id} was modified concurrently "
                    f"(expected version {product.version}, found {stored.version})",
                    context={"product_id": product.id, "expected": product.version, "found": stored.version},
                )
            product.version = stored.version + 1
            self._products[product.id] = copy.deepcopy(product)
            return copy.deepcopy(product)

    def snapshot(self) -> dict[int, Product]:
        with self._lock:
            return copy.deepcopy(self._products)

    def restore(self, state: dict[int, Product]) -> None:
        with self._lock:
            self._products = copy.deepcopy(state)
