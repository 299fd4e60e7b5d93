from promo_quoter.infrastructure.repositories.idempotency_store_file_adapter import (
    IdempotencyStoreFileAdapter,
)
from promo_quoter.infrastructure.repositories.in_memory_idempotency_repository import (
    InMemoryIdempotencyRepository,
)
from promo_quoter.infrastructure.repositories.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from promo_quoter.infrastructure.repositories.in_memory_product_repository import (
    InMemoryProductRepository,
)
from promo_quoter.infrastructure.repositories.in_memory_promotion_repository import (
    InMemoryPromotionRepository,
)
from promo_quoter.infrastructure.repositories.json_file_store import JsonFileStore
from promo_quoter.infrastructure.repositories.order_store_file_adapter import OrderStoreFileAdapter
from promo_quoter.infrastructure.repositories.seed_data_loader import SeedData, SeedDataLoader

__all__ = [
    "IdempotencyStoreFileAdapter",
    "InMemoryIdempotencyRepository",
    "InMemoryOrderRepository",
    "InMemoryProductRepository",
    "InMemoryPromotionRepository",
    "JsonFileStore",
    "OrderStoreFileAdapter",
    "SeedData",
    "SeedDataLoader",
]
