"""Functional DI container: builds fully-wired services from settings.

Convenient free-function API for FastAPI dependency injection.
"""

import threading
from dataclasses import dataclass

from fastapi import Request

from promo_quoter.core.application.mappers import PromotionDefMapper
from promo_quoter.core.application.pipeline import PromotionPipeline
from promo_quoter.core.application.ports import IdempotencyPort
from promo_quoter.core.application.rules import default_rules
from promo_quoter.core.application.services import OrderConfirmationService, QuotationService
from promo_quoter.infrastructure.common.retry import RetryPolicy
from promo_quoter.infrastructure.configuration import AppSettings, StoreBackend
from promo_quoter.infrastructure.observability.logger_factory_service import get_logger
from promo_quoter.infrastructure.repositories import (
    IdempotencyStoreFileAdapter,
    InMemoryIdempotencyRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryPromotionRepository,
    OrderStoreFileAdapter,
    SeedDataLoader,
)
from promo_quoter.infrastructure.transactions import ConfirmationBoundary, InMemoryUnitOfWork

logger = get_logger("container")

OrderStore = InMemoryOrderRepository | OrderStoreFileAdapter


@dataclass
class Container:
    settings: AppSettings
    products: InMemoryProductRepository
    promotions: InMemoryPromotionRepository
    orders: OrderStore
    idempotency: IdempotencyPort
    quotation_service: QuotationService
    confirmation_service: OrderConfirmationService
    confirmation_boundary: ConfirmationBoundary


def _build_order_stores(settings: AppSettings) -> tuple[OrderStore, IdempotencyPort]:
    """Orders and idempotency keys share a backend so a stored key always resolves to its order."""
    if settings.store_backend == StoreBackend.FILE:
        return (
            OrderStoreFileAdapter(settings.runtime_data_dir),
            IdempotencyStoreFileAdapter(settings.runtime_data_dir),
        )
    return InMemoryOrderRepository(), InMemoryIdempotencyRepository()


def _build_retry_policy(settings: AppSettings) -> RetryPolicy:
    settings.validate_retry_window()
    return RetryPolicy(
        max_attempts=settings.confirm_max_attempts,
        initial_wait=settings.confirm_retry_initial_wait,
        max_wait=settings.confirm_retry_max_wait,
        jitter=settings.confirm_retry_jitter,
    )


# === PUBLIC BUILDERS ===


def build_container(settings: AppSettings) -> Container:
    products = InMemoryProductRepository()
    promotions = InMemoryPromotionRepository()
    if settings.seed_data_path is not None:
        seed = SeedDataLoader.load(settings.seed_data_path)
        for product in seed.products:
            products.add(product)
        for promotion in seed.promotions:
            promotions.add(promotion)

    orders, idempotency = _build_order_stores(settings)

    quotation = QuotationService(
        products=products,
        promotions=promotions,
        pipeline=PromotionPipeline(default_rules()),
        mapper=PromotionDefMapper(default_priority=settings.default_promotion_priority),
    )
    confirmation = OrderConfirmationService(
        products=products,
        orders=orders,
        idempotency=idempotency,
        quotation=quotation,
    )

    lock = threading.RLock()
    stores = (products, orders, idempotency)
    boundary = ConfirmationBoundary(
        service=confirmation,
        unit_of_work_factory=lambda: InMemoryUnitOfWork(stores, lock),
        retry_policy=_build_retry_policy(settings),
    )

    logger.info(
        "Container built",
        store_backend=settings.store_backend.value,
        confirm_max_attempts=settings.confirm_max_attempts,
    )
    return Container(
        settings=settings,
        products=products,
        promotions=promotions,
        orders=orders,
        idempotency=idempotency,
        quotation_service=quotation,
        confirmation_service=confirmation,
        confirmation_boundary=boundary,
    )


def get_container(request: Request) -> Container:
    return request.app.state.container
