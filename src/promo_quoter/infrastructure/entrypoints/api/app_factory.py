from fastapi import FastAPI

from promo_quoter.infrastructure.configuration import AppSettings
from promo_quoter.infrastructure.entrypoints.api.cart_router import router as cart_router
from promo_quoter.infrastructure.entrypoints.api.error_handlers import register_error_handlers
from promo_quoter.infrastructure.entrypoints.api.health_router import router as health_router
from promo_quoter.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from promo_quoter.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from promo_quoter.infrastructure.resolution.container import Container, build_container

logger = get_logger("app_factory")


def create_app(settings: AppSettings, container: Container | None = None) -> FastAPI:
    configure_logging(settings)
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        env=settings.env,
        store_backend=settings.store_backend.value,
        seed_data_path=str(settings.seed_data_path) if settings.seed_data_path else None,
    )

    app = FastAPI(title=settings.app_name)
    app.state.container = container or build_container(settings)
    register_error_handlers(app)
    # Outermost: converted error responses carry the correlation id too
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router)
    app.include_router(cart_router)

    return app
