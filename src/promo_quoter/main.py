"""ASGI entry point (``promo_quoter.main:app``) and the ``promo-quoter-dev`` runner."""

import uvicorn

from promo_quoter.infrastructure.configuration import AppSettings
from promo_quoter.infrastructure.entrypoints.api.app_factory import create_app


def dev() -> None:
    """Serve the app with auto-reload on the configured host and port."""
    settings = AppSettings()
    uvicorn.run(
        "promo_quoter.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


app = create_app(AppSettings())
