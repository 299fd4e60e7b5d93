from promo_quoter.infrastructure.configuration.app_settings import (
    AppSettings,
    LogFormat,
    StoreBackend,
)

__all__ = ["AppSettings", "LogFormat", "StoreBackend"]
