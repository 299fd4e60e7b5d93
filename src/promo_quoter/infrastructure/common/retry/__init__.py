from promo_quoter.infrastructure.common.retry.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
