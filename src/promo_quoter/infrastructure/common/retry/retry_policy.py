from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from promo_quoter.core.application.exceptions import PricingError

_T = TypeVar("_T")

logger = structlog.get_logger()


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, PricingError) and exc.retryable


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Retrying after conflict",
        processing_status="RETRY",
        processing_attempt=retry_state.attempt_number,
        error_type=type(exc).__name__,
        error_details=str(exc),
        error_retryable=True,
    )


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    max_attempts: int = 1  # Default: fail fast (1 attempt, 0 retries)
    initial_wait: float = 0.05
    max_wait: float = 1.0
    jitter: float = 0.05

    def run(self, fn: Callable[[], _T]) -> _T:
        try:
            return self._retrying()(fn)
        except RetryError as err:
            raise err.last_attempt.result()  # type: ignore[misc]

    def _retrying(self) -> Retrying:
        return Retrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.initial_wait, max=self.max_wait) + wait_random(0, self.jitter),
            before_sleep=_log_retry,
            reraise=True,
        )
