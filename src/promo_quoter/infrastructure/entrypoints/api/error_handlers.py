"""Maps failures to HTTP responses.

- request validation -> 400 ``{"errors": ["<field path>: <message>"]}``
- NotFoundError -> 404 ``{"error": message}``
- any other PricingError -> 409 ``{"error": message}``
- anything else raised while handling a request -> 409 ``{"error": message}``
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from promo_quoter.core.application.exceptions import NotFoundError, PricingError
from promo_quoter.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("api.errors")


def _status_for(exc: PricingError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    # InsufficientStock, OptimisticConflict and every other conflict
    return status.HTTP_409_CONFLICT


def _field_errors(exc: RequestValidationError) -> list[str]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "header")]
        errors.append(f"{'.'.join(loc)}: {err.get('msg', 'invalid')}")
    return errors


class UnexpectedErrorMiddleware:
    """Turns an exception no handler claimed into a 409 conflict response.

    Errors raised after the response has started are re-raised.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
        except Exception as exc:
            if response_started:
                raise
            logger.error(
                "Unexpected failure",
                context_endpoint=scope.get("path"),
                http_status=status.HTTP_409_CONFLICT,
                error_type=type(exc).__name__,
                error_details=str(exc),
                exc_info=True,
            )
            response = JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": str(exc)})
            await response(scope, receive, send)


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers. Call before adding outer middleware such as request correlation."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Any:
        errors = _field_errors(exc)
        logger.warning("Request validation failed", context_endpoint=request.url.path, errors=errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})

    @app.exception_handler(PricingError)
    async def pricing_exception_handler(request: Request, exc: PricingError) -> Any:
        status_code = _status_for(exc)
        logger.warning(
            "Request rejected",
            context_endpoint=request.url.path,
            http_status=status_code,
            error_type=type(exc).__name__,
            error_details=str(exc),
            error_retryable=exc.retryable,
        )
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    app.add_middleware(UnexpectedErrorMiddleware)
