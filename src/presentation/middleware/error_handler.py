"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import DomainException, InstrumentNotFoundException
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _request_id(request: Request) -> str | None:
    # Catch-all handlers run outside RequestContextMiddleware
    return get_request_id() or getattr(request.state, "request_id", None)


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": _request_id(request),
        },
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        if location:
            parts.append(f"{location}: {error.get('msg')}")
        else:
            parts.append(str(error.get("msg")))
    return "; ".join(parts) or "Malformed request body"


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InstrumentNotFoundException)
    async def instrument_not_found_handler(
        request: Request,
        exc: InstrumentNotFoundException,
    ) -> JSONResponse:
        """Handle unsupported investment instruments."""
        return _error_response(request, 404, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed or mistyped request bodies."""
        message = _describe_validation_errors(exc)
        logger.info(
            "invalid_request",
            request_id=_request_id(request),
            path=request.url.path,
            message=message,
        )
        return _error_response(request, 400, "INVALID_REQUEST", message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=_request_id(request),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(request, 400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=_request_id(request),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(
            request, 500, "INTERNAL_ERROR", "An unexpected error occurred."
        )
