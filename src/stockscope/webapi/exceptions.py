"""Error handling for the StockScope API.

Every failure leaves the API as an ``ErrorResponse`` envelope carrying the
error type, message, status code and the request id.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..config.logging import get_logger
from ..exceptions import StockScopeError
from .models.responses import ErrorResponse

logger = get_logger(__name__)


def _error_response(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    error: Dict[str, Any] = {
        "type": error_type,
        "message": message,
        "status_code": status_code,
    }
    if details is not None:
        error["details"] = details

    envelope = ErrorResponse(
        success=False,
        error=error,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(
        status_code=status_code, content=envelope.model_dump(mode="json")
    )


def _request_context(request: Request) -> Dict[str, Any]:
    return {
        "request_id": getattr(request.state, "request_id", None),
        "path": request.url.path,
        "method": request.method,
    }


async def stockscope_exception_handler(
    request: Request, exc: StockScopeError
) -> JSONResponse:
    """Map domain errors onto their own status codes."""
    # Client-side problems (bad symbol, throttling) are warnings
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Request failed",
        exception_type=type(exc).__name__,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        **_request_context(request),
    )
    return _error_response(
        request, exc.status_code, type(exc).__name__, exc.message, exc.details
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests field by field."""
    field_errors = {
        ".".join(str(loc) for loc in error["loc"]): error["msg"]
        for error in exc.errors()
    }
    logger.warning(
        "Request validation failed",
        field_errors=field_errors,
        **_request_context(request),
    )
    return _error_response(
        request,
        422,
        "ValidationError",
        "Request validation failed",
        {"field_errors": field_errors},
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning(
        "HTTP exception",
        status_code=exc.status_code,
        detail=exc.detail,
        **_request_context(request),
    )
    return _error_response(request, exc.status_code, "HTTPException", str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all; internal details stay in the log."""
    logger.error(
        "Unhandled exception",
        exception_type=type(exc).__name__,
        message=str(exc),
        exc_info=True,
        **_request_context(request),
    )
    return _error_response(
        request, 500, "InternalServerError", "An unexpected error occurred"
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI app."""
    app.add_exception_handler(StockScopeError, stockscope_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
