"""
Consolidated middleware and error handlers for the FreshSave API
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import AppError, ServiceValidationError
from services.validation import field_errors

logger = logging.getLogger("freshsave.middleware")


def _request_id(request: Request):
    return getattr(request.state, "request_id", None)


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses with a trace id"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started request_id=%s method=%s path=%s",
            request_id,
            request.method,
            request.url.path,
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed request_id=%s method=%s path=%s status=%s time=%.4fs",
                request_id,
                request.method,
                request.url.path,
                response.status_code,
                process_time,
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception:
            process_time = time.time() - start_time
            logger.error(
                "Request failed request_id=%s method=%s path=%s time=%.4fs",
                request_id,
                request.method,
                request.url.path,
                process_time,
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed bodies and path/query params like service validation errors"""
    error = ServiceValidationError.from_field_errors(field_errors(exc.errors()))
    logger.warning(
        "Validation error request_id=%s path=%s details=%s",
        _request_id(request),
        request.url.path,
        error.details,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(
        "HTTP %s request_id=%s path=%s: %s",
        exc.status_code,
        _request_id(request),
        request.url.path,
        exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "code": f"HTTP_{exc.status_code}"},
        headers=getattr(exc, "headers", None),
    )


async def app_error_handler(request: Request, exc: AppError):
    """Handle validation, conflict, auth and not-found errors"""
    logger.warning(
        "%s request_id=%s path=%s: %s",
        type(exc).__name__,
        _request_id(request),
        request.url.path,
        exc.message,
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors; internal detail only leaves the server outside production"""
    logger.exception(
        "Unexpected error request_id=%s path=%s", _request_id(request), request.url.path
    )

    settings = request.app.state.settings
    message = (
        "Internal server error"
        if settings.is_production()
        else f"{type(exc).__name__}: {exc}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": message, "code": "INTERNAL_SERVER_ERROR"},
    )
