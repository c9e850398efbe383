"""
Centralized error handling and logging for the Noteful API
"""

import json
import logging
import traceback
import uuid
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

# Context variable for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)

# Service error types and the HTTP status each one surfaces as
ERROR_STATUS_CODES = {
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT_ERROR": 409,
    "FOREIGN_KEY_ERROR": 400,
    "DATABASE_ERROR": 500,
}


class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    INCLUDE_TRACE_ID = True
    INCLUDE_TIMESTAMP = True


class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        include_traceback: bool = True
    ) -> str:
        """Log structured error with full context and return its trace id"""
        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": request.client.host if request.client else None,
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
            }
            if include_traceback:
                log_entry["exception"]["traceback"] = traceback.format_exc()

        logger.error(json.dumps(log_entry, indent=2, default=str))
        return trace_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a trace id to every request and echoes it in X-Trace-ID"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        request.state.trace_id = trace_id

        response = await call_next(request)
        response.headers["X-Trace-ID"] = trace_id
        return response


def _error_response(status_code: int, content: Dict[str, Any], trace_id: Optional[str]) -> JSONResponse:
    if ErrorHandlingConfig.INCLUDE_TRACE_ID and trace_id:
        content["trace_id"] = trace_id
    if ErrorHandlingConfig.INCLUDE_TIMESTAMP:
        content["timestamp"] = datetime.utcnow().isoformat()
    return JSONResponse(status_code=status_code, content=content)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions; only server errors are logged"""
    trace_id = None
    if exc.status_code >= 500:
        trace_id = StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            exception=exc,
            include_traceback=False
        )

    return _error_response(
        exc.status_code,
        {"error": f"HTTP {exc.status_code}", "message": exc.detail},
        trace_id
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle FastAPI validation errors (HTTP 422)"""
    validation_details = [
        {
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown"),
        }
        for error in exc.errors()
    ]

    logger.info(f"Request validation failed on {request.url.path}: {len(validation_details)} errors")

    return _error_response(
        422,
        {
            "error": "Validation Error",
            "message": "Request validation failed",
            "detail": validation_details,
            "error_count": len(validation_details)
        },
        request_id_var.get('')
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions without exposing internal details"""
    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc
    )

    return _error_response(
        500,
        {"error": "Internal Server Error", "message": "An unexpected error occurred"},
        trace_id
    )


def setup_error_handling(app):
    """Setup error handling for the FastAPI app"""
    app.add_middleware(RequestContextMiddleware)

    # Most specific first
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling initialized")


def raise_for_result(result) -> None:
    """Turn a failed ServiceResult into the matching HTTPException"""
    if result.success:
        return
    status_code = ERROR_STATUS_CODES.get(result.error_type, 500)
    raise HTTPException(status_code=status_code, detail=result.error)
