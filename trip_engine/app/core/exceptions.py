"""
Custom exceptions and error handlers for consistent error responses.

Provides standardized error codes and global exception handlers.
Policy outcomes (blocked start, mismatch report, date conflict) are not
exceptions; they are returned as normal values by the domain layer.
"""

import logging
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from typing import Any, Dict

logger = logging.getLogger("trip_engine")


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(AppException):
    """Raised when an engine input is outside its documented domain."""
    
    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(
            message=f"Invalid {field}: {reason}",
            error_code="ERR_INPUT_001",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"field": field, "value": value}
        )


class InvalidTimeWindowError(AppException):
    """Raised when a time window policy is configured with inconsistent bounds."""
    
    def __init__(self, soft_minutes: float, hard_minutes: float):
        super().__init__(
            message=f"Soft window ({soft_minutes} min) must be non-negative and not exceed hard window ({hard_minutes} min)",
            error_code="ERR_INPUT_002",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"soft_minutes": soft_minutes, "hard_minutes": hard_minutes}
        )


class InvalidStatusTransitionError(AppException):
    """Raised when a trip status change is not allowed."""
    
    def __init__(self, current: str, target: str):
        super().__init__(
            message=f"Cannot move trip from {current} to {target}",
            error_code="ERR_TRIP_001",
            status_code=status.HTTP_409_CONFLICT,
            details={"current": current, "target": target}
        )


# Global Exception Handlers

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": exc.error_code,
            "message": exc.message,
            "details": exc.details
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for FastAPI HTTPException with standardized format."""
    error_code_map = {
        400: "ERR_BAD_REQUEST",
        404: "ERR_NOT_FOUND",
        405: "ERR_METHOD_NOT_ALLOWED",
        409: "ERR_CONFLICT",
        500: "ERR_INTERNAL_SERVER"
    }
    
    error_code = error_code_map.get(exc.status_code, "ERR_UNKNOWN")
    
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": exc.detail,
            "details": {}
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error_code": "ERR_VALIDATION",
            "message": "Validation error",
            "details": {
                "errors": jsonable_errors(exc)
            }
        }
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Strip non-serializable context (e.g. the raised ValueError) from validation errors."""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.exception("Unhandled exception: %s", type(exc).__name__)
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error_code": "ERR_INTERNAL_SERVER",
            "message": "An internal server error occurred",
            "details": {}
        }
    )
