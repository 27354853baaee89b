"""
Custom exceptions and error handlers for consistent error responses.

Provides standardized error codes and the handlers that turn a raised
exception into an OperationResult for the menu.
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from parcel_tracker.app.models.parcel import PRIORITY_MAX, PRIORITY_MIN
from parcel_tracker.app.schemas.result import OperationResult

logger = logging.getLogger("parcel_tracker")


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class MalformedInputError(AppException):
    """Raised when a field cannot be parsed as its expected type."""
    
    def __init__(self, field: str, value: Any = None):
        super().__init__(
            message=f"Invalid {field}.",
            error_code="ERR_MALFORMED_INPUT",
            details={"field": field, "value": value}
        )


class OutOfRangeError(AppException):
    """Raised when a numeric field falls outside its allowed range."""
    
    def __init__(self, field: str, minimum: int, maximum: int, value: Any = None):
        super().__init__(
            message=f"Invalid {field}. Must be between {minimum} and {maximum}.",
            error_code="ERR_OUT_OF_RANGE",
            details={"field": field, "min": minimum, "max": maximum, "value": value}
        )


class ParcelNotFoundError(AppException):
    """Raised when no active parcel matches the requested ID."""
    
    def __init__(self, parcel_id: Any):
        super().__init__(
            message=f"Parcel ID {parcel_id} not found in active records.",
            error_code="ERR_NOT_FOUND_001",
            details={"resource": "Parcel", "id": parcel_id}
        )


class DuplicateParcelError(AppException):
    """Raised when unique IDs are enforced and the ID is already active."""
    
    def __init__(self, parcel_id: int):
        super().__init__(
            message=f"Parcel ID {parcel_id} is already registered.",
            error_code="ERR_DUPLICATE_001",
            details={"resource": "Parcel", "id": parcel_id}
        )


class UnderflowError(AppException):
    """Raised when taking from an empty container."""


class QueueUnderflowError(UnderflowError):
    """Raised when dispatching from an empty loading queue."""
    
    def __init__(self):
        super().__init__(
            message="Loading queue is empty. (Underflow)",
            error_code="ERR_UNDERFLOW_QUEUE"
        )


class UndoUnderflowError(UnderflowError):
    """Raised when undoing with no recorded actions."""
    
    def __init__(self):
        super().__init__(
            message="Undo stack is empty (Underflow). No recent actions recorded.",
            error_code="ERR_UNDERFLOW_UNDO"
        )


# Error Handlers

def app_exception_handler(exc: AppException) -> OperationResult:
    """Handler for custom application exceptions."""
    logger.warning(exc.message, extra={"error_code": exc.error_code, "details": exc.details})
    return OperationResult(
        ok=False,
        error_code=exc.error_code,
        message=exc.message,
        details=exc.details
    )


def validation_exception_handler(exc: ValidationError) -> AppException:
    """
    Map the first pydantic validation error onto an application exception.
    
    Range violations become OutOfRangeError, everything else (unparseable
    numbers, wrong types) becomes MalformedInputError.
    """
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else "input"
    value = error.get("input")
    
    if error["type"] in ("greater_than_equal", "less_than_equal"):
        return OutOfRangeError(field, PRIORITY_MIN, PRIORITY_MAX, value)
    return MalformedInputError(field, value)
